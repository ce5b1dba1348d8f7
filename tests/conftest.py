"""
Root conftest.py — shared fixtures and helpers for the entire test suite.

Provides:
- CrawlSite / fetch outcome factory helpers
- Mock fetcher / store fixtures (for use-case tests)
- An in-memory store (for integration-style unit tests)
"""

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from phonecrawler.adapters.memory_store_adapter import InMemoryPhoneStore
from phonecrawler.domain.entities.crawl_site import CrawlSite
from phonecrawler.domain.interfaces.i_page_fetcher import (
    FetchSuccess,
    FetchTimeout,
    HttpFailure,
    NetworkError,
)


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_site(
    name: str = "Valsts kanceleja",
    url: str = "https://www.mk.gov.lv/lv/kontakti",
) -> CrawlSite:
    """Create a CrawlSite with sensible test defaults."""
    return CrawlSite(name=name, url=url)


def make_sites(count: int) -> list:
    return [
        make_site(name=f"Site {i}", url=f"https://site{i}.gov.lv")
        for i in range(count)
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Fetch outcome factories
# ─────────────────────────────────────────────────────────────────────────────


def make_page(body: Optional[str] = "Kontakti: 22811907") -> FetchSuccess:
    return FetchSuccess(body=body)


def make_http_failure(
    status_code: int = 500, message: str = "Internal Server Error"
) -> HttpFailure:
    return HttpFailure(status_code=status_code, message=message)


def make_timeout(timeout_seconds: float = 30) -> FetchTimeout:
    return FetchTimeout(timeout_seconds=timeout_seconds)


def make_network_error(message: str = "Name or service not known") -> NetworkError:
    return NetworkError(message=message)


# ─────────────────────────────────────────────────────────────────────────────
# Mock gateway fixtures (inject into use-case tests)
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_fetcher():
    """AsyncMock for IPageFetcher. Defaults to a page with one number."""
    mock = AsyncMock()
    mock.fetch.return_value = make_page()
    return mock


@pytest.fixture
def mock_store():
    """AsyncMock for IPhoneStore."""
    mock = AsyncMock()
    mock.add.return_value = None
    mock.members.return_value = set()
    mock.keys_with_prefix.return_value = []
    mock.clear.return_value = None
    return mock


@pytest.fixture
def memory_store():
    """Real in-memory store, for tests that check what ends up stored."""
    return InMemoryPhoneStore()


@pytest.fixture
def sample_site():
    return make_site()
