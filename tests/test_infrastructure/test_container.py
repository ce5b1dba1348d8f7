"""
Tests for the DI Container.

The Redis adapter is patched so no connection is attempted. The goal is to
verify that Container wires up the full object graph and shares one store.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from phonecrawler.adapters.httpx_fetcher_adapter import HttpxFetcherAdapter
from phonecrawler.adapters.memory_store_adapter import InMemoryPhoneStore
from phonecrawler.infrastructure.config import Config
from phonecrawler.infrastructure.container import Container
from phonecrawler.use_cases.crawl_sites import CrawlSitesUseCase
from phonecrawler.use_cases.lookup_phone import LookupPhoneUseCase


REDIS_CONFIG = Config(redis_url="redis://fake:6379", verify_tls=True)
MEMORY_CONFIG = Config(store_backend="memory")


def make_container(config: Config = REDIS_CONFIG):
    with patch("phonecrawler.infrastructure.container.RedisPhoneStore") as mock_redis:
        mock_redis.return_value = MagicMock()
        container = Container(config)
    return container, mock_redis


class TestContainerWiring:
    def test_redis_store_built_from_config(self):
        container, mock_redis = make_container()
        mock_redis.assert_called_once_with(url="redis://fake:6379")
        assert container.store is mock_redis.return_value

    def test_memory_backend(self):
        container = Container(MEMORY_CONFIG)
        assert isinstance(container.store, InMemoryPhoneStore)

    def test_fetcher_gets_tls_policy(self):
        container, _ = make_container()
        assert isinstance(container.fetcher, HttpxFetcherAdapter)
        assert container.fetcher.verify_tls is True

    def test_use_cases_share_one_store(self):
        container, _ = make_container()
        assert isinstance(container.crawl_use_case, CrawlSitesUseCase)
        assert isinstance(container.lookup_use_case, LookupPhoneUseCase)
        assert container.crawl_use_case.store is container.store
        assert container.lookup_use_case.store is container.store

    def test_crawl_uses_container_extractor_and_fetcher(self):
        container, _ = make_container()
        assert container.crawl_use_case.extractor is container.extract_use_case
        assert container.crawl_use_case.fetcher is container.fetcher


@pytest.mark.asyncio
class TestContainerClose:
    async def test_close_closes_store(self):
        container = Container(MEMORY_CONFIG)
        container.store = AsyncMock()
        await container.close()
        container.store.close.assert_called_once()
