"""
IPageFetcher - Port: retrieve the text of one page within a time budget.
Outcomes are values, not exceptions: the crawler only needs to tell a body
apart from the three failure kinds when it reports.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union


@dataclass
class FetchSuccess:
    body: str
    ok = True

    def describe(self) -> str:
        return "OK"


@dataclass
class HttpFailure:
    status_code: int
    message: str = ""
    ok = False

    def describe(self) -> str:
        return f"HTTP error: {self.status_code} {self.message}".rstrip()


@dataclass
class FetchTimeout:
    timeout_seconds: float
    ok = False

    def describe(self) -> str:
        return f"Timeout after {self.timeout_seconds:g} seconds"


@dataclass
class NetworkError:
    message: str
    ok = False

    def describe(self) -> str:
        return f"Network error: {self.message}"


FetchOutcome = Union[FetchSuccess, HttpFailure, FetchTimeout, NetworkError]


class IPageFetcher(ABC):
    """Port for downloading a single page."""

    @abstractmethod
    async def fetch(self, url: str, timeout_seconds: float) -> FetchOutcome:
        """
        GETs the URL and returns its body on a 2xx response.
        Must never raise for HTTP, timeout or transport failures.
        """
        pass
