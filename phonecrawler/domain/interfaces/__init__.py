from .i_page_fetcher import (
    FetchOutcome,
    FetchSuccess,
    FetchTimeout,
    HttpFailure,
    IPageFetcher,
    NetworkError,
)
from .i_phone_store import IPhoneStore, StoreUnavailableError

__all__ = [
    "FetchOutcome",
    "FetchSuccess",
    "FetchTimeout",
    "HttpFailure",
    "IPageFetcher",
    "NetworkError",
    "IPhoneStore",
    "StoreUnavailableError",
]
