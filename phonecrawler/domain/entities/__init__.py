from .phone_number import (
    InvalidPhoneNumberError,
    canonicalize,
    digits_only,
    is_valid_canonical,
    normalize_lookup_query,
)
from .crawl_site import CrawlSite
from .crawl_summary import CrawlSummary, FailedSite

__all__ = [
    "InvalidPhoneNumberError",
    "canonicalize",
    "digits_only",
    "is_valid_canonical",
    "normalize_lookup_query",
    "CrawlSite",
    "CrawlSummary",
    "FailedSite",
]
