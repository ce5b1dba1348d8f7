"""
CrawlSite - One crawl target from the site list.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CrawlSite:
    name: str
    url: str

    @classmethod
    def from_dict(cls, row: Any) -> "CrawlSite":
        """Build a site from a {"name": ..., "url": ...} record."""
        if not isinstance(row, dict):
            raise ValueError(f"Site entry must be an object, got {type(row).__name__}")

        url = row.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValueError(f"Site entry has no url: {row!r}")

        name = row.get("name")
        return cls(name=str(name) if name else url.strip(), url=url.strip())
