"""
CrawlSummary - Run-level counters for one crawl pass.
Built incrementally by CrawlSitesUseCase, read-only once finalized.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

_SEP = "=" * 60


@dataclass
class FailedSite:
    url: str
    error: str


@dataclass
class CrawlSummary:
    """
    Aggregate outcome of a crawl run.

    total_numbers_extracted counts each site's deduplicated set, so a number
    found on two sites contributes two. unique_numbers_stored is the global
    count read back from the store at the end of the run.
    """

    sites_total: int = 0
    sites_attempted: int = 0
    sites_succeeded: int = 0
    total_numbers_extracted: int = 0
    failed_sites: List[FailedSite] = field(default_factory=list)
    unique_numbers_stored: Optional[int] = None
    cancelled: bool = False
    elapsed_seconds: float = 0.0
    started_at: datetime = field(default_factory=datetime.utcnow)
    _finalized: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    def sites_failed(self) -> int:
        return len(self.failed_sites)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_sites)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("CrawlSummary is finalized and can no longer change")

    def record_attempt(self) -> None:
        self._check_open()
        self.sites_attempted += 1

    def record_success(self, numbers_found: int) -> None:
        self._check_open()
        self.sites_succeeded += 1
        self.total_numbers_extracted += numbers_found

    def record_failure(self, url: str, error: str) -> None:
        self._check_open()
        self.failed_sites.append(FailedSite(url=url, error=error))

    def finalize(self) -> None:
        self._finalized = True

    def format_summary(self) -> str:
        """Render the end-of-run report."""
        lines = [
            _SEP,
            "CRAWLING SUMMARY",
            _SEP,
            f"Started: {self.started_at:%Y-%m-%d %H:%M:%S} UTC",
            f"URLs processed: {self.sites_succeeded}/{self.sites_total}",
            f"URLs attempted: {self.sites_attempted}",
            f"Total numbers extracted: {self.total_numbers_extracted}",
        ]
        if self.unique_numbers_stored is not None:
            lines.append(f"Unique numbers in store: {self.unique_numbers_stored}")
        if self.cancelled:
            lines.append("Run was interrupted before all sites were crawled")
        if self.failed_sites:
            lines.append(f"Failed URLs: {self.sites_failed}")
            for failed in self.failed_sites:
                lines.append(f"   - {failed.url}: {failed.error}")
        lines.append(f"Elapsed: {self.elapsed_seconds:.1f}s")
        lines.append(_SEP)
        return "\n".join(lines)
