"""
CrawlSitesUseCase - Top-level orchestrator.

Walks the site list one site at a time: fetch, extract, store. A failing site
is recorded in the CrawlSummary and the run moves on to the next one. The
summary is finalized in a finally block so it is reported even when the run
is interrupted.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from ..domain.entities.crawl_site import CrawlSite
from ..domain.entities.crawl_summary import CrawlSummary
from ..domain.entities.phone_number import COUNTRY_CODE
from ..domain.interfaces.i_page_fetcher import IPageFetcher
from ..domain.interfaces.i_phone_store import IPhoneStore
from .extract_phone_numbers import (
    ExtractPhoneNumbersRequest,
    ExtractPhoneNumbersUseCase,
)

logger = logging.getLogger(__name__)

_SEP = "=" * 60
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass
class CrawlSitesRequest:
    sites: List[CrawlSite]
    clear_store: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cancel_event: Optional[asyncio.Event] = None
    # Caller-owned summary, still readable if the run is cancelled mid-flight
    summary: Optional[CrawlSummary] = None


@dataclass
class CrawlSitesResponse:
    summary: CrawlSummary


class CrawlSitesUseCase:
    """
    Sequential crawl over a fixed site list.
    - Optionally wipes the store first
    - Per site: Fetching -> Extracting -> Stored / Skipped, or Failed
    - Never retries; a failure never aborts the run
    """

    def __init__(
        self,
        fetcher: IPageFetcher,
        store: IPhoneStore,
        extractor: Optional[ExtractPhoneNumbersUseCase] = None,
    ):
        self.fetcher = fetcher
        self.store = store
        self.extractor = extractor or ExtractPhoneNumbersUseCase()

    async def execute(self, request: CrawlSitesRequest) -> CrawlSitesResponse:
        total = len(request.sites)
        summary = request.summary if request.summary is not None else CrawlSummary()
        summary.sites_total = total
        wall_start = time.time()

        logger.info(_SEP)
        logger.info(f"[Crawl] *** CRAWL STARTING *** {total} site(s), timeout={request.timeout_seconds}s")
        logger.info(_SEP)

        try:
            if request.clear_store:
                logger.info("[Crawl] Clearing previously stored numbers")
                await self.store.clear()

            for idx, site in enumerate(request.sites):
                if request.cancel_event is not None and request.cancel_event.is_set():
                    logger.warning(
                        f"[Crawl] Cancellation requested, skipping remaining "
                        f"{total - idx} site(s)"
                    )
                    summary.cancelled = True
                    break

                logger.info(f"[Crawl] [{idx + 1}/{total}] {site.name} → {site.url}")
                await self._crawl_one(site, summary, request.timeout_seconds)

        except asyncio.CancelledError:
            summary.cancelled = True
            logger.warning("[Crawl] Run cancelled while a site was in progress")
            raise

        finally:
            await self._finish(summary, wall_start)

        return CrawlSitesResponse(summary=summary)

    async def _crawl_one(
        self, site: CrawlSite, summary: CrawlSummary, timeout_seconds: float
    ) -> None:
        summary.record_attempt()

        try:
            outcome = await self.fetcher.fetch(site.url, timeout_seconds)
        except Exception as exc:
            logger.error(
                f"[Crawl]     FAILED ✗ {site.url}: fetcher raised {exc!r}", exc_info=True
            )
            summary.record_failure(site.url, f"Fetch error: {exc}")
            return

        if not outcome.ok:
            reason = outcome.describe()
            logger.warning(f"[Crawl]     FAILED ✗ {site.url}: {reason}")
            summary.record_failure(site.url, reason)
            return

        try:
            numbers = self.extractor.execute(
                ExtractPhoneNumbersRequest(text=outcome.body)
            ).numbers

            for phone in sorted(numbers):
                await self.store.add(phone, site.url)

        except Exception as exc:
            logger.error(
                f"[Crawl]     FAILED ✗ {site.url}: error={exc!r}", exc_info=True
            )
            summary.record_failure(site.url, str(exc) or exc.__class__.__name__)
            return

        if numbers:
            logger.info(f"[Crawl]     Stored ✓ {len(numbers)} unique phone number(s)")
        else:
            logger.info("[Crawl]     Skipped, no phone numbers found")
        summary.record_success(len(numbers))

    async def _finish(self, summary: CrawlSummary, wall_start: float) -> None:
        if summary.sites_succeeded > 0:
            try:
                keys = await self.store.keys_with_prefix(COUNTRY_CODE)
                summary.unique_numbers_stored = len(keys)
            except Exception as exc:
                logger.error(
                    f"[Crawl] Could not count unique numbers in store: {exc!r}",
                    exc_info=True,
                )

        summary.elapsed_seconds = round(time.time() - wall_start, 2)
        summary.finalize()

        logger.info(_SEP)
        logger.info("[Crawl] *** CRAWL COMPLETE ***")
        logger.info(
            f"[Crawl] attempted={summary.sites_attempted}/{summary.sites_total} | "
            f"succeeded={summary.sites_succeeded} | "
            f"numbers={summary.total_numbers_extracted} | "
            f"unique_in_store={summary.unique_numbers_stored} | "
            f"elapsed={summary.elapsed_seconds:.2f}s"
        )
        if summary.has_failures:
            logger.error("[Crawl] ── FAILURE SUMMARY ──")
            for failed in summary.failed_sites:
                logger.error(f"[Crawl]   {failed.url}: {failed.error}")
        logger.info(_SEP)
