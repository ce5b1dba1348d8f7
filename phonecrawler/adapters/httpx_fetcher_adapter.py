"""
HttpxFetcherAdapter - Implements IPageFetcher.
Plain GET of a public page with httpx. The whole request (connect + read)
is bounded by one deadline, and failures come back as outcome values.
"""

import asyncio
import logging

import httpx

from ..domain.interfaces.i_page_fetcher import (
    FetchOutcome,
    FetchSuccess,
    FetchTimeout,
    HttpFailure,
    IPageFetcher,
    NetworkError,
)

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; LatvianPhoneCrawler/1.0)"


class HttpxFetcherAdapter(IPageFetcher):
    """
    Fetches pages over http or https, following the URL's scheme and redirects.

    verify_tls defaults to False: the crawl enumerates government sites, several
    of which serve broken certificate chains. Set CRAWLER_VERIFY_TLS=true to
    enforce validation.
    """

    def __init__(self, verify_tls: bool = False, user_agent: str = USER_AGENT):
        self.verify_tls = verify_tls
        self.user_agent = user_agent

    async def fetch(self, url: str, timeout_seconds: float) -> FetchOutcome:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(timeout_seconds),
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
                verify=self.verify_tls,
            ) as client:
                response = await asyncio.wait_for(
                    client.get(url), timeout=timeout_seconds
                )

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning(f"[Fetch] Timeout after {timeout_seconds}s: {url}")
            return FetchTimeout(timeout_seconds=timeout_seconds)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"[Fetch] Network error for {url}: {e!r}")
            return NetworkError(message=str(e) or e.__class__.__name__)

        if not response.is_success:
            logger.warning(
                f"[Fetch] HTTP error for {url}: "
                f"{response.status_code} {response.reason_phrase}"
            )
            return HttpFailure(
                status_code=response.status_code,
                message=response.reason_phrase,
            )

        logger.debug(f"[Fetch] {url} → {response.status_code}, {len(response.text)} chars")
        return FetchSuccess(body=response.text)
