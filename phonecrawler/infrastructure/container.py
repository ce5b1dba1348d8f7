"""
Dependency Injection Container.
Wires adapters to their ports and composes the use cases.
This is the ONLY place that knows about concrete implementations;
the store handle is built once here and passed to everything that needs it.
"""

from .config import Config
from ..adapters.httpx_fetcher_adapter import HttpxFetcherAdapter
from ..adapters.memory_store_adapter import InMemoryPhoneStore
from ..adapters.redis_store_adapter import RedisPhoneStore
from ..use_cases.crawl_sites import CrawlSitesUseCase
from ..use_cases.extract_phone_numbers import ExtractPhoneNumbersUseCase
from ..use_cases.lookup_phone import LookupPhoneUseCase


class Container:
    """
    Composes the full application object graph.
    Swap any adapter by changing a single line here.
    """

    def __init__(self, config: Config):
        self.config = config

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        if config.store_backend == "memory":
            self.store = InMemoryPhoneStore()
        else:
            self.store = RedisPhoneStore(url=config.redis_url)
        self.fetcher = HttpxFetcherAdapter(verify_tls=config.verify_tls)

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.extract_use_case = ExtractPhoneNumbersUseCase()
        self.crawl_use_case = CrawlSitesUseCase(
            fetcher=self.fetcher,
            store=self.store,
            extractor=self.extract_use_case,
        )
        self.lookup_use_case = LookupPhoneUseCase(store=self.store)

    async def close(self) -> None:
        await self.store.close()
