"""
RedisPhoneStore - Implements IPhoneStore.
Each canonical number is a Redis key holding a SET of page URLs.
"""

import logging
from typing import List, Optional, Set

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..domain.interfaces.i_phone_store import IPhoneStore, StoreUnavailableError

logger = logging.getLogger(__name__)

SCAN_BATCH = 500


class RedisPhoneStore(IPhoneStore):
    """
    Redis-backed number index.
    SADD gives the idempotent add for free; SCAN is used instead of KEYS so
    counting does not block the server on a large database.
    """

    def __init__(self, url: str, client: Optional[redis.Redis] = None):
        self.url = url
        self.client: redis.Redis = client or redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
        )

    async def add(self, phone: str, url: str) -> None:
        await self.client.sadd(phone, url)

    async def members(self, phone: str) -> Set[str]:
        return set(await self.client.smembers(phone))

    async def keys_with_prefix(self, prefix: str) -> List[str]:
        keys = []
        async for key in self.client.scan_iter(match=f"{prefix}*", count=SCAN_BATCH):
            keys.append(key)
        return keys

    async def clear(self) -> None:
        logger.info(f"[Store] Flushing Redis database at {_redact(self.url)}")
        try:
            await self.client.flushdb()
        except RedisError as e:
            raise StoreUnavailableError(f"Could not clear Redis at {_redact(self.url)}: {e}") from e

    async def close(self) -> None:
        await self.client.aclose()


def _redact(url: str) -> str:
    return url.split("@")[-1] if "@" in url else url
