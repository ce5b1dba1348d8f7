"""
InMemoryPhoneStore - Implements IPhoneStore with plain dicts.
Used by the test suite and by STORE_BACKEND=memory local runs.
"""

from collections import defaultdict
from typing import Dict, List, Set

from ..domain.interfaces.i_phone_store import IPhoneStore


class InMemoryPhoneStore(IPhoneStore):
    def __init__(self):
        self._data: Dict[str, Set[str]] = defaultdict(set)

    async def add(self, phone: str, url: str) -> None:
        self._data[phone].add(url)

    async def members(self, phone: str) -> Set[str]:
        return set(self._data.get(phone, ()))

    async def keys_with_prefix(self, prefix: str) -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]

    async def clear(self) -> None:
        self._data.clear()

    async def close(self) -> None:
        pass
