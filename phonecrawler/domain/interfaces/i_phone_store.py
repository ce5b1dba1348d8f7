"""
IPhoneStore - Port: phone number -> set of page URLs.
The domain doesn't know about Redis.
"""

from abc import ABC, abstractmethod
from typing import List, Set


class StoreUnavailableError(Exception):
    """The backing store could not be reached."""


class IPhoneStore(ABC):
    """Port for persisting which pages mention which canonical numbers."""

    @abstractmethod
    async def add(self, phone: str, url: str) -> None:
        """Add url to the phone's set. Re-adding an existing url is a no-op."""
        pass

    @abstractmethod
    async def members(self, phone: str) -> Set[str]:
        """Return every url recorded for the phone (empty set if unknown)."""
        pass

    @abstractmethod
    async def keys_with_prefix(self, prefix: str) -> List[str]:
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every stored number-to-url association."""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
