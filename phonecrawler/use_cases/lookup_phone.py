"""
LookupPhoneUseCase - Which pages mention this phone number?
Normalizes the query with the same rules the crawler uses, then reads the store.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.entities.phone_number import normalize_lookup_query
from ..domain.interfaces.i_phone_store import IPhoneStore

logger = logging.getLogger(__name__)


@dataclass
class LookupPhoneRequest:
    number: Optional[str]


@dataclass
class LookupPhoneResponse:
    normalized_number: str
    results: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.results)

    def to_dict(self) -> dict:
        return {
            "results": self.results,
            "found": self.found,
            "normalized_number": self.normalized_number,
        }


class LookupPhoneUseCase:
    def __init__(self, store: IPhoneStore):
        self.store = store

    async def execute(self, request: LookupPhoneRequest) -> LookupPhoneResponse:
        """Raises InvalidPhoneNumberError when the query is not a Latvian number."""
        normalized = normalize_lookup_query(request.number)
        urls = await self.store.members(normalized)
        logger.info(f"[Lookup] {normalized} → {len(urls)} url(s)")
        return LookupPhoneResponse(normalized_number=normalized, results=sorted(urls))
