"""
ExtractPhoneNumbersUseCase - Pull canonical Latvian numbers out of page text.

Pure function, no I/O. Several narrow patterns are run over the whole text
and may match the same digits; every match is canonicalized and validated
before it goes into the result set, which removes the overlap.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Set

from ..domain.entities.phone_number import canonicalize, is_valid_canonical

# Matching is deliberately permissive; validation decides.
PHONE_PATTERNS = (
    # International with +
    re.compile(r"\+371\s*(\d{8})", re.ASCII),
    # International with 00371
    re.compile(r"00371\s*(\d{8})", re.ASCII),
    # Local 8-digit number starting with 2-9
    re.compile(r"\b([2-9]\d{7})\b", re.ASCII),
    # Four 2-digit groups with optional space or dash separators
    re.compile(r"(\d{2})[\s\-]?(\d{2})[\s\-]?(\d{2})[\s\-]?(\d{2})", re.ASCII),
    # (22) 81 19 07
    re.compile(r"\((\d{2})\)\s*(\d{2})\s*(\d{2})\s*(\d{2})", re.ASCII),
)


def extract_phone_numbers(text: Optional[str]) -> Set[str]:
    if not text:
        return set()

    found: Set[str] = set()
    for pattern in PHONE_PATTERNS:
        for match in pattern.finditer(text):
            candidate = canonicalize("".join(match.groups()))
            if is_valid_canonical(candidate):
                found.add(candidate)
    return found


@dataclass
class ExtractPhoneNumbersRequest:
    text: Optional[str]


@dataclass
class ExtractPhoneNumbersResponse:
    numbers: Set[str] = field(default_factory=set)

    @property
    def count(self) -> int:
        return len(self.numbers)


class ExtractPhoneNumbersUseCase:
    def execute(self, request: ExtractPhoneNumbersRequest) -> ExtractPhoneNumbersResponse:
        return ExtractPhoneNumbersResponse(numbers=extract_phone_numbers(request.text))
