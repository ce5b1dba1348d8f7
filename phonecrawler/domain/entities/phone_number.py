"""
Phone number normalization rules - shared by the crawler and the lookup service.
A canonical number is the national prefix 371 followed by 8 subscriber digits.
No framework dependencies.
"""

import re
from typing import Optional

COUNTRY_CODE = "371"
SUBSCRIBER_DIGITS = 8
CANONICAL_LENGTH = len(COUNTRY_CODE) + SUBSCRIBER_DIGITS

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_CANONICAL_RE = re.compile(r"^371[0-9]{8}$")
_SUBSCRIBER_LEADING = "23456789"


class InvalidPhoneNumberError(ValueError):
    """Raised when a lookup query cannot be turned into a canonical number."""


def digits_only(raw: str) -> str:
    return _NON_DIGIT_RE.sub("", raw)


def canonicalize(raw: str) -> str:
    """
    Normalize a raw fragment towards 371XXXXXXXX.

    Digits already carrying the country code are kept as they are, a local
    8-digit subscriber number starting 2-9 gets the code prepended. Anything
    else is returned stripped but unchanged and will fail is_valid_canonical().
    """
    digits = digits_only(raw)
    if digits.startswith(COUNTRY_CODE):
        return digits
    if len(digits) == SUBSCRIBER_DIGITS and digits[0] in _SUBSCRIBER_LEADING:
        return COUNTRY_CODE + digits
    return digits


def is_valid_canonical(value: str) -> bool:
    return bool(_CANONICAL_RE.match(value))


def normalize_lookup_query(raw: Optional[str]) -> str:
    """
    Turn a free-form lookup query (22811907, +371 228 119 07, ...) into a
    canonical number. Only 8-digit local and 11-digit international forms
    are accepted.
    """
    if raw is None or not str(raw).strip():
        raise InvalidPhoneNumberError("Phone number cannot be empty")

    digits = digits_only(str(raw))
    if len(digits) not in (SUBSCRIBER_DIGITS, CANONICAL_LENGTH):
        raise InvalidPhoneNumberError("Invalid phone number format")

    canonical = canonicalize(digits)
    if not is_valid_canonical(canonical):
        raise InvalidPhoneNumberError("Not a valid Latvian phone number")
    return canonical
