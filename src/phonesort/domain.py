"""Value space and text encoding of seven-digit phone numbers."""
from __future__ import annotations

import re

from .errors import FormatError

EXCLUSIVE_MAX_NUMBER = 10_000_000
PREFIX_DIVISOR = 10_000

# DDD-DDDD, ASCII digits only
_ENCODED_PATTERN = re.compile(r"\d{3}-\d{4}", re.ASCII)


def _valid_prefix(prefix: int) -> bool:
    first, second, third = prefix // 100, (prefix // 10) % 10, prefix % 10
    if first in (0, 1):
        return False
    # N11 codes are reserved for services
    return not (second == 1 and third == 1)


def is_valid_number(n: int) -> bool:
    """Return True if ``n`` is in range and its prefix obeys the numbering-plan rule."""
    if not 0 <= n < EXCLUSIVE_MAX_NUMBER:
        return False
    return _valid_prefix(n // PREFIX_DIVISOR)


VALID_NUMBER_COUNT = sum(PREFIX_DIVISOR for p in range(1000) if _valid_prefix(p))


def encode(n: int) -> str:
    """Format ``n`` as ``DDD-DDDD``."""
    if not 0 <= n < EXCLUSIVE_MAX_NUMBER:
        raise ValueError(f"{n} is outside the phone number range")
    digits = f"{n:07d}"
    return f"{digits[:3]}-{digits[3:]}"


def decode(text: str) -> int:
    """Inverse of :func:`encode`.

    Raises:
        FormatError: if ``text`` is not exactly three digits, a dash and four digits.
    """
    if not _ENCODED_PATTERN.fullmatch(text):
        raise FormatError(f"{text!r} is not formatted as DDD-DDDD")
    return int(text[:3] + text[4:])


def parse(text: str) -> int:
    """Decode ``text`` and reject numbers that break the numbering-plan rule."""
    n = decode(text)
    if not is_valid_number(n):
        raise FormatError(f"{text} is not a valid phone number")
    return n
