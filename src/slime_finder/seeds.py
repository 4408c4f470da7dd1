"""Turn user-entered seed text into the numeric world seed."""

from __future__ import annotations

import re

from .arith import to_int32

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
NUMERIC_SEED_PAT = re.compile(r"[+-]?\d+")


def java_string_hash(text: str) -> int:
    """``String.hashCode`` over code points, sign-extended from 32 bits."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    return to_int32(value)


def parse_numeric_seed(text: str) -> int | None:
    """Return the seed when ``text`` is a plain signed 64-bit integer, else ``None``."""
    candidate = text.strip()
    if not NUMERIC_SEED_PAT.fullmatch(candidate):
        return None
    value = int(candidate)
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def resolve_seed(text: str) -> int:
    """Use ``text`` as-is when it is a 64-bit integer, otherwise hash it like the game does."""
    value = parse_numeric_seed(text)
    if value is not None:
        return value
    return java_string_hash(text)


def format_seed(seed: int, raw: str) -> str:
    formatted = str(seed)
    if raw != formatted:
        formatted = f"{seed} ({raw})"
    return formatted
