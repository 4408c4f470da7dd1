"""Two's-complement wraparound helpers for reproducing JVM integer overflow."""

from __future__ import annotations

MASK_32 = (1 << 32) - 1
MASK_48 = (1 << 48) - 1
MASK_64 = (1 << 64) - 1


def to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= MASK_32
    return value - (1 << 32) if value >= 1 << 31 else value


def to_int64(value: int) -> int:
    """Wrap ``value`` to a signed 64-bit integer."""
    value &= MASK_64
    return value - (1 << 64) if value >= 1 << 63 else value
