"""Bit-exact port of the 48-bit linear congruential generator behind ``java.util.Random``."""

from __future__ import annotations

from .arith import MASK_48, to_int32

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB


class JavaRandom:
    """Single-use generator seeded the same way as ``new java.util.Random(seed)``."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = (seed ^ MULTIPLIER) & MASK_48

    def next_bits(self, bits: int) -> int:
        """Advance the state and return its top ``bits`` bits as a signed int."""
        if not 1 <= bits <= 32:
            raise ValueError(f"bits must be between 1 and 32, got {bits}")
        self._state = (self._state * MULTIPLIER + ADDEND) & MASK_48
        return to_int32(self._state >> (48 - bits))

    def next_int(self, bound: int) -> int:
        """Return a value in ``[0, bound)`` using the JVM rejection scheme.

        The retry condition relies on ``u - r + (bound - 1)`` overflowing a
        signed 32-bit int, so it is evaluated through :func:`to_int32`.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        r = self.next_bits(31)
        m = bound - 1
        if bound & m == 0:
            return to_int32((bound * r) >> 31)

        u = r
        r = u % bound
        while to_int32(u - r + m) < 0:
            u = self.next_bits(31)
            r = u % bound
        return r
