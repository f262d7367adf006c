"""Deterministic linear congruential random number generator."""

from __future__ import annotations

_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MASK = 0x7FFFFFFF
_SEED_MASK = 0xFFFFFFFF


class Rng:
    """LCG with the classic ANSI C constants, reduced modulo 2**31."""

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator to a 32-bit unsigned seed."""
        self._state = seed & _SEED_MASK

    def next(self) -> int:
        """Advance the generator and return the new 31-bit state."""
        self._state = (_MULTIPLIER * self._state + _INCREMENT) & _MASK
        return self._state

    def choice(self, n: int) -> int:
        """Return an index in ``range(n)``; 0 when ``n`` is not positive."""
        if n <= 0:
            return 0
        return self.next() % n

    def coin(self) -> bool:
        """Return a random boolean taken from the low bit."""
        return (self.next() & 1) != 0