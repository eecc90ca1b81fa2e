"""A small deterministic xorshift* random number generator."""

from __future__ import annotations

_MASK = (1 << 64) - 1
_MULTIPLIER = 0x2545F4914F6CDD1D
DEFAULT_SEED = 88172645463325252


class BasicRNG:
    """xorshift* generator over a 64-bit state."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state = seed & _MASK

    def next_value(self) -> int:
        state = self._state
        state ^= state >> 12
        state ^= (state << 25) & _MASK
        state ^= state >> 27
        self._state = state
        return (state * _MULTIPLIER) & _MASK

    def reset(self, seed: int) -> None:
        self._state = seed & _MASK

    def randint(self, low: int, high: int) -> int:
        """Return an integer in the inclusive range; bounds may be given in either order."""
        if low > high:
            low, high = high, low
        span = high - low + 1
        return low + self.next_value() % span

    def uniform(self, low: float, high: float) -> float:
        """Return a float in the range; bounds may be given in either order."""
        if low > high:
            low, high = high, low
        return low + (self.next_value() / _MASK) * (high - low)