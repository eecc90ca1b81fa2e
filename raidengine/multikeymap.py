"""A map keyed by an ordered pair of small unsigned integers."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CombinedKeyMap(Generic[T]):
    """Stores values under two integer keys packed into one combined key."""

    def __init__(self, key_bits: int = 32) -> None:
        if key_bits <= 0:
            raise ValueError("key_bits must be positive")
        self._bits = key_bits
        self._data: dict[int, T] = {}

    def _combine(self, key1: int, key2: int) -> int:
        limit = 1 << self._bits
        for key in (key1, key2):
            if not 0 <= key < limit:
                raise ValueError(f"key {key} does not fit in {self._bits} bits")
        return (key1 << self._bits) | key2

    def set(self, key1: int, key2: int, value: T) -> None:
        self._data[self._combine(key1, key2)] = value

    def get(self, key1: int, key2: int) -> Optional[T]:
        return self._data.get(self._combine(key1, key2))

    def exists(self, key1: int, key2: int) -> bool:
        return self._combine(key1, key2) in self._data

    def remove(self, key1: int, key2: int) -> None:
        self._data.pop(self._combine(key1, key2), None)

    def __len__(self) -> int:
        return len(self._data)