"""Order-sensitive hash of an integer array with O(1) point updates."""

from __future__ import annotations

import time
from collections.abc import Iterable

_MASK = (1 << 64) - 1


def splitmix64(x: int) -> int:
    """The splitmix64 mixing function on 64-bit unsigned integers."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK
    return x ^ (x >> 31)


_FIXED_RANDOM = splitmix64((time.monotonic_ns() * (id(object()) | 1)) & _MASK)


class ArrayHash:
    """A 64-bit hash of an array, kept current as elements change.

    ``values`` is either an iterable of integers or a length for an all-zero
    array. ``seed`` fixes the salt; by default a per-process random salt is used.
    """

    def __init__(self, values: Iterable[int] | int = 0, *, seed: int | None = None) -> None:
        self._salt = _FIXED_RANDOM if seed is None else seed & _MASK
        if isinstance(values, int):
            if values < 0:
                raise ValueError(f"length must be non-negative, got {values}")
            self.arr = [0] * values
        else:
            self.arr = list(values)
        self.hash = sum(self._element_hash(i) for i in range(len(self.arr))) & _MASK

    def _element_hash(self, index: int) -> int:
        if not 0 <= index < len(self.arr):
            raise IndexError(f"index {index} out of range for length {len(self.arr)}")
        # Tie the value closely to its position.
        return splitmix64((self.arr[index] & _MASK) ^ splitmix64(index ^ self._salt))

    def __len__(self) -> int:
        return len(self.arr)

    def __getitem__(self, index: int) -> int:
        return self.arr[index]

    def modify(self, index: int, value: int) -> None:
        """Set ``arr[index] = value`` and update the hash."""
        self.hash = (self.hash - self._element_hash(index)) & _MASK
        self.arr[index] = value
        self.hash = (self.hash + self._element_hash(index)) & _MASK