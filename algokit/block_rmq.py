"""Range minimum (or maximum) queries with per-block bitmasks over a sparse table."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Any

from algokit.sparse_table import SparseTableRMQ


def _lowest_bit(x: int) -> int:
    return (x & -x).bit_length() - 1


class BlockRMQ:
    """Static range minimum (or maximum, with ``maximum_mode``) over a sequence.

    Positions are grouped into blocks of ``BLOCK``; each position keeps a
    bitmask of the candidates inside its block, and a sparse table covers the
    whole blocks. Queries use half-open ranges ``[a, b)`` and pick the
    largest index on ties.
    """

    BLOCK = 8

    def __init__(self, values: Iterable[Any] = (), maximum_mode: bool = False) -> None:
        self.maximum_mode = maximum_mode
        self.values: list[Any] = list(values)
        self.n = n = len(self.values)
        block = self.BLOCK

        block_mask = [0] * (n + 1)
        mask = 0
        for i in range(n):
            offset = i % block
            if offset == 0:
                mask = 0
            start = i - offset
            while mask and self.better_index(start + mask.bit_length() - 1, i) == i:
                mask ^= 1 << (mask.bit_length() - 1)
            mask |= 1 << offset
            block_mask[i + 1] = mask
        self.block_mask = block_mask

        block_index: list[int] = []
        block_values: list[Any] = []
        for start in range(0, n - n % block, block):
            best = reduce(self.better_index, range(start + 1, start + block), start)
            block_values.append(self.values[best])
            block_index.append(best - start)
        self.block_index = block_index
        self._rmq = SparseTableRMQ(block_values, maximum_mode)

    def __len__(self) -> int:
        return self.n

    def better_index(self, a: int, b: int) -> int:
        """The index holding the better value; ``b`` on ties."""
        values = self.values
        if self.maximum_mode:
            return a if values[b] < values[a] else b
        return a if values[a] < values[b] else b

    def query_index(self, a: int, b: int) -> int:
        """Index of the best value in ``[a, b)``, choosing the largest index on ties."""
        if not 0 <= a < b <= self.n:
            raise IndexError(f"invalid range [{a}, {b}) for length {self.n}")
        block = self.BLOCK
        masks = self.block_mask
        a_start = a - a % block

        # Both ends inside one block.
        if a_start == (b - 1) - (b - 1) % block:
            return a + _lowest_bit(masks[b] >> (a - a_start))

        answer = a
        if a != a_start:
            answer = a + _lowest_bit(masks[a_start + block] >> (a - a_start))

        a_block = (a + block - 1) // block
        b_block = b // block
        if a_block < b_block:
            r = self._rmq.query_index(a_block, b_block)
            answer = self.better_index(answer, block * r + self.block_index[r])

        b_start = b - b % block
        if b != b_start:
            answer = self.better_index(answer, b_start + _lowest_bit(masks[b]))

        return answer

    def query_value(self, a: int, b: int) -> Any:
        """The best value in ``[a, b)``."""
        return self.values[self.query_index(a, b)]