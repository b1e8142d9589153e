"""Dense matrices over the integers modulo a fixed modulus."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.modint import DEFAULT_MOD


class ModMatrix:
    """A ``rows x cols`` matrix whose entries are reduced modulo ``mod``.

    Entries are read and written with ``m[i, j]``. Rows are the outer lists
    of ``values``.
    """

    __slots__ = ("rows", "cols", "mod", "values")

    def __init__(self, values: Iterable[Iterable[int]], mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError(f"modulus must be positive, got {mod}")
        rows = [[int(x) % mod for x in row] for row in values]
        cols = len(rows[0]) if rows else 0
        if any(len(row) != cols for row in rows):
            raise ValueError("all rows must have the same length")
        self.rows = len(rows)
        self.cols = cols
        self.mod = mod
        self.values = rows

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None, mod: int = DEFAULT_MOD) -> ModMatrix:
        """An all-zero matrix; ``cols`` defaults to ``rows``."""
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        return cls([[0] * cols for _ in range(rows)], mod)

    @classmethod
    def identity(cls, n: int, mod: int = DEFAULT_MOD) -> ModMatrix:
        """The ``n x n`` identity matrix."""
        return cls([[int(i == j) for j in range(n)] for i in range(n)], mod)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = key
        return self.values[i][j]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = key
        self.values[i][j] = int(value) % self.mod

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        return (
            self.mod == other.mod
            and self.rows == other.rows
            and self.cols == other.cols
            and self.values == other.values
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ModMatrix({self.values!r}, mod={self.mod})"

    def _check_mod(self, other: ModMatrix) -> None:
        if other.mod != self.mod:
            raise ValueError(f"mismatched moduli {self.mod} and {other.mod}")

    def __mul__(self, other: object) -> ModMatrix:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        self._check_mod(other)
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        mod = self.mod
        columns = list(zip(*other.values)) if other.rows else []
        product = ModMatrix.zeros(self.rows, other.cols, mod)
        for i, row in enumerate(self.values):
            product.values[i] = [
                sum(a * b for a, b in zip(row, column)) % mod for column in columns
            ] or [0] * other.cols
        return product

    __matmul__ = __mul__

    def apply(self, column: Sequence[int]) -> list[int]:
        """Multiply this matrix by a column vector."""
        if len(column) != self.cols:
            raise ValueError(
                f"column of length {len(column)} does not match {self.cols} columns"
            )
        mod = self.mod
        return [sum(a * b for a, b in zip(row, column)) % mod for row in self.values]

    def power(self, p: int) -> ModMatrix:
        """Raise a square matrix to a non-negative integer power."""
        if p < 0:
            raise ValueError(f"power must be non-negative, got {p}")
        if not self.is_square():
            raise ValueError("only square matrices can be raised to a power")
        result = ModMatrix.identity(self.rows, self.mod)
        base = self
        while p > 0:
            if p & 1:
                result = result * base
            p >>= 1
            if p > 0:
                base = base * base
        return result

    def format(self) -> str:
        """Render as a ``rows cols`` header line followed by one line per row."""
        lines = [f"{self.rows} {self.cols}"]
        if self.cols > 0:
            lines.extend(" ".join(str(x) for x in row) for row in self.values)
        return "\n".join(lines) + "\n"