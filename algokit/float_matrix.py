"""Dense floating-point matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class FloatMatrix:
    """A ``rows x cols`` matrix of floats, indexed as ``m[i, j]``."""

    __slots__ = ("rows", "cols", "values")

    def __init__(self, values: Iterable[Iterable[float]]) -> None:
        rows = [[float(x) for x in row] for row in values]
        cols = len(rows[0]) if rows else 0
        if any(len(row) != cols for row in rows):
            raise ValueError("all rows must have the same length")
        self.rows = len(rows)
        self.cols = cols
        self.values = rows

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> FloatMatrix:
        """An all-zero matrix; ``cols`` defaults to ``rows``."""
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        return cls([[0.0] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, n: int) -> FloatMatrix:
        """The ``n x n`` identity matrix."""
        return cls([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])

    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self.values[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = key
        self.values[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatMatrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self.values == other.values
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FloatMatrix({self.values!r})"

    def __mul__(self, other: object) -> FloatMatrix:
        if not isinstance(other, FloatMatrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        product = FloatMatrix.zeros(self.rows, other.cols)
        for out_row, row in zip(product.values, self.values):
            for a, other_row in zip(row, other.values):
                if a != 0:
                    for k, b in enumerate(other_row):
                        out_row[k] += a * b
        return product

    __matmul__ = __mul__

    def apply(self, column: Sequence[float]) -> list[float]:
        """Multiply this matrix by a column vector."""
        if len(column) != self.cols:
            raise ValueError(
                f"column of length {len(column)} does not match {self.cols} columns"
            )
        return [sum(a * b for a, b in zip(row, column)) for row in self.values]

    def power(self, p: int) -> FloatMatrix:
        """Raise a square matrix to a non-negative integer power."""
        if p < 0:
            raise ValueError(f"power must be non-negative, got {p}")
        if not self.is_square():
            raise ValueError("only square matrices can be raised to a power")
        result = FloatMatrix.identity(self.rows)
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
            lines.extend(" ".join(format(x, ".16g") for x in row) for row in self.values)
        return "\n".join(lines) + "\n"