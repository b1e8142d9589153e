"""Upper envelope of lines for monotone inserts and monotone queries."""

from __future__ import annotations

from collections import deque

from algokit.point import Point, left_turn_strict


class MonotonicDPHull:
    """Lines ``a*x + b`` inserted with non-decreasing ``a``, queried with non-decreasing ``x``.

    Both operations are amortised O(1).
    """

    def __init__(self) -> None:
        self.points: deque[Point] = deque()
        self._prev: tuple[int, int] | None = None

    def __len__(self) -> int:
        return len(self.points)

    def clear(self) -> None:
        """Remove every line and forget the previous query."""
        self.points.clear()
        self._prev = None

    def insert(self, a: int, b: int) -> None:
        """Add the line ``a*x + b``; ``a`` must not be below the last slope."""
        points = self.points
        p = Point(a, b)
        if points and a < points[-1].x:
            raise ValueError(f"slopes must be non-decreasing: {a} after {points[-1].x}")

        if points and a == points[-1].x:
            if b <= points[-1].y:
                return
            points.pop()

        while len(points) >= 2 and not left_turn_strict(p, points[-1], points[-2]):
            points.pop()

        points.append(p)

    def query(self, x: int, y: int = 1) -> int:
        """Maximum of ``a*x + b*y``; ``x/y`` must not decrease between calls."""
        points = self.points
        if not points:
            raise ValueError("query on an empty hull")
        if y <= 0:
            raise ValueError(f"y must be positive, got {y}")
        if self._prev is not None:
            prev_x, prev_y = self._prev
            if x * prev_y < prev_x * y:
                raise ValueError("queries must be non-decreasing")
        self._prev = (x, y)

        while len(points) >= 2 and (
            (points[1].x - points[0].x) * x + (points[1].y - points[0].y) * y >= 0
        ):
            points.popleft()

        return points[0].x * x + points[0].y * y