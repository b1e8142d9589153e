"""Fully dynamic upper envelope of lines for max queries."""

from __future__ import annotations

from sortedcontainers import SortedList


def _left_turn(a: tuple[int, int], b: tuple[int, int], c: tuple[int, int]) -> bool:
    return (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1]) > 0


class DPHull:
    """Insert lines ``a*x + b`` and query the maximum value at any ``x``.

    Both operations take O(log^2 n) time.
    """

    def __init__(self) -> None:
        self._points: SortedList = SortedList()
        self._next: dict[int, tuple[int, int]] = {}

    def __len__(self) -> int:
        return len(self._points)

    @property
    def lines(self) -> list[tuple[int, int]]:
        """The ``(a, b)`` pairs currently on the envelope, by increasing ``a``."""
        return list(self._points)

    def _bad(self, i: int) -> bool:
        pts = self._points
        if i <= 0 or i >= len(pts) - 1:
            return False
        return not _left_turn(pts[i + 1], pts[i], pts[i - 1])

    def _erase(self, i: int) -> None:
        removed = self._points.pop(i)
        del self._next[removed[0]]

    def insert(self, a: int, b: int) -> None:
        """Add the line ``a*x + b``."""
        p = (a, b)
        pts = self._points
        idx = pts.bisect_left(p)

        if idx < len(pts) and pts[idx][0] == a:
            return

        if idx > 0:
            prev = pts[idx - 1]
            if prev[0] == a:
                self._erase(idx - 1)
                idx -= 1
            elif idx < len(pts) and not _left_turn(pts[idx], p, prev):
                return

        pts.add(p)
        self._next[a] = p
        it = idx

        while it > 0 and self._bad(it - 1):
            self._erase(it - 1)
            it -= 1

        while self._bad(it + 1):
            self._erase(it + 1)

        if it > 0:
            self._next[pts[it - 1][0]] = p
        self._next[a] = pts[it + 1] if it + 1 < len(pts) else p

    def query(self, x: int, y: int = 1) -> int:
        """Return the maximum of ``a*x + b*y`` over inserted lines; ``y`` must be positive."""
        pts = self._points
        if not pts:
            raise ValueError("query on an empty hull")
        if y <= 0:
            raise ValueError(f"y must be positive, got {y}")

        lo, hi = 0, len(pts) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            px, py = pts[mid]
            nx, ny = self._next[px]
            if (nx - px) * x + (ny - py) * y > 0:
                lo = mid + 1
            else:
                hi = mid
        px, py = pts[lo]
        return px * x + py * y