"""Incremental convex hull with area tracking and point location."""

from __future__ import annotations

from sortedcontainers import SortedDict

# All areas are signed and doubled. For triangles, clockwise is positive.


def _cross(x1: int, y1: int, x2: int, y2: int) -> int:
    return x1 * y2 - x2 * y1


def _trapezoid_area(p1: tuple[int, int], p2: tuple[int, int]) -> int:
    return (p2[0] - p1[0]) * (p1[1] + p2[1])


def _triangle_area(
    p1: tuple[int, int], p2: tuple[int, int], p3: tuple[int, int]
) -> int:
    return _cross(p2[0] - p1[0], p2[1] - p1[1], p2[0] - p3[0], p2[1] - p3[1])


class UpperHull:
    """The upper hull of inserted points, with the doubled area beneath it."""

    def __init__(self) -> None:
        self.points: SortedDict = SortedDict()
        self.area = 0

    def __len__(self) -> int:
        return len(self.points)

    def _point_area(self, i: int) -> int:
        """Area lost if the point at position ``i`` were removed."""
        pts = self.points
        has_prev = i > 0
        has_next = i + 1 < len(pts)
        here = pts.peekitem(i)

        if has_prev and has_next:
            return _triangle_area(pts.peekitem(i - 1), here, pts.peekitem(i + 1))

        total = 0
        if has_prev:
            total += _trapezoid_area(pts.peekitem(i - 1), here)
        if has_next:
            total += _trapezoid_area(here, pts.peekitem(i + 1))
        return total

    def _bad(self, i: int) -> bool:
        if i <= 0 or i >= len(self.points) - 1:
            return False
        # A left turn or a straight line makes the middle point redundant.
        return self._point_area(i) <= 0

    def _erase(self, i: int) -> None:
        self.area -= self._point_area(i)
        self.points.popitem(i)

    def insert(self, x: int, y: int) -> bool:
        """Add a point; return whether the hull changed."""
        pts = self.points
        if x in pts:
            if y <= pts[x]:
                return False
            self._erase(pts.index(x))

        pts[x] = y
        i = pts.index(x)

        if self._bad(i):
            del pts[x]
            return False

        self.area += self._point_area(i)

        while i > 0 and self._bad(i - 1):
            self._erase(i - 1)
            i -= 1

        while self._bad(i + 1):
            self._erase(i + 1)

        return True

    def contains(self, x: int, y: int) -> int:
        """1 if strictly below the hull, 0 if on it, -1 if outside."""
        pts = self.points
        if not pts:
            return -1

        first_x, first_y = pts.peekitem(0)
        last_x, last_y = pts.peekitem(-1)

        if x < first_x or x > last_x:
            return -1
        if x == first_x:
            return 0 if y <= first_y else -1
        if x == last_x:
            return 0 if y <= last_y else -1

        i = pts.bisect_left(x)
        a = _triangle_area(pts.peekitem(i - 1), (x, y), pts.peekitem(i))
        if a == 0:
            return 0
        return -1 if a > 0 else 1


class OnlineHull:
    """A convex hull built from an upper and a lower half."""

    def __init__(self) -> None:
        self.upper = UpperHull()
        self.lower = UpperHull()

    def __len__(self) -> int:
        return len(self.upper) + len(self.lower)

    def area_doubled(self) -> int:
        """Twice the area enclosed by the hull."""
        return self.upper.area + self.lower.area

    def insert(self, x: int, y: int) -> bool:
        """Add a point; return whether either half changed."""
        upper_changed = self.upper.insert(x, y)
        lower_changed = self.lower.insert(x, -y)
        return upper_changed or lower_changed

    def contains(self, x: int, y: int) -> int:
        """1 if strictly inside, 0 if on the border, -1 if outside."""
        return min(self.upper.contains(x, y), self.lower.contains(x, -y))