import random

import pytest

from algokit.dp_hull import DPHull


def _brute(lines, x, y=1):
    return max(a * x + b * y for a, b in lines)


def test_random_against_brute_force():
    rng = random.Random(12345)
    hull = DPHull()
    lines = []
    for _ in range(400):
        a, b = rng.randint(-50, 50), rng.randint(-1000, 1000)
        hull.insert(a, b)
        lines.append((a, b))
        x = rng.randint(-100, 100)
        assert hull.query(x) == _brute(lines, x)


def test_query_with_positive_y():
    rng = random.Random(7)
    hull = DPHull()
    lines = [(rng.randint(-20, 20), rng.randint(-20, 20)) for _ in range(60)]
    for a, b in lines:
        hull.insert(a, b)
    for _ in range(200):
        x, y = rng.randint(-50, 50), rng.randint(1, 10)
        assert hull.query(x, y) == _brute(lines, x, y)


def test_same_slope_keeps_best_intercept():
    hull = DPHull()
    hull.insert(2, 5)
    hull.insert(2, 3)
    hull.insert(2, 9)
    assert hull.lines == [(2, 9)]
    assert hull.query(4) == 2 * 4 + 9


def test_dominated_line_is_dropped():
    hull = DPHull()
    hull.insert(1, 0)
    hull.insert(-1, 0)
    hull.insert(0, -5)
    assert len(hull) == 2
    assert (0, -5) not in hull.lines


def test_lines_sorted_by_slope():
    rng = random.Random(99)
    hull = DPHull()
    for _ in range(100):
        hull.insert(rng.randint(-30, 30), rng.randint(-30, 30))
    slopes = [a for a, _ in hull.lines]
    assert slopes == sorted(set(slopes))


def test_errors():
    hull = DPHull()
    with pytest.raises(ValueError):
        hull.query(0)
    hull.insert(1, 1)
    with pytest.raises(ValueError):
        hull.query(0, 0)