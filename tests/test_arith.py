import math
from fractions import Fraction

import pytest

from algokit.arith import ceil_div, floor_div, highest_bit

PAIRS = [(a, b) for a in range(-20, 21) for b in (-7, -3, -1, 1, 2, 5)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_floor_div_matches_exact_floor(a, b):
    assert floor_div(a, b) == math.floor(Fraction(a, b))


@pytest.mark.parametrize("a,b", PAIRS)
def test_ceil_div_matches_exact_ceil(a, b):
    assert ceil_div(a, b) == math.ceil(Fraction(a, b))


def test_large_values():
    a, b = -(10**18) - 1, 10**9
    assert floor_div(a, b) == math.floor(Fraction(a, b))
    assert ceil_div(a, b) == math.ceil(Fraction(a, b))


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        floor_div(1, 0)
    with pytest.raises(ZeroDivisionError):
        ceil_div(1, 0)


def test_highest_bit_zero():
    assert highest_bit(0) == -1


@pytest.mark.parametrize("x", list(range(1, 300)) + [2**31, 2**63 - 1, 2**63])
def test_highest_bit_bounds(x):
    h = highest_bit(x)
    assert 2**h <= x < 2 ** (h + 1)


def test_highest_bit_negative_raises():
    with pytest.raises(ValueError):
        highest_bit(-1)