from fractions import Fraction as StdFraction

import pytest

from algokit.fraction import Fraction

PAIRS = [((1, 2), (1, 3)), ((-7, 4), (5, -6)), ((10, 4), (3, 9)), ((0, 5), (9, 7))]


@pytest.mark.parametrize(
    "n,d,expected",
    [
        (6, -4, (-3, 2)),
        (0, 7, (0, 1)),
        (-12, -18, (2, 3)),
        (5, 1, (5, 1)),
        (100, 250, (2, 5)),
    ],
)
def test_reduction(n, d, expected):
    f = Fraction(n, d)
    assert (f.numer, f.denom) == expected


def test_str_of_negative_denominator():
    assert str(Fraction(6, -4)) == "-3/2"


@pytest.mark.parametrize(
    "x,y,total,difference,product,quotient",
    [
        ((1, 2), (1, 3), (5, 6), (1, 6), (1, 6), (3, 2)),
        ((-7, 4), (5, -6), (-31, 12), (-11, 12), (35, 24), (21, 10)),
        ((10, 4), (3, 9), (17, 6), (13, 6), (5, 6), (15, 2)),
        ((0, 5), (9, 7), (9, 7), (-9, 7), (0, 1), (0, 1)),
    ],
)
def test_arithmetic(x, y, total, difference, product, quotient):
    a, b = Fraction(*x), Fraction(*y)
    s = a + b
    d = a - b
    p = a * b
    q = a / b
    assert (s.numer, s.denom) == total
    assert (d.numer, d.denom) == difference
    assert (p.numer, p.denom) == product
    assert (q.numer, q.denom) == quotient


@pytest.mark.parametrize("x,y", PAIRS)
def test_comparisons_match_stdlib(x, y):
    a, b = Fraction(*x), Fraction(*y)
    sa, sb = StdFraction(*x), StdFraction(*y)
    assert (a < b) == (sa < sb)
    assert (a <= b) == (sa <= sb)
    assert (a > b) == (sa > sb)
    assert (a >= b) == (sa >= sb)
    assert (a == b) == (sa == sb)
    assert min(a, b) == Fraction(*x if sa <= sb else y)


def test_integer_operands():
    a = Fraction(3, 4)
    assert a + 1 == Fraction(7, 4)
    assert 1 - a == Fraction(1, 4)
    assert 2 * a == Fraction(3, 2)
    assert 3 / a == 4
    assert Fraction(8, 2) == 4


def test_negation_and_abs():
    a = Fraction(-5, 3)
    assert -a == Fraction(5, 3)
    assert abs(a) == -a
    assert abs(-a) == -a


def test_inverse_round_trip():
    a = Fraction(-9, 14)
    assert a.inv().inv() == a
    assert a * a.inv() == 1


def test_is_integer():
    assert Fraction(12, 4).is_integer()
    assert not Fraction(12, 5).is_integer()


def test_float_conversion():
    assert float(Fraction(7, 8)) == pytest.approx(7 / 8)


def test_zero_denominator_is_infinite():
    inf = Fraction(0).inv()
    assert inf.denom == 0
    assert inf > Fraction(10**12)
    assert float(inf) == float("inf")
    assert float(-inf) == float("-inf")


def test_zero_over_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fraction(0, 0)


def test_hash_consistent_for_equal_values():
    assert hash(Fraction(2, 4)) == hash(Fraction(-3, -6))
    assert len({Fraction(2, 4), Fraction(1, 2), Fraction(3, 6)}) == 1


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Fraction(1, 2) + "x"