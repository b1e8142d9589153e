import pytest

from algokit.mod_matrix import ModMatrix
from algokit.modint import DEFAULT_MOD

MOD = 1_000_000_007


def sample(rows, cols, seed, mod=DEFAULT_MOD):
    return ModMatrix(
        [[(seed * 31 + i * 17 + j * 7) ** 3 for j in range(cols)] for i in range(rows)],
        mod,
    )


def test_entries_are_reduced():
    m = ModMatrix([[DEFAULT_MOD + 5, -1]])
    assert m[0, 0] == 5
    assert m[0, 1] == DEFAULT_MOD - 1


def test_setitem_reduces():
    m = ModMatrix.zeros(2, 3)
    m[1, 2] = -3
    assert m[1, 2] == DEFAULT_MOD - 3
    assert (m.rows, m.cols) == (2, 3)


def test_identity_is_neutral():
    a = sample(3, 3, 1)
    i = ModMatrix.identity(3)
    assert a * i == a
    assert i * a == a


def test_associativity():
    a, b, c = sample(2, 3, 1), sample(3, 4, 2), sample(4, 2, 3)
    assert (a * b) * c == a * (b * c)


def test_matmul_operator_matches_mul():
    a, b = sample(2, 3, 4), sample(3, 2, 5)
    assert a @ b == a * b


def test_product_shape():
    p = sample(2, 3, 1) * sample(3, 5, 2)
    assert (p.rows, p.cols) == (2, 5)


def test_dimension_mismatch():
    with pytest.raises(ValueError):
        sample(2, 3, 1) * sample(2, 3, 1)


def test_modulus_mismatch():
    with pytest.raises(ValueError):
        sample(2, 2, 1, MOD) * sample(2, 2, 1, DEFAULT_MOD)


def test_apply_matches_column_matrix():
    a = sample(3, 4, 6)
    column = [9, -2, 4, 123456789]
    as_matrix = a * ModMatrix([[x] for x in column])
    assert a.apply(column) == [row[0] for row in as_matrix.values]


def test_apply_wrong_length():
    with pytest.raises(ValueError):
        sample(2, 2, 1).apply([1, 2, 3])


def test_power_zero_is_identity():
    assert sample(3, 3, 2).power(0) == ModMatrix.identity(3)


@pytest.mark.parametrize("p", [1, 2, 5, 8, 13])
def test_power_matches_repeated_product(p):
    a = sample(3, 3, 7, MOD)
    expected = ModMatrix.identity(3, MOD)
    for _ in range(p):
        expected = expected * a
    assert a.power(p) == expected


def test_power_exponent_law():
    a = sample(2, 2, 9)
    assert a.power(7) * a.power(11) == a.power(18)


def test_fibonacci_power():
    fib = ModMatrix([[1, 1], [1, 0]])
    assert fib.power(10)[0, 1] == 55


def test_power_rejects_negative():
    with pytest.raises(ValueError):
        ModMatrix.identity(2).power(-1)


def test_power_rejects_non_square():
    with pytest.raises(ValueError):
        sample(2, 3, 1).power(2)


def test_format_identity():
    assert ModMatrix.identity(2).format() == "2 2\n1 0\n0 1\n"


def test_format_line_count():
    text = sample(4, 3, 2).format()
    lines = text.splitlines()
    assert lines[0] == "4 3"
    assert len(lines) == 5
    assert all(len(line.split()) == 3 for line in lines[1:])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        ModMatrix([[1, 2], [3]])