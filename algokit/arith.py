"""Integer division helpers and bit utilities."""


def floor_div(a: int, b: int) -> int:
    """Divide rounding toward negative infinity."""
    return a // b


def ceil_div(a: int, b: int) -> int:
    """Divide rounding toward positive infinity."""
    return -(-a // b)


def highest_bit(x: int) -> int:
    """Return the index of the highest set bit of ``x``, or -1 for zero."""
    if x < 0:
        raise ValueError(f"highest_bit expects a non-negative value, got {x}")
    return x.bit_length() - 1