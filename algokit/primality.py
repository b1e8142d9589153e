"""Deterministic Miller-Rabin primality test for 64-bit integers."""

from __future__ import annotations

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

# Each entry: (exclusive upper bound on n, bases that decide primality below it).
_BASE_SETS = (
    (341531, (9345883071009581737,)),
    (1050535501, (336781006125, 9639812373923155)),
    (350269456337, (4230279247111683200, 14694767155120705706, 16641139526367750375)),
    (55245642489451, (2, 141889084524735, 1199124725622454117, 11096072698276303650)),
    (
        7999252175582851,
        (2, 4130806001517, 149795463772692060, 186635894390467037, 3967304179347715805),
    ),
    (
        585226005592931977,
        (
            2,
            123635709730000,
            9233062284813009,
            43835965440333360,
            761179012939631437,
            1263739024124850375,
        ),
    ),
)
_FULL_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)

_LIMIT = 1 << 64


def _bases_for(n: int) -> tuple[int, ...]:
    for bound, bases in _BASE_SETS:
        if n < bound:
            return bases
    return _FULL_BASES


def miller_rabin(n: int) -> bool:
    """Return whether ``n`` is prime; exact for every ``n < 2**64``."""
    if n >= _LIMIT:
        raise ValueError(f"miller_rabin is exact only below 2**64, got {n}")
    if n < 2:
        return False

    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p

    r = ((n - 1) & -(n - 1)).bit_length() - 1
    d = (n - 1) >> r

    for a in _bases_for(n):
        if a % n == 0:
            continue
        x = pow(a % n, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            if x == n - 1:
                break
            x = x * x % n
        if x != n - 1:
            return False

    return True