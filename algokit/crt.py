"""Chinese remainder theorem for pairwise coprime moduli."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.modint import inv_mod


def chinese_remainder(a1: int, m1: int, a2: int, m2: int) -> int:
    """Return x in ``[0, m1*m2)`` with x = a1 (mod m1) and x = a2 (mod m2).

    Raises ValueError if the moduli are not positive and coprime.
    """
    if m1 <= 0 or m2 <= 0:
        raise ValueError("moduli must be positive")
    if m1 < m2:
        a1, m1, a2, m2 = a2, m2, a1, m1
    a1 %= m1
    a2 %= m2
    k = (a2 - a1) * inv_mod(m1, m2) % m2
    result = a1 + k * m1
    return result


def chinese_remainder_all(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Combine any number of congruences with pairwise coprime moduli."""
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli must have the same length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    result = residues[0] % moduli[0]
    mod = moduli[0]
    for a, m in zip(residues[1:], moduli[1:]):
        result = chinese_remainder(result, mod, a, m)
        mod *= m
    return result