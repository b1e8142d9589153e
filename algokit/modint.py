"""Integers modulo a fixed modulus, with modular inverses."""

from __future__ import annotations

from functools import total_ordering

DEFAULT_MOD = 998244353


def inv_mod(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` in ``[0, m)``.

    Raises ValueError if ``m`` is not positive or ``a`` and ``m`` are not coprime.
    """
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    g, r = m, a % m
    x, y = 0, 1
    while r:
        q = g // r
        g, r = r, g - q * r
        x, y = y, x - q * y
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


@total_ordering
class ModInt:
    """An integer reduced modulo ``mod`` (default 998244353)."""

    __slots__ = ("val", "mod")

    def __init__(self, value: int | ModInt = 0, mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError(f"modulus must be positive, got {mod}")
        if isinstance(value, ModInt):
            value = value.val
        self.val = int(value) % mod
        self.mod = mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError(f"mismatched moduli {self.mod} and {other.mod}")
            return other.val
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented

    def _new(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self._new(self.val + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self._new(self.val - value)

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self._new(value - self.val)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self._new(self.val * value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self * self._new(value).inv()

    def __rtruediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self._new(value) * self.inv()

    def __neg__(self) -> ModInt:
        return self._new(-self.val)

    def __pow__(self, p: int) -> ModInt:
        return self.pow(p)

    def __eq__(self, other) -> bool:
        value = self._coerce(other) if isinstance(other, (ModInt, int)) else NotImplemented
        if value is NotImplemented:
            return NotImplemented
        return self.val == value

    def __lt__(self, other) -> bool:
        value = self._coerce(other)
        if value is NotImplemented:
            return value
        return self.val < value

    def __hash__(self) -> int:
        return hash(self.val)

    def __int__(self) -> int:
        return self.val

    def __index__(self) -> int:
        return self.val

    def __bool__(self) -> bool:
        return self.val != 0

    def __repr__(self) -> str:
        return f"ModInt({self.val}, mod={self.mod})"

    def __str__(self) -> str:
        return str(self.val)

    def inv(self) -> ModInt:
        """Return the multiplicative inverse; raises ZeroDivisionError if none exists."""
        try:
            return self._new(inv_mod(self.val, self.mod))
        except ValueError as exc:
            raise ZeroDivisionError(str(exc)) from None

    def pow(self, p: int) -> ModInt:
        """Raise to the integer power ``p``; negative powers use the inverse."""
        if p < 0:
            return self.inv().pow(-p)
        return self._new(pow(self.val, p, self.mod))