"""Exact rational numbers kept in lowest terms with a non-negative denominator."""

from __future__ import annotations

import math


class Fraction:
    """A reduced fraction ``numer/denom``.

    A zero denominator is allowed and stands for a signed infinity; ``0/0``
    raises ZeroDivisionError.
    """

    __slots__ = ("numer", "denom")

    def __init__(self, numer: int = 0, denom: int = 1) -> None:
        if denom < 0:
            numer, denom = -numer, -denom
        g = math.gcd(numer, denom)
        if g == 0:
            raise ZeroDivisionError("0/0 is undefined")
        self.numer = numer // g
        self.denom = denom // g

    @staticmethod
    def _coerce(other: object) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int):
            return Fraction(other)
        return None

    @staticmethod
    def _cross_sign(a: Fraction, b: Fraction) -> int:
        value = a.numer * b.denom - b.numer * a.denom
        return (value > 0) - (value < 0)

    def is_integer(self) -> bool:
        return self.denom == 1

    def inv(self) -> Fraction:
        """The reciprocal."""
        return Fraction(self.denom, self.numer)

    def __add__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.numer * o.denom + o.numer * self.denom, self.denom * o.denom)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.numer * o.denom - o.numer * self.denom, self.denom * o.denom)

    def __rsub__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.numer * o.numer, self.denom * o.denom)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.numer * o.denom, self.denom * o.numer)

    def __rtruediv__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> Fraction:
        return Fraction(-self.numer, self.denom)

    def __abs__(self) -> Fraction:
        return Fraction(abs(self.numer), self.denom)

    def _compare(self, other: object) -> int | None:
        o = self._coerce(other)
        if o is None:
            return None
        return self._cross_sign(self, o)

    def __eq__(self, other: object) -> bool:
        sign = self._compare(other)
        return NotImplemented if sign is None else sign == 0

    def __lt__(self, other: object) -> bool:
        sign = self._compare(other)
        return NotImplemented if sign is None else sign < 0

    def __le__(self, other: object) -> bool:
        sign = self._compare(other)
        return NotImplemented if sign is None else sign <= 0

    def __gt__(self, other: object) -> bool:
        sign = self._compare(other)
        return NotImplemented if sign is None else sign > 0

    def __ge__(self, other: object) -> bool:
        sign = self._compare(other)
        return NotImplemented if sign is None else sign >= 0

    def __hash__(self) -> int:
        return hash((self.numer, self.denom))

    def __float__(self) -> float:
        if self.denom == 0:
            return math.copysign(math.inf, self.numer)
        return self.numer / self.denom

    def __repr__(self) -> str:
        return f"Fraction({self.numer}, {self.denom})"

    def __str__(self) -> str:
        return f"{self.numer}/{self.denom}"