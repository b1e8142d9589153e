"""Factorials, binomial coefficients and permutations modulo a prime."""

from __future__ import annotations

from algokit.modint import DEFAULT_MOD, ModInt, inv_mod


class Combinatorics:
    """Cached factorial tables modulo a prime ``mod``.

    Arguments ``n`` must stay below ``mod`` for inverses to exist.
    """

    def __init__(self, mod: int = DEFAULT_MOD) -> None:
        self.mod = mod
        self._factorial = [1]
        self._inv_factorial = [1]

    @property
    def prepared_maximum(self) -> int:
        return len(self._factorial) - 1

    def _prepare(self, maximum: int) -> None:
        prepared = self.prepared_maximum
        if maximum <= prepared:
            return
        # Grow by an extra percent so repeated small increases stay cheap.
        maximum += maximum // 100
        mod = self.mod
        fact = self._factorial
        for i in range(prepared + 1, maximum + 1):
            fact.append(i * fact[-1] % mod)

        new_inv = [0] * (maximum - prepared)
        top = inv_mod(fact[maximum], mod)
        new_inv[-1] = top
        for i in range(maximum - 1, prepared, -1):
            top = (i + 1) * top % mod
            new_inv[i - prepared - 1] = top
        self._inv_factorial.extend(new_inv)

    def _wrap(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def factorial(self, n: int) -> ModInt:
        """n! modulo ``mod``; zero for negative ``n``."""
        if n < 0:
            return self._wrap(0)
        self._prepare(n)
        return self._wrap(self._factorial[n])

    def inv_factorial(self, n: int) -> ModInt:
        """Inverse of n! modulo ``mod``; zero for negative ``n``."""
        if n < 0:
            return self._wrap(0)
        self._prepare(n)
        return self._wrap(self._inv_factorial[n])

    def choose(self, n: int, r: int) -> ModInt:
        """Binomial coefficient C(n, r); zero when ``r`` is out of range."""
        if r < 0 or r > n:
            return self._wrap(0)
        self._prepare(n)
        return self._wrap(
            self._factorial[n] * self._inv_factorial[r] * self._inv_factorial[n - r]
        )

    def permute(self, n: int, r: int) -> ModInt:
        """Number of ordered selections P(n, r); zero when ``r`` is out of range."""
        if r < 0 or r > n:
            return self._wrap(0)
        self._prepare(n)
        return self._wrap(self._factorial[n] * self._inv_factorial[n - r])

    def _check_range(self, n: int, r: int) -> None:
        if not 0 <= r <= n:
            raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")

    def inv_choose(self, n: int, r: int) -> ModInt:
        """Inverse of C(n, r); requires ``0 <= r <= n``."""
        self._check_range(n, r)
        self._prepare(n)
        return self._wrap(
            self._inv_factorial[n] * self._factorial[r] * self._factorial[n - r]
        )

    def inv_permute(self, n: int, r: int) -> ModInt:
        """Inverse of P(n, r); requires ``0 <= r <= n``."""
        self._check_range(n, r)
        self._prepare(n)
        return self._wrap(self._inv_factorial[n] * self._factorial[n - r])