"""Linear-time prime sieve."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Sieve:
    """Result of a sieve up to ``maximum`` inclusive."""

    maximum: int
    smallest_factor: list[int] = field(default_factory=list)
    prime: list[bool] = field(default_factory=list)
    primes: list[int] = field(default_factory=list)


def linear_sieve(maximum: int) -> Sieve:
    """Sieve numbers up to ``maximum`` (at least 1) in O(n)."""
    maximum = max(maximum, 1)
    smallest_factor = [0] * (maximum + 1)
    prime = [True] * (maximum + 1)
    prime[0] = prime[1] = False
    primes: list[int] = []

    for i in range(2, maximum + 1):
        if prime[i]:
            smallest_factor[i] = i
            primes.append(i)

        for p in primes:
            if p > smallest_factor[i] or i * p > maximum:
                break
            prime[i * p] = False
            smallest_factor[i * p] = p

    return Sieve(maximum, smallest_factor, prime, primes)