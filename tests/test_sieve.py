from algokit.sieve import linear_sieve


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, int(n**0.5) + 1))


def test_prime_flags_match_trial_division():
    s = linear_sieve(500)
    assert s.prime == [_is_prime(n) for n in range(501)]
    assert s.primes == [n for n in range(501) if _is_prime(n)]


def test_smallest_factor_is_smallest_prime_divisor():
    s = linear_sieve(400)
    for n in range(2, 401):
        f = s.smallest_factor[n]
        assert n % f == 0
        assert _is_prime(f)
        assert all(n % d for d in range(2, f))
    assert s.smallest_factor[0] == 0
    assert s.smallest_factor[1] == 0


def test_prime_count_below_hundred():
    assert len(linear_sieve(100).primes) == 25


def test_tiny_maximum_is_raised_to_one():
    s = linear_sieve(0)
    assert s.maximum == 1
    assert s.prime == [False, False]
    assert s.primes == []