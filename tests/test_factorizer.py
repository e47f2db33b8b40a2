"""
Unit tests for trial division factorization.

Tests cover:
- Known factorizations, primes and powers
- Reconstruction and ordering properties over a range of inputs
- Inputs near the 2^31 - 1 upper bound
"""
from factorbot.constants import MAX_NUMBER
from factorbot.services.factorizer import factorize, is_prime_factorization
from conftest import product_of_terms


def assert_valid_factorization(n, factors):
    """Terms multiply back to n, primes strictly increase, exponents are positive."""
    assert product_of_terms(factors) == n, f"{factors} does not multiply to {n}"
    primes = [prime for prime, _ in factors]
    assert primes == sorted(set(primes)), f"primes not strictly increasing for {n}"
    assert all(exponent >= 1 for _, exponent in factors)


class TestFactorize:
    """Tests for factorize function."""

    def test_composite(self):
        assert factorize(84) == ((2, 2), (3, 1), (7, 1))
        assert factorize(360) == ((2, 3), (3, 2), (5, 1))

    def test_prime(self):
        """A prime yields the single term (p, 1)."""
        assert factorize(2) == ((2, 1),)
        assert factorize(13) == ((13, 1),)

    def test_prime_power(self):
        assert factorize(1024) == ((2, 10),)
        assert factorize(3 ** 12) == ((3, 12),)

    def test_one_has_no_factors(self):
        assert factorize(1) == ()

    def test_largest_prime_factor_left_over(self):
        """Remaining cofactor above sqrt bound is emitted as a prime."""
        assert factorize(2 * 1000003) == ((2, 1), (1000003, 1))

    def test_upper_bound(self):
        assert factorize(MAX_NUMBER) == ((MAX_NUMBER, 1),)
        assert factorize(MAX_NUMBER - 1) == (
            (2, 1), (3, 2), (7, 1), (11, 1), (31, 1), (151, 1), (331, 1)
        )

    def test_deterministic(self):
        assert factorize(2147483645) == factorize(2147483645)

    def test_result_is_immutable(self):
        assert isinstance(factorize(84), tuple)


class TestFactorizationProperties:
    """Property checks over ranges of inputs."""

    def test_small_range(self):
        for n in range(2, 5000):
            assert_valid_factorization(n, factorize(n))

    def test_every_factor_is_prime(self):
        for n in range(2, 1000):
            for prime, _ in factorize(n):
                assert factorize(prime) == ((prime, 1),), f"{prime} in factorize({n}) is not prime"

    def test_large_values(self):
        for n in (2147483645, 2147483644, 1000000007 * 2, 999999937, 65536 * 32767, 46337 * 46337):
            assert_valid_factorization(n, factorize(n))


class TestIsPrimeFactorization:

    def test_prime(self):
        assert is_prime_factorization(13, ((13, 1),))

    def test_composite(self):
        assert not is_prime_factorization(12, ((2, 2), (3, 1)))
        assert not is_prime_factorization(4, ((2, 2),))

    def test_empty(self):
        assert is_prime_factorization(1, ())
