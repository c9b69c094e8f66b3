"""Tests for prime sieve functionality."""

import math
import random
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from computil.config import ComputilConfig, set_config
from computil.core.sieve import (
    PrimeUtility,
    count_primes,
    generate_primes,
    get_prime_in_range,
    is_prime,
    is_prime_array,
    nearest_prime,
    next_prime,
    prime_sieve_mask,
    random_prime,
)
from computil.errors import DomainError, OutOfRangeError


def _naive_is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d != 0 for d in range(2, n))


class TestIsPrime:
    """Tests for is_prime function."""

    def test_small_primes(self):
        """Test known small primes."""
        small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]
        for p in small_primes:
            assert is_prime(p), f"{p} should be prime"

    def test_small_composites(self):
        """Test known small composites."""
        composites = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 25, 49]
        for c in composites:
            assert not is_prime(c), f"{c} should not be prime"

    def test_edge_cases(self):
        """Test edge cases."""
        assert not is_prime(0)
        assert not is_prime(1)
        assert is_prime(2)
        assert not is_prime(-5)

    def test_matches_naive_trial_division(self):
        """Test agreement with division by every integer in [2, n-1]."""
        for n in range(0, 101):
            assert is_prime(n) == _naive_is_prime(n), n

    def test_larger_primes(self):
        """Test some larger known primes."""
        large_primes = [97, 101, 103, 107, 109, 113, 127, 131, 7919, 104729]
        for p in large_primes:
            assert is_prime(p), f"{p} should be prime"

    def test_integral_floats(self):
        """Test that integral floats are judged by their value."""
        assert is_prime(7.0)
        assert not is_prime(9.0)

    def test_fractional_values_are_not_prime(self):
        """Test that non-integral values are never prime."""
        assert not is_prime(7.5)
        assert not is_prime(2.000001)
        assert not is_prime(Fraction(15, 2))

    def test_other_numeric_types(self):
        """Test Fraction, Decimal and NumPy scalars."""
        assert is_prime(Fraction(14, 2))
        assert is_prime(Decimal("13"))
        assert not is_prime(Decimal("13.5"))
        assert is_prime(np.int64(31))
        assert is_prime(np.float64(31.0))

    def test_non_finite(self):
        """Test that inf and nan are not prime."""
        assert not is_prime(math.inf)
        assert not is_prime(-math.inf)
        assert not is_prime(math.nan)


class TestNearestPrime:
    """Tests for nearest_prime function."""

    def test_known_values(self):
        """Test values from the reference behavior."""
        assert nearest_prime(10) == 7
        assert nearest_prime(2) == 2
        assert nearest_prime(1) == 2

    def test_below_two(self):
        """Test that anything below 2 maps to 2."""
        assert nearest_prime(0) == 2
        assert nearest_prime(-100) == 2
        assert nearest_prime(1.99) == 2

    def test_prime_input_returned(self):
        """Test that a prime is its own nearest prime."""
        for p in [3, 5, 97, 7919]:
            assert nearest_prime(p) == p

    def test_floors_fractional_input(self):
        """Test that the fractional part is discarded first."""
        assert nearest_prime(13.9) == 13
        assert nearest_prime(Fraction(29, 2)) == 13

    def test_result_is_largest_prime_below(self):
        """Test that no prime lies between the result and the input."""
        for n in range(2, 200):
            p = nearest_prime(n)
            assert p <= n
            assert is_prime(p)
            assert not any(is_prime(k) for k in range(p + 1, n + 1))

    def test_non_finite_raises(self):
        """Test that inf is rejected."""
        with pytest.raises(DomainError):
            nearest_prime(math.inf)


class TestNextPrime:
    """Tests for next_prime function."""

    def test_known_values(self):
        """Test small inputs."""
        assert next_prime(0) == 2
        assert next_prime(2) == 2
        assert next_prime(3) == 3
        assert next_prime(8) == 11
        assert next_prime(14) == 17
        assert next_prime(13.1) == 17


class TestGetPrimeInRange:
    """Tests for get_prime_in_range function."""

    def test_reference_range(self):
        """Test the range 5..25."""
        assert get_prime_in_range(5, 25) == [5, 7, 11, 13, 17, 19, 23]

    def test_returns_python_ints(self):
        """Test that results are plain ints in a list."""
        primes = get_prime_in_range(0, 10)
        assert primes == [2, 3, 5, 7]
        assert isinstance(primes, list)
        assert all(type(p) is int for p in primes)

    def test_fractional_bounds(self):
        """Test that bounds are rounded inward."""
        assert get_prime_in_range(4.5, 13.9) == [5, 7, 11, 13]
        assert get_prime_in_range(5.1, 12.9) == [7, 11]

    def test_inclusive_bounds(self):
        """Test that prime bounds are included."""
        assert get_prime_in_range(7, 7) == [7]
        assert get_prime_in_range(11, 13) == [11, 13]

    def test_empty_ranges(self):
        """Test ranges containing no primes."""
        assert get_prime_in_range(0, 1) == []
        assert get_prime_in_range(24, 28) == []

    def test_negative_bound_raises(self):
        """Test that negative bounds are rejected."""
        with pytest.raises(OutOfRangeError):
            get_prime_in_range(-1, 10)

        with pytest.raises(OutOfRangeError):
            get_prime_in_range(0, -10)

    def test_reversed_range_raises(self):
        """Test that upper < lower is rejected."""
        with pytest.raises(OutOfRangeError):
            get_prime_in_range(25, 5)

    def test_sieve_limit(self):
        """Test that bounds above the configured limit are rejected."""
        set_config(ComputilConfig(max_sieve_limit=100))

        assert get_prime_in_range(90, 100) == [97]
        with pytest.raises(OutOfRangeError):
            get_prime_in_range(0, 101)

    def test_errors_are_value_errors(self):
        """Test that range errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            get_prime_in_range(10, 1)


class TestRandomPrime:
    """Tests for random_prime function."""

    @pytest.mark.parametrize("digits", [1, 2, 3, 6])
    def test_digit_count(self, digits):
        """Test that the result is prime with the requested digits."""
        rng = random.Random(1234)
        for _ in range(20):
            p = random_prime(digits, rng=rng)
            assert is_prime(p)
            assert len(str(p)) == digits

    def test_seeded_by_config(self):
        """Test that the configured seed makes results reproducible."""
        set_config(ComputilConfig(random_seed=42))
        assert random_prime(5) == random_prime(5)

    def test_invalid_digit_count(self):
        """Test that fewer than one digit is rejected."""
        with pytest.raises(DomainError):
            random_prime(0)


class TestGeneratePrimes:
    """Tests for generate_primes function."""

    def test_matches_is_prime(self):
        """Test that the sieve agrees with trial division."""
        primes = generate_primes(200)
        expected = [n for n in range(201) if is_prime(n)]
        np.testing.assert_array_equal(primes, expected)
        assert primes.dtype == np.int64

    def test_fractional_limit(self):
        """Test that a fractional limit is floored."""
        np.testing.assert_array_equal(generate_primes(12.9), [2, 3, 5, 7, 11])
        assert generate_primes(13)[-1] == 13

    def test_limit_below_two(self):
        """Test that limits below 2 are rejected."""
        for limit in [1.5, 0, -5]:
            with pytest.raises(DomainError):
                generate_primes(limit)

    def test_non_finite_limit(self):
        """Test that an infinite limit is rejected."""
        with pytest.raises(DomainError):
            generate_primes(math.inf)

    def test_sieve_limit(self):
        """Test that limits above the configured cap are rejected."""
        set_config(ComputilConfig(max_sieve_limit=50))

        assert len(generate_primes(50)) == 15
        with pytest.raises(OutOfRangeError):
            generate_primes(51)


class TestIsPrimeArray:
    """Tests for is_prime_array function."""

    def test_mixed_array(self):
        """Test array with mix of primes and composites."""
        numbers = np.array([2, 3, 4, 5, 6, 7, 8, 9, 10])
        expected = np.array([True, True, False, True, False, True, False, False, False])

        result = is_prime_array(numbers)
        np.testing.assert_array_equal(result, expected)

    def test_non_integral_and_negative(self):
        """Test that fractional and negative entries are not prime."""
        numbers = np.array([-7.0, 0.0, 2.5, 7.0, np.nan, 11.0])
        expected = np.array([False, False, False, True, False, True])

        np.testing.assert_array_equal(is_prime_array(numbers), expected)

    def test_empty_array(self):
        """Test empty array."""
        result = is_prime_array(np.array([]))
        assert len(result) == 0

    def test_sieve_limit(self):
        """Test that the largest candidate is checked against the cap."""
        set_config(ComputilConfig(max_sieve_limit=100))

        np.testing.assert_array_equal(is_prime_array([2, 97]), [True, True])
        with pytest.raises(OutOfRangeError):
            is_prime_array([2, 101])


class TestPrimeSieveMask:
    """Tests for prime_sieve_mask function."""

    def test_agrees_with_generate_primes(self):
        """Test that set positions are exactly the primes below limit."""
        mask = prime_sieve_mask(50)
        assert len(mask) == 50
        np.testing.assert_array_equal(np.nonzero(mask)[0], generate_primes(49))

    def test_small_sizes(self):
        """Test masks too small to hold a prime, and the first one that does."""
        assert len(prime_sieve_mask(0)) == 0
        np.testing.assert_array_equal(prime_sieve_mask(2), [False, False])
        np.testing.assert_array_equal(prime_sieve_mask(3), [False, False, True])

    def test_sieve_limit(self):
        """Test that the cap applies to the largest index, limit - 1."""
        set_config(ComputilConfig(max_sieve_limit=100))

        assert prime_sieve_mask(101)[97]
        with pytest.raises(OutOfRangeError):
            prime_sieve_mask(102)


class TestCountPrimes:
    """Tests for count_primes function."""

    def test_agrees_with_range(self):
        """Test that counting matches the range listing."""
        assert count_primes(1000) == len(get_prime_in_range(0, 1000)) == 168

    def test_fractional_limit(self):
        """Test that a fractional limit is floored."""
        assert count_primes(10.5) == 4
        assert count_primes(Fraction(23, 2)) == 5

    def test_below_two(self):
        """Test that there are no primes below 2."""
        assert count_primes(1.99) == 0
        assert count_primes(-3) == 0

    def test_sieve_limit(self):
        """Test that limits above the configured cap are rejected."""
        set_config(ComputilConfig(max_sieve_limit=1000))

        assert count_primes(1000) == 168
        with pytest.raises(OutOfRangeError):
            count_primes(1001)


class TestPrimeUtility:
    """Tests for the PrimeUtility namespace."""

    def test_static_aliases(self):
        """Test that methods work without an instance."""
        assert PrimeUtility.is_prime(13)
        assert PrimeUtility.nearest_prime(10) == 7
        assert PrimeUtility.get_prime_in_range(5, 25) == [5, 7, 11, 13, 17, 19, 23]

    def test_instance_access(self):
        """Test that methods also work through an instance."""
        util = PrimeUtility()
        assert util.is_prime(17)
        assert util.get_prime_in_range(0, 5) == [2, 3, 5]
