"""Prime testing, search and enumeration.

Single values are tested by trial division. Ranges are enumerated with a
NumPy Sieve of Eratosthenes, bounded by ``ComputilConfig.max_sieve_limit``
since the sieve allocates one byte per integer up to the upper bound.

All functions accept any real number type (int, float, Fraction, Decimal,
NumPy scalars). Non-integral values are never prime.
"""

from __future__ import annotations

import logging
import math
import random

import numpy as np

from computil.config import get_config
from computil.errors import DomainError, OutOfRangeError

logger = logging.getLogger(__name__)


def _integral_value(num) -> int | None:
    """Return num as an int if it is a finite integral value, else None."""
    try:
        floored = math.floor(num)
    except (OverflowError, ValueError):
        # inf / nan
        return None
    if num - floored > 0:
        return None
    return int(floored)


def _floor_finite(num, name: str) -> int:
    try:
        return int(math.floor(num))
    except (OverflowError, ValueError) as e:
        raise DomainError(f"{name} must be finite, got {num}") from e


def _check_sieve_limit(limit: int) -> None:
    """Raise OutOfRangeError if sieving up to limit exceeds max_sieve_limit."""
    max_limit = get_config().max_sieve_limit
    if limit > max_limit:
        raise OutOfRangeError(
            f"Sieve bound {limit} exceeds max_sieve_limit ({max_limit})"
        )


def _numpy_sieve(limit: int) -> np.ndarray:
    """NumPy-based Sieve of Eratosthenes.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit. Empty when limit < 2.

    Raises:
        OutOfRangeError: If limit exceeds the configured sieve limit.
    """
    _check_sieve_limit(limit)

    if limit < 2:
        return np.array([], dtype=np.int64)

    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[0] = False
    is_prime[1] = False

    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return np.nonzero(is_prime)[0].astype(np.int64)


def generate_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit.

    Raises:
        DomainError: If limit is less than 2.
        OutOfRangeError: If limit exceeds the configured sieve limit.
    """
    if limit < 2:
        raise DomainError(f"Limit must be >= 2, got {limit}")

    return _numpy_sieve(_floor_finite(limit, "limit"))


def count_primes(limit) -> int:
    """Count prime numbers up to limit.

    Args:
        limit: Upper bound for counting.

    Returns:
        Number of primes <= limit.

    Raises:
        OutOfRangeError: If limit exceeds the configured sieve limit.
    """
    if limit < 2:
        return 0

    return len(_numpy_sieve(_floor_finite(limit, "limit")))


def is_prime(num) -> bool:
    """Check if a single number is prime.

    Values <= 1, non-integral values and non-finite floats are not prime.
    Uses 6k +/- 1 trial division up to floor(sqrt(num)).

    Args:
        num: Number to check.

    Returns:
        True if num is prime, False otherwise.
    """
    if num <= 1:
        return False

    n = _integral_value(num)
    if n is None:
        return False

    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    if n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def nearest_prime(num) -> int:
    """Return the largest prime <= floor(num), or 2 if floor(num) < 2.

    Args:
        num: Starting value; fractional parts are discarded.

    Returns:
        The nearest prime at or below num.

    Raises:
        DomainError: If num is not finite.
    """
    candidate = _floor_finite(num, "num")
    if candidate < 2:
        return 2

    # Reaches 2 at the latest, which is prime.
    while not is_prime(candidate):
        candidate -= 1

    return candidate


def next_prime(num) -> int:
    """Return the smallest prime >= ceil(num), or 2 if ceil(num) < 2.

    Raises:
        DomainError: If num is not finite.
    """
    try:
        candidate = int(math.ceil(num))
    except (OverflowError, ValueError) as e:
        raise DomainError(f"num must be finite, got {num}") from e

    if candidate <= 2:
        return 2

    if candidate % 2 == 0:
        candidate += 1
    while not is_prime(candidate):
        candidate += 2

    return candidate


def get_prime_in_range(lower, upper) -> list[int]:
    """List every prime p with ceil(lower) <= p <= floor(upper).

    Args:
        lower: Lower bound (inclusive, rounded up).
        upper: Upper bound (inclusive, rounded down).

    Returns:
        Primes in ascending order.

    Raises:
        OutOfRangeError: If either bound is negative, if upper < lower,
            or if upper exceeds the configured sieve limit.
    """
    if lower < 0 or upper < 0:
        raise OutOfRangeError(f"Range cannot be negative, got [{lower}, {upper}]")
    if upper < lower:
        raise OutOfRangeError(f"Wrong range provided: upper ({upper}) < lower ({lower})")

    start = -_floor_finite(-lower, "lower")
    stop = _floor_finite(upper, "upper")

    logger.debug(f"Sieving primes in [{start}, {stop}]")

    primes = _numpy_sieve(stop)
    return primes[primes >= start].tolist()


def random_prime(digit_count: int, rng: random.Random | None = None) -> int:
    """Return a random prime with exactly digit_count decimal digits.

    An integer is sampled uniformly from [10**(d-1), 10**d - 1]; the next
    prime at or above it is returned. If that prime would overflow into
    d + 1 digits, the nearest prime below the sample is returned instead.

    Args:
        digit_count: Number of decimal digits, >= 1.
        rng: Random generator. Defaults to one seeded from
            ``get_config().random_seed``.

    Returns:
        A prime with digit_count digits.

    Raises:
        DomainError: If digit_count < 1.
    """
    if digit_count < 1:
        raise DomainError(f"digit_count must be >= 1, got {digit_count}")

    if rng is None:
        rng = random.Random(get_config().random_seed)

    low = 10 ** (digit_count - 1)
    high = 10 ** digit_count - 1
    sample = rng.randint(low, high)

    prime = next_prime(sample)
    if prime > high:
        prime = nearest_prime(sample)

    logger.debug(f"random_prime({digit_count}): sample={sample} -> {prime}")
    return prime


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.

    Raises:
        OutOfRangeError: If limit - 1 exceeds the configured sieve limit.
    """
    _check_sieve_limit(limit - 1)

    mask = np.zeros(limit, dtype=bool)

    if limit < 2:
        return mask

    mask[_numpy_sieve(limit - 1)] = True
    return mask


def is_prime_array(numbers) -> np.ndarray:
    """Check primality for an array of numbers.

    Sieves up to max(numbers) once and looks every value up in the mask.

    Args:
        numbers: Array-like of real numbers.

    Returns:
        Boolean array where True indicates prime.
    """
    numbers = np.asarray(numbers)
    result = np.zeros(numbers.shape, dtype=bool)

    if numbers.size == 0:
        return result

    valid = np.isfinite(numbers) & (numbers >= 2) & (numbers == np.floor(numbers))
    if not valid.any():
        return result

    candidates = numbers[valid].astype(np.int64)
    max_val = int(candidates.max())

    _check_sieve_limit(max_val)

    mask = prime_sieve_mask(max_val + 1)
    result[valid] = mask[candidates]
    return result


class PrimeUtility:
    """Namespace of the prime operations, for callers that prefer a class.

    Stateless; every method is a static alias of the module function.
    """

    is_prime = staticmethod(is_prime)
    nearest_prime = staticmethod(nearest_prime)
    next_prime = staticmethod(next_prime)
    get_prime_in_range = staticmethod(get_prime_in_range)
    random_prime = staticmethod(random_prime)
    generate_primes = staticmethod(generate_primes)
    count_primes = staticmethod(count_primes)
