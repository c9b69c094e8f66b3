"""Core prime utilities."""

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

__all__ = [
    "PrimeUtility",
    "count_primes",
    "generate_primes",
    "get_prime_in_range",
    "is_prime",
    "is_prime_array",
    "nearest_prime",
    "next_prime",
    "prime_sieve_mask",
    "random_prime",
]
