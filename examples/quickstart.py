"""Quick start example for computil.

Run this script to exercise each component and check the installation.
"""

import logging

from computil import (
    ArithmeticProgression,
    QuadraticSolver,
    get_prime_in_range,
    nearest_prime,
    random_prime,
)
from computil.utils.logging import setup_logger


def main():
    logger = setup_logger("computil", console_level=logging.INFO)

    logger.info("computil - Quick Start Demo")
    logger.info("=" * 50)

    logger.info("\n1. Arithmetic progression 1, 2, ..., 5")
    ap = ArithmeticProgression(1, 1, 5)
    logger.info(f"   Terms: {ap.get_all_terms()}")
    logger.info(f"   3rd term: {ap.get_nth_term(3)}, 2nd from last: {ap.get_nth_term_from_last(2)}")
    logger.info(f"   Sum: {ap.sum_n()}")

    logger.info("\n2. Primes in [5, 25]")
    primes = get_prime_in_range(5, 25)
    logger.info("   " + " ".join(str(p) for p in primes))
    logger.info(f"   Nearest prime to 10: {nearest_prime(10)}")
    logger.info(f"   Random 6-digit prime: {random_prime(6)}")

    logger.info("\n3. Quadratic x^2 - 3x + 2 = 0")
    eq = QuadraticSolver(1, -3, 2)
    logger.info(f"   Discriminant: {eq.get_discriminant()}")
    logger.info(f"   Real roots: {eq.get_real_roots()}")
    logger.info(f"   Roots of x^2 + 1: {QuadraticSolver(1, 0, 1).get_complex_roots()}")


if __name__ == "__main__":
    main()
