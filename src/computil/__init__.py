"""computil - generic arithmetic progression, prime and quadratic utilities."""

__version__ = "0.1.0"

from computil.algebra.quadratic import QuadraticSolver, RootNature
from computil.config import ComputilConfig, get_config, reset_config, set_config
from computil.core.sieve import (
    PrimeUtility,
    get_prime_in_range,
    is_prime,
    nearest_prime,
    random_prime,
)
from computil.errors import (
    ComputilError,
    DivisionByZeroError,
    DomainError,
    OutOfRangeError,
    UndefinedResultError,
)
from computil.sequences.arithmetic import ArithmeticProgression

__all__ = [
    "ArithmeticProgression",
    "PrimeUtility",
    "QuadraticSolver",
    "RootNature",
    "is_prime",
    "nearest_prime",
    "get_prime_in_range",
    "random_prime",
    "ComputilConfig",
    "get_config",
    "set_config",
    "reset_config",
    "ComputilError",
    "DomainError",
    "OutOfRangeError",
    "DivisionByZeroError",
    "UndefinedResultError",
]
