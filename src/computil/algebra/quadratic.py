"""Quadratic equation solver for a*x^2 + b*x + c = 0."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Union

from computil.errors import DivisionByZeroError, UndefinedResultError

Number = Union[int, float, Fraction, Decimal]


def _sqrt(value):
    """Square root that stays in Decimal for Decimal input."""
    if isinstance(value, Decimal):
        return value.sqrt()
    return math.sqrt(value)


class RootNature(Enum):
    """Kind of roots, decided by the sign of the discriminant."""

    REAL_DISTINCT = "real_distinct"
    REAL_REPEATED = "real_repeated"
    COMPLEX_CONJUGATE = "complex_conjugate"


@dataclass(frozen=True)
class QuadraticSolver:
    """Roots and derived quantities of a*x^2 + b*x + c = 0.

    Attributes:
        a: Quadratic coefficient. Must be non-zero for root queries.
        b: Linear coefficient.
        c: Constant term.
    """

    a: Number
    b: Number
    c: Number

    @classmethod
    def from_roots(cls, r1, r2, a=1) -> 'QuadraticSolver':
        """Build the equation a*(x - r1)*(x - r2) = 0."""
        return cls(a, -a * (r1 + r2), a * r1 * r2)

    def _require_quadratic(self) -> None:
        if self.a == 0:
            raise DivisionByZeroError(
                f"Leading coefficient is zero: {self.a}x^2 + {self.b}x + {self.c}"
            )

    def get_discriminant(self):
        """b^2 - 4ac."""
        return self.b * self.b - 4 * self.a * self.c

    def root_nature(self) -> RootNature:
        d = self.get_discriminant()
        if d > 0:
            return RootNature.REAL_DISTINCT
        if d == 0:
            return RootNature.REAL_REPEATED
        return RootNature.COMPLEX_CONJUGATE

    def get_sum_of_roots(self):
        """-b/a.

        Raises:
            DivisionByZeroError: If a is zero.
        """
        self._require_quadratic()
        return -self.b / self.a

    def get_product_of_roots(self):
        """c/a.

        Raises:
            DivisionByZeroError: If a is zero.
        """
        self._require_quadratic()
        return self.c / self.a

    def get_real_roots(self) -> tuple:
        """Return ((-b + sqrt(D)) / 2a, (-b - sqrt(D)) / 2a).

        Decimal coefficients give Decimal roots; other types give floats.

        Raises:
            DivisionByZeroError: If a is zero.
            UndefinedResultError: If the discriminant is negative.
        """
        self._require_quadratic()

        d = self.get_discriminant()
        if d < 0:
            raise UndefinedResultError(
                f"No real roots: discriminant is {d} for "
                f"{self.a}x^2 + {self.b}x + {self.c}"
            )

        root_d = _sqrt(d)
        denom = 2 * self.a
        return (-self.b + root_d) / denom, (-self.b - root_d) / denom

    def get_complex_roots(self) -> tuple[complex, complex]:
        """Return both roots as complex numbers.

        For a non-negative discriminant these are the real roots with a
        zero imaginary part, in the same order as ``get_real_roots``. For
        a negative discriminant they are the conjugate pair
        -b/2a + i*sqrt(|D|)/2a and -b/2a - i*sqrt(|D|)/2a.

        Raises:
            DivisionByZeroError: If a is zero.
        """
        self._require_quadratic()

        d = self.get_discriminant()
        if d >= 0:
            r1, r2 = self.get_real_roots()
            return complex(float(r1), 0.0), complex(float(r2), 0.0)

        denom = 2 * self.a
        real = float(-self.b / denom)
        imag = float(_sqrt(-d) / denom)
        return complex(real, imag), complex(real, -imag)
