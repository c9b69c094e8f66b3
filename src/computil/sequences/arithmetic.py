"""Finite arithmetic progressions.

An arithmetic progression (AP) is a sequence in which consecutive terms
differ by a constant common difference d:

    a, a + d, a + 2d, ..., a + (n - 1)d

Terms are computed on demand from the first term, the common difference
and the term count; nothing is materialised until ``get_all_terms``.
"""

from __future__ import annotations

import logging

from computil.errors import DomainError, OutOfRangeError

logger = logging.getLogger(__name__)


def _validate_term_count(term_count) -> int:
    count = int(term_count)
    if count < 0:
        raise DomainError(f"Term count must be >= 0, got {term_count}")
    return count


class ArithmeticProgression:
    """A finite arithmetic progression with fixed-time term access.

    Works with any numeric type supporting addition and multiplication by
    an int (int, float, Fraction, Decimal, NumPy scalars).

    Attributes:
        first_term: The first term a.
        common_difference: The common difference d.
        term_count: Number of terms n.
    """

    def __init__(self, first_term, common_difference, term_count: int):
        """Initialize the progression.

        Args:
            first_term: The first term a.
            common_difference: The common difference d.
            term_count: Number of terms n. Truncated to int.

        Raises:
            DomainError: If term_count is negative.
        """
        self._first_term = first_term
        self._common_difference = common_difference
        self._term_count = _validate_term_count(term_count)

    @property
    def first_term(self):
        return self._first_term

    @first_term.setter
    def first_term(self, value) -> None:
        self._first_term = value

    @property
    def common_difference(self):
        return self._common_difference

    @common_difference.setter
    def common_difference(self, value) -> None:
        self._common_difference = value

    @property
    def term_count(self) -> int:
        return self._term_count

    @term_count.setter
    def term_count(self, value: int) -> None:
        self._term_count = _validate_term_count(value)

    @property
    def last_term(self):
        """The final term, or None for an empty progression."""
        if self._term_count == 0:
            return None
        return self._term(self._term_count - 1)

    # Method-style accessors, equivalent to the properties above.

    def get_first_term(self):
        return self._first_term

    def set_first_term(self, value) -> None:
        self.first_term = value

    def get_common_difference(self):
        return self._common_difference

    def set_common_difference(self, value) -> None:
        self.common_difference = value

    def get_term_count(self) -> int:
        return self._term_count

    def set_term_count(self, value: int) -> None:
        self.term_count = value

    def _term(self, index: int):
        return self._first_term + index * self._common_difference

    def _check_position(self, n) -> int:
        if n <= 0:
            raise DomainError(f"Terms cannot be zero or negative, got {n}")
        if n > self._term_count:
            raise OutOfRangeError(
                f"Not enough terms in AP: requested {n}, have {self._term_count}"
            )
        try:
            position = int(n)
        except (OverflowError, ValueError) as e:
            # nan passes both comparisons above
            raise DomainError(f"Term position must be a finite integer, got {n}") from e
        if position != n:
            raise DomainError(f"Term position must be an integer, got {n}")
        return position

    def get_nth_term(self, n: int):
        """Return the nth term (1-based): a + (n - 1)d.

        Raises:
            DomainError: If n is zero, negative or not integral.
            OutOfRangeError: If n exceeds the term count.
        """
        n = self._check_position(n)
        return self._term(n - 1)

    def get_nth_term_from_last(self, n: int):
        """Return the nth term counting back from the last term.

        The last term is n = 1.

        Raises:
            DomainError: If n is zero, negative or not integral.
            OutOfRangeError: If n exceeds the term count.
        """
        n = self._check_position(n)
        return self.get_nth_term(self._term_count) - (n - 1) * self._common_difference

    def sum_n(self, first_term=None, last_term=None, n: int | None = None):
        """Sum of all terms: n/2 * (2a + (n - 1)d).

        Uses true division, so integer progressions with an odd product
        are never truncated.

        Given first_term, last_term and n, returns the sum of that AP
        instead, independent of this instance (see ``sum_first_last``).
        """
        if first_term is not None or last_term is not None or n is not None:
            if first_term is None or last_term is None or n is None:
                raise DomainError("sum_n needs all of first_term, last_term and n, or none")
            return self.sum_first_last(first_term, last_term, n)

        n = self._term_count
        return n * (2 * self._first_term + (n - 1) * self._common_difference) / 2

    @staticmethod
    def sum_first_last(first_term, last_term, n: int):
        """Sum of an AP given its first term, last term and term count."""
        return n * (first_term + last_term) / 2

    def get_all_terms(self) -> list:
        """Return every term in index order.

        The list is ascending only when the common difference is >= 0.
        """
        logger.debug(f"Materialising {self._term_count} terms of {self!r}")
        return [self._term(i) for i in range(self._term_count)]

    def __len__(self) -> int:
        return self._term_count

    def __iter__(self):
        for i in range(self._term_count):
            yield self._term(i)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArithmeticProgression):
            return NotImplemented
        return (
            self._first_term == other._first_term
            and self._common_difference == other._common_difference
            and self._term_count == other._term_count
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"ArithmeticProgression(first_term={self._first_term!r}, "
            f"common_difference={self._common_difference!r}, "
            f"term_count={self._term_count})"
        )
