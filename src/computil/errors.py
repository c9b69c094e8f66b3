"""Exception types raised by computil operations.

Every error derives from ComputilError and from the closest builtin
exception, so callers can catch either the library type or the usual
``ValueError`` / ``ZeroDivisionError``.
"""

from __future__ import annotations


class ComputilError(Exception):
    """Base class for all computil errors."""


class DomainError(ComputilError, ValueError):
    """Input is mathematically invalid for the operation."""


class OutOfRangeError(ComputilError, ValueError):
    """Requested index or bound lies outside the defined extent."""


class DivisionByZeroError(ComputilError, ZeroDivisionError):
    """A derived quantity would divide by a zero leading coefficient."""


class UndefinedResultError(DomainError):
    """The operation has no result in the requested numeric domain."""
