"""Polynomial equation solvers."""

from computil.algebra.quadratic import QuadraticSolver, RootNature

__all__ = [
    "QuadraticSolver",
    "RootNature",
]
