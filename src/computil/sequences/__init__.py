"""Sequence and series utilities."""

from computil.sequences.arithmetic import ArithmeticProgression

__all__ = [
    "ArithmeticProgression",
]
