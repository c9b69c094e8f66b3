"""Utility modules for computil."""

from computil.utils.logging import setup_logger

__all__ = [
    "setup_logger",
]
