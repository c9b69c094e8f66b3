"""Logger setup for scripts built on computil.

Library modules only create module loggers and emit debug records; handler
configuration is left to the host through ``setup_logger``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = "computil",
    log_path: Path | None = None,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """Set up a logger that writes to the console and optionally a file.

    Args:
        name: Logger name. ``"computil"`` captures every library module.
        log_path: If given, DEBUG and above are appended to this file.
        console_level: Minimum level echoed to stdout.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logger
