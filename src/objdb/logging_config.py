"""
Logging setup for the objdb command line.
"""

import logging
import sys


def setup_logging(level: str) -> None:
    """Configure the root logger to write to stderr."""
    log_level = level.upper()

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)
