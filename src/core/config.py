"""
Runtime settings, read once at import time.

The engine itself never installs logging handlers. An entry point (or a test session) that wants log output calls `configure_logging()`.
"""

import logging
import os

LOG_LEVEL: str = os.environ.get("CHESS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route the records of every module logger to stderr using the configured level and format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
