"""Centralized logging configuration."""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure application logging.

    Logs go to stderr so they never mix with converter output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True  # Override existing configuration
    )
