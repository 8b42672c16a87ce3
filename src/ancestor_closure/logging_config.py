"""Logging configuration for the ancestor-closure command line.

Console (stderr): INFO and above by default, so stdout stays clean for results.
File (optional): DEBUG and above, with rotation.
Format: ISO 8601 timestamp, level, logger name, message.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] (%(name)s) - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"
LOG_MAX_BYTES = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT = 2


def setup_logging(log_file: str | None = None, level: int = logging.INFO) -> None:
    """Attach a stderr handler and, if requested, a rotating file handler to the root logger.

    Args:
        log_file: Path to the log file. None disables file logging.
        level: Minimum level written to stderr.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    formatter.default_msec_format = "%s.%03d"

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        file_handler = RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
