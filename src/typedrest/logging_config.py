"""
Logging setup for typedrest.

Library modules only log through module loggers. The invoker reports
every exchange (method, URI, status, elapsed time, failures) at DEBUG on
"typedrest.client.invoker"; setup_logging() attaches handlers to the
"typedrest" namespace and trace_requests() switches that trace on.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO


PACKAGE_LOGGER = "typedrest"
INVOKER_LOGGER = "typedrest.client.invoker"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(funcName)-12s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    stream: TextIO | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    Attach console and optional rotating file handlers to the typedrest logger.

    Handlers from an earlier call are closed and replaced.

    Args:
        level: Level for the whole typedrest namespace
        log_file: Rotating log file; its directory is created if missing
        stream: Console stream (defaults to stderr so stdout stays clean for output)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The configured "typedrest" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def trace_requests(enabled: bool = True) -> None:
    """Turn the invoker's per-request DEBUG trace on or off.

    Other typedrest loggers keep the namespace level.
    """
    logging.getLogger(INVOKER_LOGGER).setLevel(logging.DEBUG if enabled else logging.NOTSET)


def configure_logging(debug: bool = False, log_file: str | Path | None = None) -> logging.Logger:
    """
    Logging for the CLI: warnings by default, the request trace with debug.

    Args:
        debug: Log every exchange and everything else at DEBUG
        log_file: Also write to this rotating log file
    """
    logger = setup_logging(level="DEBUG" if debug else "WARNING", log_file=log_file)
    trace_requests(debug)
    return logger
