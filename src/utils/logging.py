"""Logging setup for Job-Match.

Every module logs under the ``job_match`` namespace so that a single call to
:func:`configure_logging` controls the engine, the loaders and the CLI.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "job_match"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_handler: logging.Handler | None = None


def _resolve_level(level: str | None) -> int:
    name = (level or "INFO").upper()
    if name not in VALID_LEVELS:
        return logging.INFO
    return getattr(logging, name)


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure the ``job_match`` logger and return it.

    The first call installs a single stream handler (stderr unless ``stream``
    is given). Later calls only adjust the level, so repeated configuration
    from the CLI and from tests never stacks handlers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown or missing
            values fall back to INFO.
        stream: Optional text stream for the handler.
        format_string: Format string for log records.
        date_format: Format string for ``asctime``.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.addHandler(_handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``job_match`` logger.

    Dotted module paths are accepted, so ``get_logger(__name__)`` from
    ``src.recommend.service`` yields ``job_match.recommend.service``.
    """
    if name.startswith("src."):
        name = name[len("src.") :]
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop handlers and level from the ``job_match`` logger (for tests)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
