"""Logging helpers for tailprog.

Library modules get a namespaced standard library logger from get_logger and
log at DEBUG only. Nothing is configured on import; log_to_stream attaches an
output handler for the duration of a command line run.

Example:
    >>> from tailprog.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Unparsing StatementList")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

ROOT_LOGGER = "tailprog"
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the tailprog namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'tailprog.mymodule'
    """
    if not (name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + ".")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


@contextmanager
def log_to_stream(level: str | int, stream: TextIO | None = None) -> Iterator[logging.Logger]:
    """Send tailprog log records at ``level`` and above to ``stream``.

    The handler is removed and the logger's previous level restored on exit.
    ``stream`` defaults to sys.stderr as it is when the block is entered.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(level)
    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
