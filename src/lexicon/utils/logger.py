"""Logging helpers for Lexicon.

Every module logs under the ``lexicon`` namespace through get_logger.
Library code only emits records; attaching a handler is left to the
application, and setup_logging is the one the command line uses.

Example:
    >>> from lexicon.utils.logger import get_logger
    >>> get_logger("registry").name
    'lexicon.registry'
"""

from __future__ import annotations

import logging

ROOT = "lexicon"

_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace.

    Module names already inside the package (``lexicon`` or ``lexicon.*``)
    are used as is; anything else is nested below ``lexicon.``.
    """
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int, stream=None) -> logging.Handler:
    """Send package records to a stream as ``[LEVEL] message`` lines.

    Handlers installed by an earlier call are replaced, so repeated calls
    never duplicate output.

    Args:
        level: Threshold for the package logger
        stream: Target stream (stderr if None)

    Returns:
        The installed handler
    """
    logger = logging.getLogger(ROOT)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
