"""Utility modules for Lexicon.

Provides:
- logger: get_logger and setup_logging
"""

from lexicon.utils.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
