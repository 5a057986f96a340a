"""Utility modules for tailprog.

Provides:
- logger: get_logger for library logging, log_to_stream for command line output
"""

from tailprog.utils.logger import get_logger, log_to_stream

__all__ = ["get_logger", "log_to_stream"]
