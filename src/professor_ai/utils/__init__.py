"""
Utility functions and helpers.
"""

from .log_utils import configure_logging, get_logger
from .text_utils import clean_output

__all__ = ["configure_logging", "get_logger", "clean_output"]
