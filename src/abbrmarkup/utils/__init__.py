"""Utility modules for abbrmarkup.

Provides:
- text: split_lines, str_case for name casing and line handling
- logger: get_logger for logging
"""

from abbrmarkup.utils.logger import get_logger
from abbrmarkup.utils.text import is_valid_case, split_lines, str_case

__all__ = [
    "get_logger",
    "is_valid_case",
    "split_lines",
    "str_case",
]
