"""Text helpers shared by the profile and output assembly.

Example:
    >>> from abbrmarkup.utils.text import split_lines, str_case
    >>> split_lines("a\\r\\nb\\nc")
    ['a', 'b', 'c']
    >>> str_case("Div", "upper")
    'DIV'
"""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Accepted spellings for case transforms
_UPPER = frozenset({"upper", "u"})
_LOWER = frozenset({"lower", "l"})


def split_lines(text: str) -> list[str]:
    """Split text on any line break style (CRLF, CR, LF)."""
    return _LINE_BREAK.split(text)


def str_case(text: str, case: str) -> str:
    """Apply a case transform to text.

    Args:
        text: Tag or attribute name
        case: ``"upper"``/``"u"``, ``"lower"``/``"l"``; anything else
            leaves the text untouched

    Returns:
        Transformed text
    """
    if case in _UPPER:
        return text.upper()
    if case in _LOWER:
        return text.lower()
    return text


def is_valid_case(case: str) -> bool:
    """Check that a case option is one str_case understands."""
    return case == "" or case in _UPPER or case in _LOWER
