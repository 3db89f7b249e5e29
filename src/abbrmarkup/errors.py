"""Exception classes for abbrmarkup.

Provides standardized exceptions for error handling throughout abbrmarkup.
The renderer itself raises nothing of its own: these cover the collaborators
that build its inputs (trees, profiles, field strings).
"""

from __future__ import annotations


class AbbrMarkupError(Exception):
    """Base exception for all abbrmarkup errors.

    Subclass this for specific error categories.
    """

    pass


class FieldParseError(AbbrMarkupError):
    """Error while parsing tab-stop fields in a text or attribute value.

    Raised when a ``${N:placeholder}`` field has unbalanced braces.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        """Initialize field parse error with optional position.

        Args:
            message: Error description
            position: Character offset in the scanned string (0-indexed)
        """
        self.message = message
        self.position = position

        location = f" (at position {position})" if position is not None else ""
        super().__init__(f"{message}{location}")


class ProfileError(AbbrMarkupError):
    """Error when an output profile option has an invalid value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize profile error.

        Args:
            option: Name of the offending option (e.g., "attribute_quotes")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Profile option '{option}': {message}")


class TreeError(AbbrMarkupError):
    """Error when a node tree is assembled incorrectly.

    Raised when a node that already belongs to a parent is attached again.
    """

    pass
