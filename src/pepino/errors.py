"""Exception classes for Pepino.

Provides standardized exceptions for error handling throughout Pepino.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.location import Location
    from pepino.tokens import Token


class PepinoError(Exception):
    """Base exception for all Pepino errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PepinoError):
    """Error while matching a line.

    Raised when a line cannot be turned into a usable token.
    """

    def __init__(self, message: str, location: Location | None = None) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            location: Position of the offending token (optional)
        """
        self.message = message
        self.location = location

        if location is not None:
            super().__init__(f"({location.line}:{location.column}): {message}")
        else:
            super().__init__(message)


class NoSuchLanguageError(ParseError):
    """A language pragma or default language names an unknown dialect.

    The matcher keeps its previous dialect when this is raised. ``token``
    holds the Language token built for the pragma line, so callers that
    choose to continue can still consume it.
    """

    def __init__(
        self,
        language: str,
        location: Location | None = None,
        token: Token | None = None,
    ) -> None:
        """Initialize unsupported-language error.

        Args:
            language: The unresolved language code
            location: Location of the pragma line (None for a bad default)
            token: Language token built for the pragma line (optional)
        """
        self.language = language
        self.token = token
        super().__init__(f"Language not supported: {language}", location)
