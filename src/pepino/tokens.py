"""Token and TokenType definitions for the Pepino matcher.

The matcher turns each input line into exactly one Token. A single frozen
dataclass covers every token kind; ``type`` decides which of the optional
fields are meaningful:

- ``keyword``: title and step lines
- ``text``: comments, title/step remainders, doc-string content type,
  language code, and "other" lines
- ``items``: tag lines and table rows

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.location import LineSpan, Location


class TokenType(Enum):
    """Token types produced by the matcher.

    Values are the conventional Gherkin token names, used by
    :func:`pepino.formatting.format_token`.

    """

    # Document structure
    EOF = "EOF"
    EMPTY = "Empty"
    COMMENT = "Comment"
    LANGUAGE = "Language"

    # Keyword lines
    TAG_LINE = "TagLine"
    FEATURE_LINE = "FeatureLine"
    BACKGROUND_LINE = "BackgroundLine"
    SCENARIO_LINE = "ScenarioLine"
    SCENARIO_OUTLINE_LINE = "ScenarioOutlineLine"
    EXAMPLES_LINE = "ExamplesLine"
    STEP_LINE = "StepLine"

    # Arguments
    DOC_STRING_SEPARATOR = "DocStringSeparator"
    TABLE_ROW = "TableRow"

    # Fallback
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the matcher for one input line.

    Attributes:
        type: The token type
        location: Line and column of the token
        language: Language code active when the token was built
        keyword: Matched keyword (title and step lines only)
        text: Token text (meaning depends on ``type``)
        items: Positioned tags or table cells (tag lines and table rows only)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    location: Location
    language: str
    keyword: str | None = None
    text: str | None = None
    items: tuple[LineSpan, ...] | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text if self.text is not None else ""
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.location})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.line

    @property
    def column(self) -> int:
        """Column (convenience accessor)."""
        return self.location.column
