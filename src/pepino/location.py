"""Source location tracking for tokens and error messages.

Provides Location for token positions and LineSpan for positioned
sub-items of a line (one tag, one table cell).

Thread Safety:
Both classes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a token in the source.

    Both positions are 1-indexed.

    Attributes:
        line: Line number (1-indexed)
        column: Column (1-indexed)

    Examples:
            >>> loc = Location(line=3, column=5)
            >>> str(loc)
            '3:5'

    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class LineSpan:
    """A column-anchored fragment of a line.

    Used for tags and table cells. The column is 1-indexed and points at
    the first character of ``text`` in the original line.

    Attributes:
        column: Column of the first character (1-indexed)
        text: Fragment text
    """

    column: int
    text: str

    def __str__(self) -> str:
        return f"{self.column}:{self.text}"
