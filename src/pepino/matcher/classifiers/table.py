"""Table row classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.location import LineSpan
from pepino.matcher.constants import TABLE_CELL_SEPARATOR
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.line import Line


class TableClassifierMixin:
    """Mixin providing table row classification.

    Every interior ``|`` separates cells; there is no escape syntax, so a
    pipe inside a cell yields an extra cell.
    """

    def _make_token(
        self,
        token_type: TokenType,
        line: Line,
        *,
        column: int | None = None,
        keyword: str | None = None,
        text: str | None = None,
        items: tuple[LineSpan, ...] | None = None,
    ) -> Token:
        """Create token for a line. Implemented by Matcher."""
        raise NotImplementedError

    def match_table_row(self, line: Line) -> Token | None:
        """Match a ``| a | b |`` row.

        The leading ``|`` and, when present, the trailing ``|`` are removed
        before splitting. Cell columns point at the first non-space character
        of each cell.

        Example:
            ``"| a | bb |"`` yields ``LineSpan(3, "a")`` and ``LineSpan(7, "bb")``.

        Returns:
            TABLE_ROW token with one LineSpan per cell, or None.
        """
        if not line.starts_with(TABLE_CELL_SEPARATOR):
            return None

        inner = line.trimmed_text[1:]
        if inner.endswith(TABLE_CELL_SEPARATOR):
            inner = inner[:-1]

        cells: list[LineSpan] = []
        # Column of the opening "|"
        column = line.indent() + 1
        for fragment in inner.split(TABLE_CELL_SEPARATOR):
            leading = len(fragment) - len(fragment.lstrip(" "))
            cells.append(LineSpan(column + leading + 1, fragment.strip(" ")))
            column += len(fragment) + 1

        return self._make_token(TokenType.TABLE_ROW, line, items=tuple(cells))
