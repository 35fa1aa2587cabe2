"""Structural line classifier mixin (EOF, empty, comment, other)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.matcher.constants import COMMENT_PREFIX
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.line import Line
    from pepino.location import LineSpan


class StructuralClassifierMixin:
    """Mixin providing the rules that need no keywords."""

    # These will be set by the Matcher class
    _indent_to_strip: int

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

    def match_eof(self, line: Line) -> Token | None:
        """Match the synthetic end-of-input line."""
        if not line.is_eof():
            return None
        return self._make_token(TokenType.EOF, line)

    def match_empty(self, line: Line) -> Token | None:
        """Match a real line that is blank after trimming."""
        if line.is_eof() or not line.is_empty():
            return None
        return self._make_token(TokenType.EMPTY, line)

    def match_comment(self, line: Line) -> Token | None:
        """Match a comment line.

        Comments always report column 1 and keep the raw line as text,
        indentation included.
        """
        if not line.starts_with(COMMENT_PREFIX):
            return None
        return self._make_token(TokenType.COMMENT, line, column=1, text=line.text)

    def match_other(self, line: Line) -> Token:
        """Match any line; the last rule tried.

        Strips up to the active doc-string indent from the raw line, stopping
        at the first non-space character, so doc-string bodies keep their
        indentation relative to the opening delimiter.
        """
        text = line.text
        limit = min(self._indent_to_strip, len(text))
        pos = 0
        while pos < limit and text[pos] == " ":
            pos += 1
        return self._make_token(TokenType.OTHER, line, column=1, text=text[pos:])
