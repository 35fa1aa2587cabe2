"""Doc-string separator classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.matcher.constants import DOCSTRING_SEPARATORS
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.line import Line
    from pepino.location import LineSpan


class DocStringClassifierMixin:
    """Mixin providing doc-string open/close detection.

    Only one doc-string can be open at a time. While one is open, only its
    own delimiter closes it; the other delimiter is body text.
    """

    # These will be set by the Matcher class
    _active_doc_string_separator: str | None
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

    def match_doc_string_separator(self, line: Line) -> Token | None:
        """Match an opening or closing doc-string delimiter.

        Open: records the delimiter and the line indent, which ``match_other``
        strips from body lines. The token text is the content type written
        after the delimiter (e.g. ``"json"``), not stripped.

        Close: clears both, emitting a token with no text.

        Returns:
            DOC_STRING_SEPARATOR token, or None.
        """
        active = self._active_doc_string_separator
        if active is not None:
            if not line.starts_with(active):
                return None
            token = self._make_token(TokenType.DOC_STRING_SEPARATOR, line)
            self._active_doc_string_separator = None
            self._indent_to_strip = 0
            return token

        for separator in DOCSTRING_SEPARATORS:
            if line.starts_with(separator):
                self._active_doc_string_separator = separator
                self._indent_to_strip = line.indent()
                return self._make_token(
                    TokenType.DOC_STRING_SEPARATOR,
                    line,
                    text=line.trimmed_text[len(separator) :],
                )
        return None
