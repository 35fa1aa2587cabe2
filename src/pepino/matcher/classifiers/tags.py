"""Tag line classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.location import LineSpan
from pepino.matcher.constants import TAG_PREFIX
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.line import Line


class TagClassifierMixin:
    """Mixin providing tag line classification."""

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

    def match_tag_line(self, line: Line) -> Token | None:
        """Match a line of ``@tags``.

        The trimmed text is split on ``@``. The running column starts at the
        indent, so after the empty fragment in front of the first ``@`` it
        sits on that marker's 1-indexed column. Each fragment advances it by
        its raw length plus one for the consumed ``@``.

        Example:
            ``"@foo @bar  @baz"`` yields spans at columns 1, 6 and 12.

        Returns:
            TAG_LINE token with one LineSpan per non-empty tag, or None.
        """
        if not line.starts_with(TAG_PREFIX):
            return None

        tags: list[LineSpan] = []
        column = line.indent()
        for fragment in line.trimmed_text.split(TAG_PREFIX):
            name = fragment.strip(" ")
            if name:
                tags.append(LineSpan(column, TAG_PREFIX + name))
            column += len(fragment) + 1

        return self._make_token(TokenType.TAG_LINE, line, items=tuple(tags))
