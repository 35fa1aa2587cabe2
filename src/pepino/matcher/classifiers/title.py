"""Keyword title and step classifier mixin."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pepino.matcher.constants import TITLE_KEYWORD_SEPARATOR
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.dialects import Dialect
    from pepino.line import Line
    from pepino.location import LineSpan


class TitleClassifierMixin:
    """Mixin providing keyword-driven rules.

    Every rule pulls its keyword list from the current dialect, so the
    same line can classify differently before and after a language pragma.
    """

    # These will be set by the Matcher class
    _dialect: Dialect

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

    def _match_keyword_line(
        self,
        line: Line,
        token_type: TokenType,
        keywords: Sequence[str],
        separator: str,
    ) -> Token | None:
        """Match the first keyword that, followed by separator, prefixes the line.

        Keywords are tried in list order; no longest-match resolution is
        done. With the separator included in the prefix test, "Scenario" does
        not match "Scenario Outline: x" because that line does not start
        with "Scenario:".

        Args:
            line: Line to classify
            token_type: Type of the token to emit
            keywords: Candidate keywords, in priority order
            separator: Text that must follow the keyword (":" or "")

        Returns:
            Token with keyword and trimmed remainder, or None.
        """
        trimmed = line.trimmed_text
        for keyword in keywords:
            prefix = keyword + separator
            if trimmed.startswith(prefix):
                return self._make_token(
                    token_type,
                    line,
                    keyword=keyword,
                    text=trimmed[len(prefix) :].strip(" "),
                )
        return None

    def match_feature_line(self, line: Line) -> Token | None:
        return self._match_keyword_line(
            line, TokenType.FEATURE_LINE, self._dialect.feature_keywords, TITLE_KEYWORD_SEPARATOR
        )

    def match_background_line(self, line: Line) -> Token | None:
        return self._match_keyword_line(
            line,
            TokenType.BACKGROUND_LINE,
            self._dialect.background_keywords,
            TITLE_KEYWORD_SEPARATOR,
        )

    def match_scenario_line(self, line: Line) -> Token | None:
        return self._match_keyword_line(
            line, TokenType.SCENARIO_LINE, self._dialect.scenario_keywords, TITLE_KEYWORD_SEPARATOR
        )

    def match_scenario_outline_line(self, line: Line) -> Token | None:
        return self._match_keyword_line(
            line,
            TokenType.SCENARIO_OUTLINE_LINE,
            self._dialect.scenario_outline_keywords,
            TITLE_KEYWORD_SEPARATOR,
        )

    def match_examples_line(self, line: Line) -> Token | None:
        return self._match_keyword_line(
            line, TokenType.EXAMPLES_LINE, self._dialect.examples_keywords, TITLE_KEYWORD_SEPARATOR
        )

    def match_step_line(self, line: Line) -> Token | None:
        """Match a step line.

        Step keywords carry no separator; most dialects include the trailing
        space in the keyword itself ("Given ").
        """
        return self._match_keyword_line(
            line, TokenType.STEP_LINE, self._dialect.step_keywords, ""
        )
