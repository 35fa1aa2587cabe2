"""Dialect-aware line matcher.

The Matcher exposes one ``match_*`` rule per token kind. A scanner offers
each line to the rules in its own priority order until one returns a
token; ``match_other`` always matches and must be tried last.

Thread Safety:
Matcher instances are single-use. Create one per document.
All state is instance-local; dialect providers may be shared.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.config import get_matcher_config
from pepino.errors import NoSuchLanguageError
from pepino.location import Location
from pepino.matcher.classifiers import (
    DocStringClassifierMixin,
    LanguageClassifierMixin,
    StructuralClassifierMixin,
    TableClassifierMixin,
    TagClassifierMixin,
    TitleClassifierMixin,
)
from pepino.tokens import Token, TokenType

if TYPE_CHECKING:
    from pepino.dialects import Dialect, DialectProvider
    from pepino.line import Line
    from pepino.location import LineSpan


class Matcher(
    StructuralClassifierMixin,
    TitleClassifierMixin,
    TagClassifierMixin,
    TableClassifierMixin,
    DocStringClassifierMixin,
    LanguageClassifierMixin,
):
    """Stateful classifier turning lines into tokens.

    State carried across lines:
    - the current language code and its dialect (changed by match_language)
    - the open doc-string delimiter and the indent stripped from its body
      (changed by match_doc_string_separator)

    Every other rule only reads state, so matching the same line twice
    yields equal tokens.

    Usage:
            >>> from pepino.line import Line
            >>> matcher = Matcher()
            >>> matcher.match_step_line(Line(4, "    Given a cucumber"))
        Token(STEP_LINE, 'a cucumber', 4:5)

    Thread Safety:
        Not safe for concurrent use. Lines must be offered in increasing
        line order; use one matcher per document.

    """

    __slots__ = (
        "_dialect_provider",
        "_language",
        "_dialect",
        "_active_doc_string_separator",
        "_indent_to_strip",
    )

    def __init__(
        self,
        dialect_provider: DialectProvider | None = None,
        *,
        default_language: str | None = None,
    ) -> None:
        """Initialize matcher in the default language.

        Arguments left as None are taken from the active MatcherConfig.

        Args:
            dialect_provider: Dialect lookup (built-in registry if None)
            default_language: Language code to start in

        Raises:
            NoSuchLanguageError: If the provider does not know the default
                language
        """
        config = get_matcher_config()
        if dialect_provider is None:
            dialect_provider = config.dialect_provider
        if dialect_provider is None:
            from pepino.dialects import create_default_registry

            dialect_provider = create_default_registry()
        if default_language is None:
            default_language = config.default_language

        dialect = dialect_provider.get_dialect(default_language)
        if dialect is None:
            raise NoSuchLanguageError(default_language)

        self._dialect_provider = dialect_provider
        self._language: str = default_language
        self._dialect: Dialect = dialect

        # Doc-string state
        self._active_doc_string_separator: str | None = None
        self._indent_to_strip: int = 0

    @property
    def language(self) -> str:
        """Current language code."""
        return self._language

    @property
    def dialect(self) -> Dialect:
        """Current dialect."""
        return self._dialect

    @property
    def active_doc_string_separator(self) -> str | None:
        """Delimiter of the open doc-string, or None."""
        return self._active_doc_string_separator

    @property
    def indent_to_strip(self) -> int:
        """Indent removed from doc-string body lines by match_other."""
        return self._indent_to_strip

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
        """Create a Token for a line in the current language.

        Args:
            token_type: The token type.
            line: Line being matched.
            column: Column override (1-indexed); defaults to indent + 1.
            keyword: Matched keyword.
            text: Token text.
            items: Tag or cell spans.

        Returns:
            Token located on the line.
        """
        return Token(
            type=token_type,
            location=Location(
                line.line_number,
                column if column is not None else line.indent() + 1,
            ),
            language=self._language,
            keyword=keyword,
            text=text,
            items=items,
        )
