"""Language pragma classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.errors import NoSuchLanguageError
from pepino.matcher.constants import LANGUAGE_PATTERN
from pepino.tokens import Token, TokenType
from pepino.utils.logger import get_logger

if TYPE_CHECKING:
    from pepino.dialects import Dialect, DialectProvider
    from pepino.line import Line
    from pepino.location import LineSpan

logger = get_logger(__name__)


class LanguageClassifierMixin:
    """Mixin providing ``# language: <code>`` pragma handling."""

    # These will be set by the Matcher class
    _dialect_provider: DialectProvider
    _language: str
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

    def match_language(self, line: Line) -> Token | None:
        """Match a language pragma and switch dialect.

        The token is built before the switch, so its ``language`` field is
        the language that was active when the pragma was read.

        Returns:
            LANGUAGE token with the code as text, or None.

        Raises:
            NoSuchLanguageError: If the provider has no dialect for the code.
                The matcher keeps its current dialect; the error carries the
                token so the caller may still consume it.
        """
        match = LANGUAGE_PATTERN.match(line.trimmed_text)
        if match is None:
            return None

        language = match.group(1)
        token = self._make_token(TokenType.LANGUAGE, line, text=language)

        dialect = self._dialect_provider.get_dialect(language)
        if dialect is None:
            raise NoSuchLanguageError(language, token.location, token)

        logger.debug(
            "Line %d: switching dialect %s -> %s", line.line_number, self._language, language
        )
        self._language = language
        self._dialect = dialect
        return token
