"""Default line scanner: one token per line in a fixed rule order.

The scanner owns the rule priority, not the matcher. Inside a doc-string
only EOF, the closing delimiter and Other are tried, so body lines that
look like steps or tags stay literal text.

Thread Safety:
TokenScanner instances are single-use. Create one per document.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from pepino.config import get_matcher_config
from pepino.errors import NoSuchLanguageError
from pepino.line import Line, iter_lines
from pepino.matcher import Matcher
from pepino.utils.logger import get_logger

if TYPE_CHECKING:
    from pepino.dialects import DialectProvider
    from pepino.tokens import Token

logger = get_logger(__name__)

Rule = Callable[[Line], "Token | None"]


class TokenScanner:
    """Feed lines through a Matcher and yield one token per line.

    Usage:
            >>> scanner = TokenScanner("Feature: F\\n  Scenario: S\\n")
            >>> [t.type.name for t in scanner.tokens()]
            ['FEATURE_LINE', 'SCENARIO_LINE', 'EOF']

    """

    __slots__ = ("_lines", "_matcher", "_strict", "_block_rules", "_doc_string_rules")

    def __init__(
        self,
        source: str | Iterable[Line],
        matcher: Matcher | None = None,
        *,
        strict_languages: bool | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            source: Document text, or Lines already ending with an EOF line
            matcher: Matcher to use (a new one from the active config if None)
            strict_languages: Propagate NoSuchLanguageError (config default
                if None)
        """
        config = get_matcher_config()
        self._lines = iter_lines(source) if isinstance(source, str) else iter(source)
        self._matcher = matcher if matcher is not None else Matcher()
        self._strict = (
            config.strict_languages if strict_languages is None else strict_languages
        )

        m = self._matcher
        self._block_rules: tuple[Rule, ...] = (
            m.match_eof,
            m.match_empty,
            m.match_language,
            m.match_comment,
            m.match_tag_line,
            m.match_feature_line,
            m.match_background_line,
            m.match_scenario_outline_line,
            m.match_scenario_line,
            m.match_examples_line,
            m.match_step_line,
            m.match_doc_string_separator,
            m.match_table_row,
        )
        self._doc_string_rules: tuple[Rule, ...] = (
            m.match_eof,
            m.match_doc_string_separator,
        )

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    def tokens(self) -> Iterator[Token]:
        """Yield one token per line, ending with the EOF token.

        Yields:
            Token objects in line order

        Raises:
            NoSuchLanguageError: On an unknown language pragma, when strict
        """
        for line in self._lines:
            token = self.match_line(line)
            yield token
            if line.is_eof():
                return

    def match_line(self, line: Line) -> Token:
        """Classify one line with the first matching rule.

        Args:
            line: Line to classify

        Returns:
            The token produced by the first matching rule.
        """
        if self._matcher.active_doc_string_separator is not None:
            rules = self._doc_string_rules
        else:
            rules = self._block_rules

        for rule in rules:
            try:
                token = rule(line)
            except NoSuchLanguageError as e:
                if self._strict:
                    raise
                logger.warning("%s; keeping dialect '%s'", e, self._matcher.language)
                token = e.token
            if token is not None:
                return token
        return self._matcher.match_other(line)


def tokenize(
    source: str,
    *,
    dialect_provider: DialectProvider | None = None,
    default_language: str | None = None,
) -> Iterator[Token]:
    """Tokenize a document with a fresh matcher.

    Args:
        source: Document text
        dialect_provider: Dialect lookup (config or built-in registry if None)
        default_language: Starting language (config default if None)

    Yields:
        One Token per line, then EOF.

    Example:
        >>> [t.type.name for t in tokenize("# language: fr\\nSoit x")]
        ['LANGUAGE', 'STEP_LINE', 'EOF']
    """
    matcher = Matcher(dialect_provider, default_language=default_language)
    yield from TokenScanner(source, matcher).tokens()
