"""Error-path tests.

Covers error formatting and the one recoverable matcher error: a
language pragma naming an unknown dialect.
"""

import logging

import pytest

from pepino import tokenize
from pepino.errors import NoSuchLanguageError, ParseError, PepinoError
from pepino.location import Location
from pepino.scanner import TokenScanner
from pepino.tokens import TokenType

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected line")
        assert str(err) == "unexpected line"
        assert err.location is None

    def test_with_location(self) -> None:
        err = ParseError("bad pragma", Location(10, 5))
        assert str(err) == "(10:5): bad pragma"
        assert err.message == "bad pragma"

    def test_is_pepino_error(self) -> None:
        assert isinstance(ParseError("x"), PepinoError)


class TestNoSuchLanguageError:
    """Verify NoSuchLanguageError formatting and hierarchy."""

    def test_format(self) -> None:
        err = NoSuchLanguageError("xx", Location(1, 1))
        assert str(err) == "(1:1): Language not supported: xx"
        assert err.language == "xx"
        assert err.token is None

    def test_is_parse_error(self) -> None:
        assert isinstance(NoSuchLanguageError("xx"), ParseError)


# =========================================================================
# Scanner behavior on unknown languages
# =========================================================================


class TestUnknownLanguageInScan:
    """Strict scans raise; lenient scans warn and continue."""

    SOURCE = "# language: xx\nGiven a step\n"

    def test_strict_raises(self) -> None:
        with pytest.raises(NoSuchLanguageError, match="xx"):
            list(tokenize(self.SOURCE))

    def test_lenient_keeps_previous_dialect(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pepino"):
            tokens = list(TokenScanner(self.SOURCE, strict_languages=False).tokens())

        assert [t.type for t in tokens] == [
            TokenType.LANGUAGE,
            TokenType.STEP_LINE,
            TokenType.EOF,
        ]
        assert tokens[0].text == "xx"
        assert tokens[1].language == "en"
        assert "Language not supported: xx" in caplog.text

    def test_malformed_table_row_is_not_an_error(self) -> None:
        tokens = list(tokenize("| a | b\n"))

        assert tokens[0].type == TokenType.TABLE_ROW
