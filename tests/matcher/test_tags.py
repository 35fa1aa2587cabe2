"""Tests for tag line splitting and tag columns."""

from pepino.line import Line
from pepino.location import LineSpan
from pepino.matcher import Matcher
from pepino.tokens import TokenType


class TestTagLine:
    """Tag spans point at the @ of each tag."""

    def test_tag_columns(self) -> None:
        token = Matcher().match_tag_line(Line(1, "@foo @bar  @baz"))

        assert token is not None
        assert token.type == TokenType.TAG_LINE
        assert token.items == (
            LineSpan(1, "@foo"),
            LineSpan(6, "@bar"),
            LineSpan(12, "@baz"),
        )

    def test_indented_tags(self) -> None:
        token = Matcher().match_tag_line(Line(2, "  @smoke @fast"))

        assert token is not None
        assert token.location.column == 3
        assert token.items == (LineSpan(3, "@smoke"), LineSpan(10, "@fast"))

    def test_adjacent_tags(self) -> None:
        token = Matcher().match_tag_line(Line(1, "@a@b"))

        assert token is not None
        assert token.items == (LineSpan(1, "@a"), LineSpan(3, "@b"))

    def test_bare_markers_yield_no_items(self) -> None:
        token = Matcher().match_tag_line(Line(1, "@ @@"))

        assert token is not None
        assert token.items == ()

    def test_no_keyword_or_text(self) -> None:
        token = Matcher().match_tag_line(Line(1, "@tag"))

        assert token is not None
        assert token.keyword is None
        assert token.text is None

    def test_declines_non_tag_line(self) -> None:
        assert Matcher().match_tag_line(Line(1, "Feature: @not-a-tag")) is None
