"""Tests for the pepino logger hierarchy."""

from pepino.utils import get_logger


class TestGetLogger:
    """get_logger nests every logger under "pepino"."""

    def test_module_names_pass_through(self) -> None:
        assert get_logger("pepino.scanner").name == "pepino.scanner"
        assert get_logger("pepino").name == "pepino"

    def test_foreign_names_are_nested(self) -> None:
        assert get_logger("mymodule").name == "pepino.mymodule"
        assert get_logger("pepinos").name == "pepino.pepinos"
