"""Tests for ContextVar-based matcher configuration.

Validates context manager behavior and how a Matcher
picks up configuration on construction.
"""

import pytest

from pepino import (
    Dialect,
    DialectRegistryBuilder,
    Matcher,
    MatcherConfig,
    NoSuchLanguageError,
    get_matcher_config,
    matcher_config_context,
    reset_matcher_config,
    set_matcher_config,
)
from pepino.line import Line


class TestMatcherConfigDataclass:
    """Test MatcherConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = MatcherConfig()
        assert config.default_language == "en"
        assert config.dialect_provider is None
        assert config.strict_languages is True

    def test_immutability(self) -> None:
        config = MatcherConfig()
        with pytest.raises(AttributeError):
            config.default_language = "fr"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = MatcherConfig.from_dict(
            {"default_language": "de", "strict_languages": False, "unknown_key": 1}
        )
        assert config.default_language == "de"
        assert config.strict_languages is False

    def test_from_dict_empty(self) -> None:
        assert MatcherConfig.from_dict({}) == MatcherConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_set_and_reset(self) -> None:
        custom = MatcherConfig(default_language="fr")
        set_matcher_config(custom)
        try:
            assert get_matcher_config() is custom
        finally:
            reset_matcher_config()
        assert get_matcher_config() == MatcherConfig()

    def test_context_manager_restores(self) -> None:
        with matcher_config_context(MatcherConfig(default_language="nl")):
            assert get_matcher_config().default_language == "nl"
        assert get_matcher_config().default_language == "en"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with matcher_config_context(MatcherConfig(default_language="nl")):
                raise RuntimeError("boom")
        assert get_matcher_config().default_language == "en"


class TestMatcherUsesConfig:
    """A Matcher reads the config once, on construction."""

    def test_default_language_from_config(self) -> None:
        with matcher_config_context(MatcherConfig(default_language="fr")):
            matcher = Matcher()

        assert matcher.language == "fr"
        assert matcher.match_step_line(Line(1, "Soit x")) is not None

    def test_explicit_argument_wins(self) -> None:
        with matcher_config_context(MatcherConfig(default_language="fr")):
            matcher = Matcher(default_language="de")

        assert matcher.language == "de"

    def test_provider_from_config(self) -> None:
        registry = DialectRegistryBuilder().register(Dialect("en", given=("Gee ",))).build()

        with matcher_config_context(MatcherConfig(dialect_provider=registry)):
            matcher = Matcher()

        assert matcher.match_step_line(Line(1, "Gee x")) is not None
        assert matcher.match_step_line(Line(1, "Given x")) is None

    def test_unknown_default_language(self) -> None:
        with pytest.raises(NoSuchLanguageError) as exc_info:
            Matcher(default_language="xx")

        assert exc_info.value.location is None
        assert str(exc_info.value) == "Language not supported: xx"
