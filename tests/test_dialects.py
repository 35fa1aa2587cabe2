"""Tests for dialect records, registries and JSON loading."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from pepino.dialects import (
    BUILTIN_DIALECTS,
    Dialect,
    DialectProvider,
    DialectRegistry,
    DialectRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
    load_dialects,
)
from pepino.line import Line
from pepino.matcher import Matcher


class TestDialect:
    """Dialect exposes ordered keyword lists."""

    def test_step_keywords_deduplicated_in_order(self) -> None:
        dialect = Dialect(
            "xx",
            given=("* ", "Given "),
            when=("* ", "When "),
            then=("* ", "Then "),
            and_=("* ", "And "),
            but=("* ", "But "),
        )

        assert dialect.step_keywords == ("* ", "Given ", "When ", "Then ", "And ", "But ")

    def test_from_dict(self) -> None:
        dialect = Dialect.from_dict(
            "xx",
            {
                "name": "Test",
                "native": "Tst",
                "feature": ["Feat"],
                "scenarioOutline": ["Outline"],
                "and": ["Plus "],
                "rule": ["Rule"],
            },
        )

        assert dialect.language == "xx"
        assert dialect.name == "Test"
        assert dialect.feature_keywords == ("Feat",)
        assert dialect.scenario_outline_keywords == ("Outline",)
        assert dialect.step_keywords == ("Plus ",)
        assert dialect.background_keywords == ()

    def test_from_dict_rejects_bare_string(self) -> None:
        with pytest.raises(TypeError, match="feature"):
            Dialect.from_dict("xx", {"feature": "Feat"})

    def test_frozen(self) -> None:
        dialect = Dialect("xx")
        with pytest.raises(AttributeError):
            dialect.language = "yy"  # type: ignore[misc]


class TestRegistry:
    """Registry lookup and builder rules."""

    def test_lookup(self) -> None:
        registry = DialectRegistryBuilder().register(Dialect("xx")).build()

        assert registry.get_dialect("xx") is not None
        assert registry.get_dialect("yy") is None
        assert "xx" in registry
        assert len(registry) == 1
        assert registry.languages == frozenset({"xx"})

    def test_duplicate_language_rejected(self) -> None:
        builder = DialectRegistryBuilder().register(Dialect("xx"))

        with pytest.raises(ValueError, match="already registered"):
            builder.register(Dialect("xx"))

    def test_built_registry_is_independent_of_builder(self) -> None:
        builder = DialectRegistryBuilder().register(Dialect("xx"))
        registry = builder.build()
        builder.register(Dialect("yy"))

        assert "yy" not in registry
        assert len(builder) == 2

    def test_register_all(self) -> None:
        registry = DialectRegistryBuilder().register_all([Dialect("a"), Dialect("b")]).build()

        assert registry.languages == frozenset({"a", "b"})

    def test_satisfies_provider_protocol(self) -> None:
        assert isinstance(create_default_registry(), DialectProvider)


class TestDefaultRegistry:
    """Built-in dialects."""

    def test_contains_builtins(self) -> None:
        registry = create_default_registry()

        assert registry.languages == frozenset(BUILTIN_DIALECTS)
        assert {"en", "fr", "de", "es", "nl", "pt", "it", "en-pirate"} <= registry.languages

    def test_cached(self) -> None:
        assert create_default_registry() is create_default_registry()

    def test_english_keywords(self) -> None:
        en = create_default_registry().get_dialect("en")

        assert en is not None
        assert en.feature_keywords == ("Feature", "Business Need", "Ability")
        assert "Given " in en.step_keywords

    def test_extend_defaults(self) -> None:
        registry = create_registry_with_defaults().register(Dialect("tlh", feature=("Qap",))).build()

        assert isinstance(registry, DialectRegistry)
        assert "tlh" in registry
        assert "en" in registry

    def test_shared_across_threads(self) -> None:
        """One registry can back matchers in several threads."""
        registry = create_default_registry()

        def run(language: str) -> str:
            matcher = Matcher(registry)
            matcher.match_language(Line(1, f"# language: {language}"))
            return matcher.language

        languages = ["fr", "de", "es", "nl"] * 4
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(run, languages))

        assert results == languages


class TestLoadDialects:
    """Loading gherkin-languages.json documents."""

    def test_load(self) -> None:
        document = json.dumps(
            {
                "xx": {"feature": ["Feat"], "given": ["G "]},
                "yy": {"feature": ["Fy"]},
            }
        )

        registry = load_dialects(document)

        assert registry.languages == frozenset({"xx", "yy"})
        assert registry.get_dialect("xx").step_keywords == ("G ",)

    def test_loaded_dialect_drives_matcher(self) -> None:
        registry = load_dialects(json.dumps({"en": BUILTIN_DIALECTS["en"], "xx": {"given": ["G "]}}))
        matcher = Matcher(registry)

        matcher.match_language(Line(1, "# language: xx"))

        assert matcher.match_step_line(Line(2, "G thing")) is not None

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            load_dialects("[]")

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(ValueError):
            load_dialects("{not json")
