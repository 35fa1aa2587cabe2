"""Dialect record and provider protocol.

A Dialect is the table of localized keyword spellings for one language.
Keyword order is significant: the matcher tries keywords in the order they
are listed and the first match wins.

Thread Safety:
Dialect is a frozen dataclass. Providers must be read-only after creation.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Dialect:
    """Localized keywords for one language.

    Step keywords keep their trailing space (``"Given "``) where the language
    requires one; the matcher tests them as raw prefixes.

    Attributes:
        language: Language code (e.g., "en", "fr", "en-pirate")
        name: English name of the language
        native: Native name of the language
        feature: Feature keywords
        background: Background keywords
        scenario: Scenario keywords
        scenario_outline: Scenario Outline keywords
        examples: Examples keywords
        given: Given step keywords
        when: When step keywords
        then: Then step keywords
        and_: And step keywords
        but: But step keywords
    """

    language: str
    name: str = ""
    native: str = ""
    feature: tuple[str, ...] = ()
    background: tuple[str, ...] = ()
    scenario: tuple[str, ...] = ()
    scenario_outline: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    given: tuple[str, ...] = ()
    when: tuple[str, ...] = ()
    then: tuple[str, ...] = ()
    and_: tuple[str, ...] = ()
    but: tuple[str, ...] = ()
    _step_keywords: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # dict.fromkeys keeps first-seen order while dropping the shared "* "
        steps = dict.fromkeys(
            (*self.given, *self.when, *self.then, *self.and_, *self.but)
        )
        object.__setattr__(self, "_step_keywords", tuple(steps))

    @classmethod
    def from_dict(cls, language: str, data: Mapping[str, Any]) -> Dialect:
        """Create a Dialect from one ``gherkin-languages.json`` entry.

        Unknown keys (such as ``rule``) are ignored.

        Args:
            language: Language code the entry is registered under
            data: Mapping with ``feature``, ``background``, ``scenario``,
                ``scenarioOutline``, ``examples``, ``given``, ``when``,
                ``then``, ``and``, ``but`` keyword lists and optional
                ``name`` / ``native`` strings.

        Returns:
            New Dialect instance.

        Raises:
            TypeError: If a keyword entry is a bare string instead of a list

        Example:
            >>> d = Dialect.from_dict("xx", {"feature": ["Feat"], "given": ["G "]})
            >>> d.feature_keywords, d.step_keywords
            (('Feat',), ('G ',))
        """

        def keywords(key: str) -> tuple[str, ...]:
            value = data.get(key, ())
            if isinstance(value, str):
                msg = f"Dialect '{language}': '{key}' must be a list of keywords"
                raise TypeError(msg)
            return tuple(value)

        return cls(
            language=language,
            name=data.get("name", ""),
            native=data.get("native", ""),
            feature=keywords("feature"),
            background=keywords("background"),
            scenario=keywords("scenario"),
            scenario_outline=keywords("scenarioOutline"),
            examples=keywords("examples"),
            given=keywords("given"),
            when=keywords("when"),
            then=keywords("then"),
            and_=keywords("and"),
            but=keywords("but"),
        )

    @property
    def feature_keywords(self) -> tuple[str, ...]:
        return self.feature

    @property
    def background_keywords(self) -> tuple[str, ...]:
        return self.background

    @property
    def scenario_keywords(self) -> tuple[str, ...]:
        return self.scenario

    @property
    def scenario_outline_keywords(self) -> tuple[str, ...]:
        return self.scenario_outline

    @property
    def examples_keywords(self) -> tuple[str, ...]:
        return self.examples

    @property
    def step_keywords(self) -> tuple[str, ...]:
        """All step keywords (given, when, then, and, but), de-duplicated."""
        return self._step_keywords


@runtime_checkable
class DialectProvider(Protocol):
    """Protocol for dialect lookup.

    Implementations must be read-only once handed to a matcher. Several
    matchers may share one provider across threads.
    """

    def get_dialect(self, language: str) -> Dialect | None:
        """Return the dialect for ``language``, or None if unknown."""
        ...
