"""Dialect registry for language lookup and registration.

The registry maps language codes to Dialect records and satisfies the
DialectProvider protocol consumed by the matcher.

Thread Safety:
DialectRegistry is immutable after creation. Safe to share.
Use DialectRegistryBuilder for mutable construction.

Example:
    >>> builder = DialectRegistryBuilder()
    >>> builder.register(Dialect("xx", feature=("Feat",)))
    >>> registry = builder.build()
    >>> registry.get_dialect("xx").feature_keywords
    ('Feat',)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pepino.dialects.dialect import Dialect


class DialectRegistry:
    """Immutable registry of dialects keyed by language code.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_language",)

    def __init__(self, by_language: dict[str, Dialect]) -> None:
        """Initialize registry with a pre-built mapping.

        Use DialectRegistryBuilder to create instances.
        """
        self._by_language = by_language

    def get_dialect(self, language: str) -> Dialect | None:
        """Get dialect for a language code.

        Args:
            language: Language code (e.g., "en", "fr")

        Returns:
            Dialect if registered, None otherwise
        """
        return self._by_language.get(language)

    def has(self, language: str) -> bool:
        """Check if a language code is registered."""
        return language in self._by_language

    @property
    def languages(self) -> frozenset[str]:
        """Get all registered language codes."""
        return frozenset(self._by_language.keys())

    def __contains__(self, language: str) -> bool:
        """Support 'code in registry' syntax."""
        return self.has(language)

    def __len__(self) -> int:
        """Number of registered dialects."""
        return len(self._by_language)


class DialectRegistryBuilder:
    """Mutable builder for DialectRegistry.

    Example:
        >>> builder = DialectRegistryBuilder()
        >>> builder.register(Dialect("xx")).register(Dialect("yy"))
        >>> registry = builder.build()
    """

    __slots__ = ("_by_language",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_language: dict[str, Dialect] = {}

    def register(self, dialect: Dialect) -> DialectRegistryBuilder:
        """Register a dialect.

        Args:
            dialect: Dialect to register under its language code

        Returns:
            Self for chaining

        Raises:
            ValueError: If the language code is already registered
        """
        if dialect.language in self._by_language:
            msg = f"Dialect '{dialect.language}' already registered"
            raise ValueError(msg)
        self._by_language[dialect.language] = dialect
        return self

    def register_all(self, dialects: list[Dialect]) -> DialectRegistryBuilder:
        """Register multiple dialects.

        Args:
            dialects: List of dialects to register

        Returns:
            Self for chaining
        """
        for dialect in dialects:
            self.register(dialect)
        return self

    def register_mapping(self, data: Mapping[str, Mapping[str, Any]]) -> DialectRegistryBuilder:
        """Register every entry of a ``gherkin-languages.json`` style mapping.

        Args:
            data: Mapping of language code to keyword tables

        Returns:
            Self for chaining
        """
        for language, entry in data.items():
            self.register(Dialect.from_dict(language, entry))
        return self

    def build(self) -> DialectRegistry:
        """Build immutable registry from registered dialects.

        Returns:
            Immutable DialectRegistry
        """
        return DialectRegistry(dict(self._by_language))

    def __len__(self) -> int:
        """Number of registered dialects."""
        return len(self._by_language)


def load_dialects(json_text: str) -> DialectRegistry:
    """Build a registry from a ``gherkin-languages.json`` document.

    Args:
        json_text: JSON object mapping language codes to keyword tables

    Returns:
        Immutable DialectRegistry

    Raises:
        ValueError: If the document is not a JSON object (json.JSONDecodeError
            is a ValueError) or registers a language twice
    """
    data = json.loads(json_text)
    if not isinstance(data, dict):
        msg = f"Dialect document must be a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return DialectRegistryBuilder().register_mapping(data).build()


# Cached singleton; thread-safe since DialectRegistry is immutable
_DEFAULT_REGISTRY: DialectRegistry | None = None


def create_default_registry() -> DialectRegistry:
    """Get the built-in dialect registry (cached singleton).

    Returns:
        Registry with en, en-pirate, de, es, fr, it, nl and pt.

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> DialectRegistryBuilder:
    """Create a builder pre-populated with the built-in dialects.

    Use this to extend the built-in set with custom dialects:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(Dialect("tlh", feature=("Qap",)))
        >>> registry = builder.build()

    Returns:
        DialectRegistryBuilder with built-in dialects already registered
    """
    from pepino.dialects.builtins import BUILTIN_DIALECTS

    return DialectRegistryBuilder().register_mapping(BUILTIN_DIALECTS)
