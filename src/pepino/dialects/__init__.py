"""Dialect system for Pepino.

A dialect is the set of localized keyword spellings for one language.
The matcher looks dialects up through any object satisfying the
DialectProvider protocol; DialectRegistry is the built-in implementation.

Key components:
- Dialect: Frozen keyword tables for one language
- DialectProvider: Protocol for language lookup
- DialectRegistry: Immutable code -> dialect mapping
- load_dialects: Build a registry from gherkin-languages.json

Thread Safety:
Dialects and registries are immutable and safe to share across threads.

Example:
    >>> from pepino.dialects import create_default_registry
    >>> registry = create_default_registry()
    >>> registry.get_dialect("fr").feature_keywords
    ('Fonctionnalité',)
"""

from __future__ import annotations

from pepino.dialects.builtins import BUILTIN_DIALECTS, DEFAULT_LANGUAGE
from pepino.dialects.dialect import Dialect, DialectProvider
from pepino.dialects.registry import (
    DialectRegistry,
    DialectRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
    load_dialects,
)

__all__ = [
    "BUILTIN_DIALECTS",
    "DEFAULT_LANGUAGE",
    "Dialect",
    "DialectProvider",
    "DialectRegistry",
    "DialectRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "load_dialects",
]
