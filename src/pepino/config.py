"""ContextVar-based matcher configuration for Pepino.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Matcher reads the active config once, when it is constructed; later
config changes never affect an existing matcher.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pepino.config import MatcherConfig, matcher_config_context

    with matcher_config_context(MatcherConfig(default_language="fr")):
        tokens = list(tokenize(source))

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.dialects import DialectProvider


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Immutable matcher configuration.

    Attributes:
        default_language: Language code a new matcher starts in
        dialect_provider: Provider for dialect lookup (None means the
            built-in registry)
        strict_languages: When True, the scanner propagates
            NoSuchLanguageError; when False it logs a warning and keeps
            the previous dialect

    """

    default_language: str = "en"
    dialect_provider: DialectProvider | None = None
    strict_languages: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MatcherConfig":
        """Create MatcherConfig from dictionary.

        Only includes keys that are valid MatcherConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                MatcherConfig attribute names.

        Returns:
            New MatcherConfig instance with values from dict.

        Example:
            >>> config = MatcherConfig.from_dict({
            ...     "default_language": "de",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_language
            'de'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MatcherConfig = MatcherConfig()

# Thread-local configuration via ContextVar
_matcher_config: ContextVar[MatcherConfig] = ContextVar(
    "matcher_config",
    default=_DEFAULT_CONFIG,
)


def get_matcher_config() -> MatcherConfig:
    """Get current matcher configuration (thread-local).

    Returns:
        The active MatcherConfig for this thread/context.

    """
    return _matcher_config.get()


def set_matcher_config(config: MatcherConfig) -> None:
    """Set matcher configuration for current context.

    Args:
        config: MatcherConfig instance to use for this context.

    """
    _matcher_config.set(config)


def reset_matcher_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _matcher_config.set(_DEFAULT_CONFIG)


@contextmanager
def matcher_config_context(config: MatcherConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: MatcherConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _matcher_config.get()
    _matcher_config.set(config)
    try:
        yield
    finally:
        _matcher_config.set(previous)


__all__ = [
    "MatcherConfig",
    "get_matcher_config",
    "set_matcher_config",
    "reset_matcher_config",
    "matcher_config_context",
]
