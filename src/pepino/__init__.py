"""
Pepino: Dialect-aware Gherkin line matcher for Python

Turns Gherkin source (features, scenarios, steps, tags, tables,
doc-strings and ``# language:`` pragmas) into a stream of typed tokens,
one per line, with exact line and column positions.

Quick Start:
    >>> from pepino import tokenize, format_token
    >>> for token in tokenize("Feature: Cucumbers\\n  Scenario: Slicing\\n"):
    ...     print(format_token(token))
    (1:1)FeatureLine:Feature/Cucumbers/
    (2:3)ScenarioLine:Scenario/Slicing/
    EOF

    >>> # Or drive the matcher rules directly
    >>> from pepino import Line, Matcher
    >>> matcher = Matcher()
    >>> matcher.match_table_row(Line(5, "| a | bb |")).items
    (LineSpan(column=3, text='a'), LineSpan(column=7, text='bb'))

Custom Dialects:
    >>> from pepino import Dialect, create_registry_with_defaults
    >>> builder = create_registry_with_defaults()
    >>> builder.register(Dialect("tlh", feature=("Qap",), given=("ghu' noblu' ",)))
    >>> matcher = Matcher(builder.build())

Installation:
    pip install pepino              # Core matcher (zero deps)
"""

from pepino.config import (
    MatcherConfig,
    get_matcher_config,
    matcher_config_context,
    reset_matcher_config,
    set_matcher_config,
)
from pepino.dialects import (
    Dialect,
    DialectProvider,
    DialectRegistry,
    DialectRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
    load_dialects,
)
from pepino.errors import NoSuchLanguageError, ParseError, PepinoError
from pepino.formatting import format_token, format_tokens, to_dict, to_json
from pepino.line import Line, iter_lines
from pepino.location import LineSpan, Location
from pepino.matcher import Matcher
from pepino.scanner import TokenScanner, tokenize
from pepino.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "tokenize",
    "TokenScanner",
    "Matcher",
    # Lines
    "Line",
    "iter_lines",
    # Tokens
    "Token",
    "TokenType",
    # Location
    "Location",
    "LineSpan",
    # Dialects
    "Dialect",
    "DialectProvider",
    "DialectRegistry",
    "DialectRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "load_dialects",
    # Formatting
    "format_token",
    "format_tokens",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "MatcherConfig",
    "get_matcher_config",
    "set_matcher_config",
    "reset_matcher_config",
    "matcher_config_context",
    # Errors
    "PepinoError",
    "ParseError",
    "NoSuchLanguageError",
]
