"""Dialect-aware line matcher for Pepino.

Architecture:
matcher/
├── __init__.py          # Re-exports Matcher
├── core.py              # Matcher class (mixin composition + state)
├── constants.py         # Markers and the language pragma pattern
└── classifiers/         # Rule mixins
    ├── structural.py    # EOF, empty, comment, other
    ├── title.py         # Feature/Background/Scenario/Outline/Examples/Step
    ├── tags.py          # @tag lines
    ├── table.py         # | table | rows |
    ├── docstring.py     # \"\"\" and ``` delimiters
    └── language.py      # # language: pragma

Usage:
    >>> from pepino.line import Line
    >>> from pepino.matcher import Matcher
    >>> matcher = Matcher()
    >>> matcher.match_feature_line(Line(1, "Feature: Cucumbers"))
Token(FEATURE_LINE, 'Cucumbers', 1:1)

"""

from pepino.matcher.core import Matcher

__all__ = ["Matcher"]
