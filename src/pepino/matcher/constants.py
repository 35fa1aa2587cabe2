"""Line markers and patterns recognized by the matcher."""

from __future__ import annotations

import re

COMMENT_PREFIX = "#"
TAG_PREFIX = "@"
TITLE_KEYWORD_SEPARATOR = ":"
TABLE_CELL_SEPARATOR = "|"

# Doc-string delimiters, in the order they are tried when opening
DOCSTRING_SEPARATOR = '"""'
DOCSTRING_ALTERNATIVE_SEPARATOR = "```"
DOCSTRING_SEPARATORS = (DOCSTRING_SEPARATOR, DOCSTRING_ALTERNATIVE_SEPARATOR)

# "# language: fr" pragma; the whole line must match
LANGUAGE_PATTERN = re.compile(r"^\s*#\s*language\s*:\s*([a-zA-Z\-_]+)\s*$")
