"""Line records consumed by the matcher.

A Line wraps one physical input line with the queries every matching rule
needs (indent, trimmed text, prefix tests). ``iter_lines`` splits a source
string into Lines and terminates the stream with exactly one synthetic
end-of-input line.

Thread Safety:
Line is frozen (immutable). iter_lines is a pure generator.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

# str.splitlines also breaks on \f, \v, \x1c-\x1e, \x85, \u2028 and \u2029
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class Line:
    """One physical input line.

    Attributes:
        line_number: 1-indexed line number
        text: Raw line text without the line terminator
        eof: True for the synthetic end-of-input line
        trimmed_text: ``text`` with leading and trailing whitespace removed

    Example:
        >>> line = Line(3, "    Given a cucumber  ")
        >>> line.indent(), line.trimmed_text
        (4, 'Given a cucumber')
    """

    line_number: int
    text: str
    eof: bool = False
    trimmed_text: str = field(init=False, repr=False, compare=False)
    _indent: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        stripped = self.text.lstrip()
        object.__setattr__(self, "trimmed_text", stripped.rstrip())
        object.__setattr__(self, "_indent", len(self.text) - len(stripped))

    @classmethod
    def end_of_input(cls, line_number: int) -> Line:
        """Create the synthetic line that terminates a line stream."""
        return cls(line_number, "", eof=True)

    def indent(self) -> int:
        """Count of leading whitespace characters in the raw text."""
        return self._indent

    def is_eof(self) -> bool:
        return self.eof

    def is_empty(self) -> bool:
        """True when the line is blank after trimming."""
        return not self.trimmed_text

    def starts_with(self, prefix: str) -> bool:
        """Test ``prefix`` against the trimmed text."""
        return self.trimmed_text.startswith(prefix)


def iter_lines(source: str) -> Iterator[Line]:
    """Split source into Lines, ending with one end-of-input line.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line. A trailing terminator
    does not produce an extra empty line.

    Args:
        source: Full document text

    Yields:
        Line objects in increasing line order, then the EOF line.

    Example:
        >>> [line.text for line in iter_lines("a\\nb\\n")]
        ['a', 'b', '']
    """
    texts = _LINE_BREAK.split(source)
    if texts[-1] == "":
        texts.pop()
    line_number = 0
    for line_number, text in enumerate(texts, start=1):
        yield Line(line_number, text)
    yield Line.end_of_input(line_number + 1)
