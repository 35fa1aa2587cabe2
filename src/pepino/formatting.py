"""Token formatting and serialization.

``format_token`` produces the one-line dump conventionally used by Gherkin
token test fixtures::

    (3:5)StepLine:Given /a cucumber/
    (1:1)TagLine://1:@smoke,8:@fast

``to_dict`` / ``to_json`` give a JSON-compatible form. Output is
deterministic (sorted keys) so dumps can be diffed or cached.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from pepino.tokens import Token, TokenType


def format_token(token: Token) -> str:
    """Format a token as ``(line:column)Type:keyword/text/items``.

    Missing fields format as empty strings; items are ``column:text``
    joined with commas. The EOF token formats as ``EOF``.

    Args:
        token: Token to format

    Returns:
        Single-line string.
    """
    if token.type is TokenType.EOF:
        return "EOF"
    items = ",".join(f"{span.column}:{span.text}" for span in token.items or ())
    return (
        f"({token.location.line}:{token.location.column})"
        f"{token.type.value}:{token.keyword or ''}/{token.text or ''}/{items}"
    )


def format_tokens(tokens: Iterable[Token]) -> str:
    """Format a token stream, one token per line, with a trailing newline."""
    return "".join(format_token(token) + "\n" for token in tokens)


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Optional fields that are None are omitted.

    Args:
        token: Token to convert

    Returns:
        Dict with ``type``, ``line``, ``column``, ``language`` and any of
        ``keyword``, ``text``, ``items``.
    """
    result: dict[str, Any] = {
        "type": token.type.value,
        "line": token.location.line,
        "column": token.location.column,
        "language": token.language,
    }
    if token.keyword is not None:
        result["keyword"] = token.keyword
    if token.text is not None:
        result["text"] = token.text
    if token.items is not None:
        result["items"] = [{"column": span.column, "text": span.text} for span in token.items]
    return result


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Args:
        tokens: Tokens to serialize
        indent: JSON indent (None for compact output)

    Returns:
        JSON string with sorted keys.
    """
    return json.dumps(
        [to_dict(token) for token in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
