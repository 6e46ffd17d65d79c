"""Decode Jsonnet string literals."""

from __future__ import annotations

import re

_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)


def _unescape(match: re.Match) -> str:
    escape = match.group(1)
    if len(escape) == 5:
        return chr(int(escape[1:], 16))
    try:
        return _ESCAPES[escape]
    except KeyError:
        raise ValueError(f"unknown escape sequence \\{escape}") from None


def string_value(literal: str) -> str:
    """Return the value of a quoted or verbatim string literal.

    ``literal`` is the source text including quotes and any ``@`` prefix.
    Text blocks are not handled here.

    Raises:
        ValueError: if the literal is not a quoted string or has a bad escape.
    """
    if literal.startswith("@"):
        quote, body = literal[1], literal[2:-1]
        return body.replace(quote * 2, quote)
    if len(literal) < 2 or literal[0] not in "'\"" or literal[-1] != literal[0]:
        raise ValueError(f"not a string literal: {literal!r}")
    value = _ESCAPE_RE.sub(_unescape, literal[1:-1])
    # \u escapes may spell UTF-16 surrogate pairs
    return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
