"""Parser for inline ``style`` attribute declarations.

Syntax example:
    color: #112233; font-size: 20px; background-image: url(https://x/y.png)
"""

from __future__ import annotations

import re

__all__ = ["parse_declarations"]

# Matches a single declaration chunk: property: value
_DECL_RE = re.compile(
    r"""
    (?P<key>-?[a-zA-Z_][a-zA-Z0-9_-]*)   # property name, custom properties included
    \s*:\s*                               # colon separator
    (?P<value>.*?)                        # value, semicolons inside parentheses included
    \s*$
    """,
    re.VERBOSE | re.DOTALL,
)


def parse_declarations(text: str | None) -> dict[str, str]:
    """Parse a ``style`` attribute string into a property dictionary.

    Later declarations of the same property win. Declarations with an empty
    value are dropped.
    """
    props: dict[str, str] = {}
    if not text:
        return props
    for chunk in _split_declarations(text):
        match = _DECL_RE.match(chunk.strip())
        if match is None:
            continue
        value = match.group("value").strip()
        if value:
            props[match.group("key").strip().lower()] = value
    return props


def _split_declarations(text: str) -> list[str]:
    """Split on ``;``, keeping ``url(data:image/png;base64,...)`` groups intact."""
    chunks: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        if ch == ";" and depth == 0:
            chunks.append("".join(current))
            current = []
            continue
        current.append(ch)
    chunks.append("".join(current))
    return chunks
