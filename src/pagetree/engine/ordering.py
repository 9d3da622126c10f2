"""Sibling order keys (``fractionalIndex``) derived purely from position.

Keys use the base-62 alphabet in ASCII order. The head character fixes how
many digits follow (``a`` one, ``b`` two, ... ``z`` twenty-six), so a longer
key always sorts after every shorter one::

    0 -> a0, 1 -> a1, ..., 61 -> az, 62 -> b00, 63 -> b01, ...

Appending a sibling never requires renumbering the existing ones.
"""

from __future__ import annotations

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(DIGITS)
_HEADS = "abcdefghijklmnopqrstuvwxyz"


def _encode(number: int, width: int) -> str:
    chars: list[str] = []
    for _ in range(width):
        number, digit = divmod(number, BASE)
        chars.append(DIGITS[digit])
    return "".join(reversed(chars))


def key_for(index: int) -> str:
    """Return the order key for the sibling at zero-based *index*."""
    if index < 0:
        raise ValueError(f"Sibling index must be non-negative, got {index}")
    offset = index
    for width, head in enumerate(_HEADS, start=1):
        block = BASE**width
        if offset < block:
            return head + _encode(offset, width)
        offset -= block
    raise OverflowError(f"Sibling index {index} exceeds the order key space")


def keys_for(count: int) -> list[str]:
    """Return the first *count* order keys."""
    return [key_for(i) for i in range(count)]
