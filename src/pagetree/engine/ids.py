"""Opaque node identifiers in the platform's ``6Z-<token>-0`` shape."""

from __future__ import annotations

import uuid

ID_PREFIX = "6Z-"
ID_SUFFIX = "-0"


def new_id() -> str:
    """Return a fresh node id; uniqueness is probabilistic (48 random bits)."""
    return f"{ID_PREFIX}{uuid.uuid4().hex[:12]}{ID_SUFFIX}"


def new_link_id() -> str:
    """Return a fresh id for an inline rich-text link."""
    return f"link-{uuid.uuid4().hex[:5]}"
