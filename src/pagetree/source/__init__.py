"""Source tree access: the element cursor protocol, the HTML adapter, and loading."""

from pagetree.source.base import SourceElement
from pagetree.source.errors import SourceError
from pagetree.source.loader import read_source
from pagetree.source.soup import (
    SoupElement,
    find_content_root,
    find_overlay_root,
    load_html,
    owner_document,
)

__all__ = [
    "SourceElement",
    "SourceError",
    "SoupElement",
    "load_html",
    "find_content_root",
    "find_overlay_root",
    "owner_document",
    "read_source",
]
