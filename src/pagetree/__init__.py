"""Pagetree: FunnelWind page markup to ClickFunnels pagetree documents."""

__version__ = "0.1.0"

from pagetree.api import parse, serialize, write_document  # noqa: E402
from pagetree.config import ParserConfig  # noqa: E402
from pagetree.model import Document, Node, ParseContext, SelectorBlock  # noqa: E402

__all__ = [
    "__version__",
    "parse",
    "serialize",
    "write_document",
    "ParserConfig",
    "Document",
    "Node",
    "SelectorBlock",
    "ParseContext",
]
