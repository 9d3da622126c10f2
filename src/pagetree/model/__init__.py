"""Pagetree model layer -- public type re-exports."""

from pagetree.model.context import ParseContext, ReferenceIndex
from pagetree.model.diagnostic import Diagnostic, Severity
from pagetree.model.document import Document
from pagetree.model.node import Node, SelectorBlock, text_node

__all__ = [
    # node
    "Node",
    "SelectorBlock",
    "text_node",
    # document
    "Document",
    # context
    "ParseContext",
    "ReferenceIndex",
    # diagnostic
    "Severity",
    "Diagnostic",
]
