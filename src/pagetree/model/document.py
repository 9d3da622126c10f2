"""Document envelope: format version, content tree, settings tree, and overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from pagetree.model.node import Node


@dataclass
class Document:
    """The top-level pagetree document.

    Serialized with the platform's wire keys: ``format_version`` as
    ``version`` and ``overlay`` as ``popup``.
    """

    format_version: int
    content: Node
    settings: Node
    overlay: Node

    def nodes(self) -> Iterator[Node]:
        """Yield every node of the content and overlay trees."""
        yield from self.content.walk()
        yield from self.overlay.walk()

    def find_by_anchor(self, anchor: str) -> Node | None:
        for node in self.nodes():
            if node.anchor == anchor:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.format_version,
            "content": self.content.to_dict(),
            "settings": self.settings.to_dict(),
            "popup": self.overlay.to_dict(),
        }
