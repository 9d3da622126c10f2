"""Depth-first traversal that dispatches source elements to producers."""

from __future__ import annotations

import logging

from pagetree.engine.registry import ProducerRegistry, Slot
from pagetree.model.context import ParseContext
from pagetree.model.diagnostic import Severity
from pagetree.model.node import Node
from pagetree.source.base import SourceElement

logger = logging.getLogger(__name__)


class Traverser:
    """Walks the source tree, producing output nodes and filling the reference index.

    Per child of a container the traverser decides to:

    * skip it -- decorative overlays (``cf-overlay`` class) and popup roots,
      which are parsed as a tree of their own;
    * dive through it -- kind-less wrappers such as a ``z-index`` stacking
      div, whose children are parsed as direct children of the current
      parent with sibling indices continuing unbroken;
    * dispatch it to the producer registered for its kind.

    Sibling indices advance only when a node is actually produced, so order
    keys among produced siblings stay contiguous.
    """

    def __init__(self, registry: ProducerRegistry, context: ParseContext) -> None:
        self.registry = registry
        self.context = context

    def parse_element(
        self, element: SourceElement, parent_id: str | None, index: int
    ) -> Node | None:
        """Produce the node for *element*, or ``None`` if it yields nothing."""
        kind = element.kind
        if not kind:
            return None

        producer = self.registry.resolve(kind)
        if producer is None:
            logger.warning("No producer registered for kind %r; element dropped", kind)
            self.context.report(
                "missing_producer",
                Severity.WARNING,
                f"No producer registered for kind '{kind}'; element and subtree omitted.",
                kind=kind,
            )
            return None

        parse_children = self.parse_children if producer.container else None
        node = producer.produce(element, Slot(parent_id, index), self.context, parse_children)
        if node is None:
            return None

        anchor = node.anchor
        if anchor and node.id:
            self.context.references.register(anchor, node.id)
        return node

    def parse_children(self, container: SourceElement, parent_id: str) -> list[Node]:
        """Parse the children of *container* as children of *parent_id*."""
        produced: list[Node] = []
        self._collect(container, parent_id, produced)
        return produced

    def _collect(self, container: SourceElement, parent_id: str, produced: list[Node]) -> None:
        for child in container.children():
            if self.is_overlay(child):
                continue
            if self.is_popup(child):
                logger.debug("Skipping popup root nested under %r", parent_id)
                continue
            if self.is_wrapper(child):
                self._collect(child, parent_id, produced)
                continue
            node = self.parse_element(child, parent_id, len(produced))
            if node is not None:
                produced.append(node)

    # --- elision rules --------------------------------------------------------

    def is_overlay(self, element: SourceElement) -> bool:
        return self.context.config.overlay_class in element.classes

    def is_popup(self, element: SourceElement) -> bool:
        return element.kind == self.context.config.popup_kind

    def is_wrapper(self, element: SourceElement) -> bool:
        """Kind-less elements are transparent; their children are spliced in."""
        return not element.kind
