"""Reference resolution: rewrite author anchors into internal node ids.

Runs after traversal, once the reference index is complete, so forward
references (a button pointing at a section further down the page) resolve
the same way as backward ones.
"""

from __future__ import annotations

import logging

from pagetree.config import ParserConfig
from pagetree.model.context import ReferenceIndex
from pagetree.model.node import Node

logger = logging.getLogger(__name__)

LIST_PARAMS = ("showIds", "hideIds")


class ReferenceResolver:
    """Rewrite scroll targets and show/hide id lists on interactive nodes.

    * ``href`` of the form ``#scroll-<anchor>`` becomes ``#scroll-id-<id>``;
    * each comma-separated entry of ``showIds`` / ``hideIds`` that names a
      known anchor becomes ``id-<id>``.

    Unknown anchors are left verbatim. Entries already in resolved form are
    recognized and kept, so applying the resolver twice changes nothing.
    """

    def __init__(self, index: ReferenceIndex, config: ParserConfig | None = None) -> None:
        self.index = index
        self.config = config or ParserConfig()
        self._internal_ids = index.internal_ids()

    def apply(self, tree: Node) -> Node:
        for node in tree.walk():
            if node.kind in self.config.reference_kinds and node.params:
                self._resolve_node(node)
        return tree

    # --- per-field rewriting --------------------------------------------------

    def _resolve_node(self, node: Node) -> None:
        params = node.params
        assert params is not None
        href = params.get("href")
        if isinstance(href, str) and href.startswith(self.config.scroll_prefix):
            params["href"] = self.resolve_scroll(href)
        for name in LIST_PARAMS:
            value = params.get(name)
            if isinstance(value, str) and value:
                params[name] = self.resolve_list(value)

    def resolve_scroll(self, href: str) -> str:
        target = href[len(self.config.scroll_prefix):]
        if self._is_resolved(target):
            return href
        internal = self.index.lookup(target)
        if internal is None:
            logger.debug("Unresolved scroll target %r", target)
            return href
        return f"{self.config.scroll_prefix}{self.config.reference_prefix}{internal}"

    def resolve_list(self, value: str) -> str:
        resolved: list[str] = []
        for entry in (part.strip() for part in value.split(",")):
            if self._is_resolved(entry):
                resolved.append(entry)
                continue
            internal = self.index.lookup(entry)
            if internal is None:
                logger.debug("Unresolved show/hide reference %r", entry)
                resolved.append(entry)
            else:
                resolved.append(f"{self.config.reference_prefix}{internal}")
        return ",".join(resolved)

    def _is_resolved(self, token: str) -> bool:
        prefix = self.config.reference_prefix
        return token.startswith(prefix) and token[len(prefix):] in self._internal_ids


def resolve_references(
    tree: Node, index: ReferenceIndex, config: ParserConfig | None = None
) -> Node:
    """Resolve references in *tree* in place against *index* and return it."""
    return ReferenceResolver(index, config).apply(tree)
