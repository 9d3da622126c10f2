"""Output node model: Node and SelectorBlock dataclasses with wire serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class SelectorBlock:
    """An ``{attrs, params}`` override block scoped to one sub-part of a node.

    ``attrs`` and ``params`` stay ``None`` until something writes to them, so
    a block that never received a value serializes as an empty object.
    """

    attrs: dict[str, Any] | None = None
    params: dict[str, Any] | None = None

    @property
    def style(self) -> dict[str, Any]:
        """Return the nested ``attrs.style`` dict, creating it on first use."""
        return self.attr_bag().setdefault("style", {})

    def attr_bag(self) -> dict[str, Any]:
        if self.attrs is None:
            self.attrs = {}
        return self.attrs

    def param_bag(self) -> dict[str, Any]:
        if self.params is None:
            self.params = {}
        return self.params

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.attrs is not None:
            data["attrs"] = self.attrs
        if self.params is not None:
            data["params"] = self.params
        return data


@dataclass
class Node:
    """A single node of the output page tree.

    ``kind`` serializes as ``type``, ``parent_id`` as ``parentId`` and
    ``order_key`` as ``fractionalIndex``. Fields left as ``None`` are omitted
    from the serialized form; inline rich-text nodes use that to carry only
    ``type``/``innerText``/``children``.
    """

    kind: str
    id: str | None = None
    version: int | None = 0
    parent_id: str | None = None
    order_key: str | None = None
    inner_text: str | None = None
    slot_name: str | None = None
    attrs: dict[str, Any] | None = None
    params: dict[str, Any] | None = None
    selectors: dict[str, SelectorBlock] | None = None
    children: list[Node] | None = None

    # --- mutation helpers -----------------------------------------------------

    @property
    def style(self) -> dict[str, Any]:
        """Return the nested ``attrs.style`` dict, creating it on first use."""
        return self.attr_bag().setdefault("style", {})

    def attr_bag(self) -> dict[str, Any]:
        if self.attrs is None:
            self.attrs = {}
        return self.attrs

    def param_bag(self) -> dict[str, Any]:
        if self.params is None:
            self.params = {}
        return self.params

    def selector(self, key: str) -> SelectorBlock:
        """Return the override block for *key*, creating an empty one if absent."""
        if self.selectors is None:
            self.selectors = {}
        block = self.selectors.get(key)
        if block is None:
            block = SelectorBlock()
            self.selectors[key] = block
        return block

    def add_child(self, child: Node) -> Node:
        if self.children is None:
            self.children = []
        self.children.append(child)
        return child

    @property
    def anchor(self) -> str | None:
        """The author-assigned anchor name carried in ``attrs.id``, if any."""
        if not self.attrs:
            return None
        value = self.attrs.get("id")
        return value if isinstance(value, str) and value else None

    # --- traversal ------------------------------------------------------------

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth-first pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    # --- serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.kind}
        if self.id is not None:
            data["id"] = self.id
        if self.version is not None:
            data["version"] = self.version
        if self.parent_id is not None:
            data["parentId"] = self.parent_id
        if self.order_key is not None:
            data["fractionalIndex"] = self.order_key
        if self.inner_text is not None:
            data["innerText"] = self.inner_text
        if self.slot_name is not None:
            data["slotName"] = self.slot_name
        if self.attrs is not None:
            data["attrs"] = self.attrs
        if self.params is not None:
            data["params"] = self.params
        if self.selectors is not None:
            data["selectors"] = {k: v.to_dict() for k, v in self.selectors.items()}
        if self.children is not None:
            data["children"] = [c.to_dict() for c in self.children]
        return data


def text_node(text: str, **fields: Any) -> Node:
    """Build an inline ``text`` node (no id/version unless given)."""
    fields.setdefault("version", None)
    return Node(kind="text", inner_text=text, **fields)
