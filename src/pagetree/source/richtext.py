"""Convert an inline HTML fragment into pagetree rich-text nodes."""

from __future__ import annotations

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from pagetree.engine.ids import new_link_id
from pagetree.model.node import Node, text_node
from pagetree.styles.declarations import parse_declarations
from pagetree.styles.values import normalize_color

# Source tag -> output node type for inline formatting.
_INLINE_TYPES: dict[str, str] = {
    "b": "b",
    "strong": "b",
    "i": "i",
    "em": "i",
    "u": "u",
    "s": "strike",
    "strike": "strike",
    "span": "span",
    "li": "li",
}


def inline_nodes(html: str, link_color: str | None = None) -> list[Node]:
    """Parse *html* and return its rich-text nodes.

    Unknown elements are transparent: their converted children are spliced
    into the parent. *link_color* overrides any inline color on anchors.
    """
    fragment = BeautifulSoup(html or "", "html.parser")
    return _convert_all(fragment, link_color)


def _convert_all(parent: Tag, link_color: str | None) -> list[Node]:
    nodes: list[Node] = []
    for child in parent.children:
        nodes.extend(_convert(child, link_color))
    return nodes


def _convert(item: object, link_color: str | None) -> list[Node]:
    if isinstance(item, Comment):
        return []
    if isinstance(item, NavigableString):
        text = str(item)
        return [text_node(text)] if text else []
    if not isinstance(item, Tag):
        return []

    name = item.name.lower()
    if name == "br":
        return [Node(kind="br", version=None)]
    if name == "a":
        return [_anchor(item, link_color)]
    if name in _INLINE_TYPES:
        return [
            Node(
                kind=_INLINE_TYPES[name],
                version=None,
                children=_convert_all(item, link_color),
            )
        ]
    return _convert_all(item, link_color)


def _anchor(tag: Tag, link_color: str | None) -> Node:
    color = link_color
    if not color:
        color = normalize_color(parse_declarations(tag.get("style")).get("color"))
    attrs: dict[str, object] = {
        "href": tag.get("href") or "#",
        "id": new_link_id(),
        "target": tag.get("target") or "_self",
        "className": "elTypographyLink",
        "rel": _joined(tag.get("rel")) or "noopener",
    }
    if color:
        attrs["style"] = {"color": color}
    return Node(kind="a", version=None, attrs=attrs, children=_convert_all(tag, link_color))


def _joined(value: object) -> str | None:
    if isinstance(value, list):
        return " ".join(value)
    return value  # type: ignore[return-value]
