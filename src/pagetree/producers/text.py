"""Text producers: headline, sub-headline and paragraph."""

from __future__ import annotations

from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock, text_node
from pagetree.producers.common import (
    PADDING_UNIT_PARAMS,
    apply_anchor,
    apply_animation,
    apply_spacing,
    new_node,
)
from pagetree.source.base import SourceElement
from pagetree.source.richtext import inline_nodes
from pagetree.styles.box import parse_spacing
from pagetree.styles.resolver import resolve
from pagetree.styles.values import normalize_color

TEXT_SELECTOR = "h1, h2, h3, h4, h5, h6, p, span"
LINK_SELECTOR = ".elTypographyLink"


def text_element(element: SourceElement) -> SourceElement:
    """The element holding the text: first heading/paragraph/span, else the element."""
    return element.select_one(TEXT_SELECTOR) or element


def link_color(element: SourceElement, inner: SourceElement) -> str | None:
    """Explicit ``data-link-color``, else the inline color of the first link."""
    resolved = resolve(element, "link-color")
    if resolved is not None:
        return str(resolved.value)
    anchor = inner.select_one("a")
    if anchor is None:
        return None
    return normalize_color(anchor.inline_style().get("color"))


def typography_block(element: SourceElement, inner: SourceElement) -> SelectorBlock:
    """Resolve the typography properties of a text element into a selector block."""
    font_size = resolve(element, "font-size", inner=inner)
    line_height = resolve(element, "line-height", inner=inner)
    letter_spacing = resolve(element, "letter-spacing", inner=inner)
    style: dict[str, object] = {
        "font-size": font_size.value if font_size else 48,
        "font-weight": _value(resolve(element, "font-weight", inner=inner)),
        "color": _value(resolve(element, "color", inner=inner)),
        "text-align": _value(resolve(element, "text-align", inner=inner)),
        "line-height": line_height.value if line_height else 140,
        "letter-spacing": letter_spacing.value if letter_spacing else 0,
    }
    family = resolve(element, "font-family", inner=inner)
    if family is not None:
        style["font-family"] = family.value
    transform = resolve(element, "text-transform", inner=inner)
    if transform is not None:
        style["text-transform"] = transform.value
    return SelectorBlock(
        attrs={"style": style},
        params={
            "font-size--unit": (font_size.unit if font_size else None) or "px",
            "line-height--unit": "%",
            "letter-spacing--unit": "rem",
        },
    )


def _value(resolved: object) -> object:
    return getattr(resolved, "value", None)


class TextProducer:
    """Produce a text node whose rich content lives in a ``ContentEditableNode``."""

    container = False

    def __init__(self, kind: str, selector: str) -> None:
        self.kind = kind
        self.selector = selector

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        inner = text_element(element)
        node = new_node(self.kind, slot, attrs={"style": {}}, params=dict(PADDING_UNIT_PARAMS))
        apply_anchor(node, element, "id", "data-element-id")
        apply_animation(node, element)
        apply_spacing(node, parse_spacing(element.inline_style()), defaults=True)

        node.selectors = {self.selector: typography_block(element, inner)}
        color = link_color(element, inner)
        if color:
            node.selectors[f"{self.selector} {LINK_SELECTOR}"] = SelectorBlock(
                attrs={"style": {"color": color}}
            )

        params = node.param_bag()
        for attr, param in (("data-icon", "icon"), ("data-icon-align", "icon-align")):
            value = element.attribute(attr)
            if value:
                params[param] = value

        assert node.id is not None
        editable = Node(
            kind="ContentEditableNode",
            id=new_id(),
            version=0,
            parent_id=node.id,
            order_key=key_for(0),
            attrs={"data-align-selector": self.selector},
        )
        editable.children = inline_nodes(inner.inner_html(), color) or [text_node(inner.text())]
        node.children = [editable]
        return node
