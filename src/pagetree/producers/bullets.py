"""Bullet list producer."""

from __future__ import annotations

from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock, text_node
from pagetree.producers.common import apply_anchor, apply_spacing, new_node
from pagetree.source.base import SourceElement
from pagetree.source.richtext import inline_nodes
from pagetree.styles.box import parse_spacing
from pagetree.styles.values import Measure, normalize_color, parse_measure

DEFAULT_ICON = "fas fa-check"
DEFAULT_ICON_COLOR = "#10b981"
DEFAULT_TEXT_COLOR = "#334155"
DEFAULT_ICON_GAP = 12
ITEM_SELECTOR = ".elBulletList li"
ICON_COLOR_SELECTOR = ".elBulletList .fa,\n.elBulletList .fas,\n.elBulletList .fa-fw"


def icon_class(raw: str) -> str:
    return raw if "fa_icon" in raw else f"{raw} fa_icon"


def identify(nodes: list[Node], parent_id: str) -> list[Node]:
    """Give inline nodes ids, parents and order keys, recursively."""
    for index, node in enumerate(nodes):
        node.id = new_id()
        node.version = 0
        node.parent_id = parent_id
        node.order_key = key_for(index)
        if node.children:
            identify(node.children, node.id)
    return nodes


class BulletListProducer:
    """Item styling is read from the first ``li``; attributes override it."""

    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        ul = element.select_one("ul")
        items = ul.select("li") if ul is not None else []
        ul_styles = ul.inline_style() if ul is not None else {}

        icon = DEFAULT_ICON
        icon_color: str | None = DEFAULT_ICON_COLOR
        icon_gap: int | float = DEFAULT_ICON_GAP
        icon_size: Measure | None = None
        text_color: str | None = DEFAULT_TEXT_COLOR
        text_size: Measure | None = None
        justify = "flex-start"

        if items:
            first = items[0]
            justify = first.inline_style().get("justify-content") or justify
            marker = first.select_one("i")
            if marker is not None:
                icon = marker.attribute("class") or icon
                marker_styles = marker.inline_style()
                icon_color = normalize_color(marker_styles.get("color")) or icon_color
                margin = parse_measure(marker_styles.get("margin-right"))
                if margin:
                    icon_gap = margin.value
                icon_size = parse_measure(marker_styles.get("font-size"))
            label = first.select_one("span")
            if label is not None:
                label_styles = label.inline_style()
                text_color = normalize_color(label_styles.get("color")) or text_color
                text_size = parse_measure(label_styles.get("font-size"))

        icon = element.attribute("data-icon") or icon
        icon_color = normalize_color(element.attribute("data-icon-color")) or icon_color
        text_color = normalize_color(element.attribute("data-text-color")) or text_color
        size_attr = element.attribute("data-size-resolved") or element.attribute("data-text-size")
        text_size = parse_measure(size_attr) or text_size
        icon_size = parse_measure(element.attribute("data-icon-size")) or icon_size
        gap_attr = parse_measure(element.attribute("data-gap"))
        if gap_attr:
            icon_gap = gap_attr.value

        node = new_node(
            "BulletList/V1",
            slot,
            attrs={"style": {}},
            params={
                "--style-padding-horizontal--unit": "px",
                "--style-padding-horizontal": 0,
                "margin-top--unit": "px",
            },
        )
        apply_anchor(node, element, "id", "data-element-id")
        apply_spacing(node, parse_spacing(element.inline_style()))

        item_gap = parse_measure(ul_styles.get("gap") or "8px")
        text_block = SelectorBlock(
            attrs={"data-skip-text-shadow-settings": "true", "style": {"color": text_color}},
            params={},
        )
        icon_block = SelectorBlock(
            attrs={"style": {"margin-right": icon_gap}}, params={"margin-right--unit": "px"}
        )
        for block, size in ((text_block, text_size), (icon_block, icon_size)):
            if size is not None:
                block.style["font-size"] = size.value
                block.param_bag()["font-size--unit"] = size.unit
        node.selectors = {
            ".elBulletList": text_block,
            ".elBulletList li:not(:first-child)": SelectorBlock(
                attrs={"style": {"margin-top": item_gap.value if item_gap else 15}},
                params={"margin-top--unit": item_gap.unit if item_gap else "px"},
            ),
            ".elBulletList .fa_icon": icon_block,
            ICON_COLOR_SELECTOR: SelectorBlock(attrs={"style": {"color": icon_color}}),
            ITEM_SELECTOR: SelectorBlock(attrs={"style": {"justify-content": justify}}),
        }

        link_color = normalize_color(element.attribute("data-link-color"))
        if not link_color and ul is not None:
            anchor = ul.select_one("a")
            if anchor is not None:
                link_color = normalize_color(anchor.inline_style().get("color"))
        if link_color:
            node.selectors[".elBulletList .elTypographyLink"] = SelectorBlock(
                attrs={"style": {"color": link_color}}
            )

        assert node.id is not None
        editable = Node(
            kind="ContentEditableNode",
            id=new_id(),
            version=0,
            parent_id=node.id,
            order_key=key_for(0),
            attrs={"data-align-selector": ITEM_SELECTOR},
            children=[],
        )
        for index, item in enumerate(items):
            editable.add_child(self._item(item, index, editable.id or "", icon_class(icon), link_color))
        node.children = [editable]
        return node

    @staticmethod
    def _item(
        item: SourceElement, index: int, parent_id: str, icon: str, link_color: str | None
    ) -> Node:
        li = Node(kind="li", id=new_id(), version=0, parent_id=parent_id, order_key=key_for(index))
        assert li.id is not None
        li.add_child(
            Node(
                kind="IconNode",
                id=new_id(),
                version=0,
                parent_id=li.id,
                order_key=key_for(0),
                attrs={"className": icon, "contenteditable": "false"},
            )
        )
        wrapper = Node(
            kind="span",
            id=new_id(),
            version=0,
            parent_id=li.id,
            order_key=key_for(1),
            attrs={"className": "elBulletListTextWrapper"},
        )
        assert wrapper.id is not None
        label = item.select_one("span")
        content = inline_nodes(label.inner_html(), link_color) if label is not None else []
        wrapper.children = identify(content or [text_node(item.text())], wrapper.id)
        li.add_child(wrapper)
        return li
