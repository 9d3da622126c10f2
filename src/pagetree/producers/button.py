"""Button producer, including design-system button styles and reference params."""

from __future__ import annotations

from typing import Any

from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock, text_node
from pagetree.producers.common import apply_animation, apply_spacing, new_node, put_measure
from pagetree.source.base import SourceElement
from pagetree.styles.box import parse_radius, parse_spacing
from pagetree.styles.shadow import parse_shadow, shadow_params
from pagetree.styles.values import (
    Measure,
    normalize_color,
    normalize_font_weight,
    parse_measure,
    parse_text_align,
)

DEFAULT_BG = "#3b82f6"
DEFAULT_TEXT_COLOR = "#ffffff"
DEFAULT_SUB_COLOR = "rgba(255, 255, 255, 0.8)"


def find_button_style(styleguide: dict[str, Any] | None, button_id: str | None) -> dict[str, Any]:
    """Look up a design-system button by id; empty when absent."""
    if not styleguide or not button_id:
        return {}
    for button in styleguide.get("buttons") or ():
        if button.get("id") == button_id:
            return button
    return {}


def _first_color(*candidates: str | None) -> str | None:
    for candidate in candidates:
        color = normalize_color(candidate)
        if color:
            return color
    return None


def _pixels(value: Any) -> Measure | None:
    return Measure(value, "px") if value is not None else None


def _icon_margins(left: int, right: int) -> SelectorBlock:
    return SelectorBlock(
        attrs={"style": {"margin-left": left, "margin-right": right}},
        params={"margin-left--unit": "px", "margin-right--unit": "px"},
    )


class ButtonProducer:
    """Buttons resolve each property design system first, then attributes, then markup."""

    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        wrapper = element.inline_style()
        link = element.select_one("a")
        link_styles = link.inline_style() if link is not None else {}
        label = link.select_one("span") if link is not None else None
        label_styles = label.inline_style() if label is not None else {}

        guide_id = element.attribute("data-style-guide-button")
        guide = find_button_style(context.styleguide, guide_id)
        regular = guide.get("regular") or {}
        hover = guide.get("hover") or {}

        align = element.attribute("data-align") or parse_text_align(wrapper.get("text-align"))
        node = new_node(
            "Button/V1",
            slot,
            attrs={"style": {"text-align": align}},
            params={
                "buttonState": "default",
                "href": element.attribute("data-href") or "#",
                "target": element.attribute("data-target") or "_self",
            },
        )
        apply_animation(node, element)
        apply_spacing(node, parse_spacing(wrapper))

        params = node.param_bag()
        for attr, param in (("data-show-ids", "showIds"), ("data-hide-ids", "hideIds")):
            value = element.attribute(attr)
            if value:
                params[param] = value
        button_type = element.attribute("data-elbuttontype")
        if button_type:
            node.attr_bag()["data-elbuttontype"] = button_type

        node.selectors = {
            ".elButton": self._button_block(element, guide, regular, link_styles, guide_id),
            ".elButton .elButtonText": self._text_block(element, regular, label_styles),
            ".elButton .elButtonSub": SelectorBlock(
                attrs={"style": {}}, params={"font-size--unit": "px"}
            ),
            ".fa_prepended": _icon_margins(0, 10),
            ".fa_apended": _icon_margins(10, 0),
        }
        self._icons(node, element, link)

        hover_bg = normalize_color(hover.get("bg"))
        if hover_bg:
            node.selectors[".elButton:hover"] = SelectorBlock(
                attrs={"style": {}}, params={"--style-background-color": hover_bg}
            )
        hover_color = normalize_color(hover.get("color"))
        if hover_color:
            node.selectors[".elButton:hover .elButtonText"] = SelectorBlock(
                attrs={"style": {"color": hover_color}}
            )

        assert node.id is not None
        main_text = label.text().strip() if label is not None else ""
        node.children = [
            text_node(
                main_text or "Button",
                slot_name="button-main",
                id=new_id(),
                version=0,
                parent_id=node.id,
                order_key=key_for(0),
            )
        ]
        sub_text = element.attribute("data-subtext")
        if not sub_text and link is not None:
            sub = link.select_one("span:last-child:not(:first-child)")
            sub_text = sub.text().strip() if sub is not None else ""
        if sub_text:
            node.selectors[".elButton .elButtonSub"].style["color"] = (
                normalize_color(element.attribute("data-subtext-color")) or DEFAULT_SUB_COLOR
            )
            node.add_child(
                text_node(
                    sub_text,
                    slot_name="button-sub",
                    id=new_id(),
                    version=0,
                    parent_id=node.id,
                    order_key=key_for(1),
                )
            )
        return node

    # --- selector blocks ------------------------------------------------------

    @staticmethod
    def _button_block(
        element: SourceElement,
        guide: dict[str, Any],
        regular: dict[str, Any],
        link_styles: dict[str, str],
        guide_id: str | None,
    ) -> SelectorBlock:
        padding_x = parse_measure(
            element.attribute("data-px") or link_styles.get("padding-right") or "32px"
        )
        padding_y = parse_measure(
            element.attribute("data-py") or link_styles.get("padding-top") or "16px"
        )
        if guide.get("borderWidth") is not None:
            border_width = _pixels(guide["borderWidth"])
        else:
            border_width = parse_measure(
                element.attribute("data-border-width") or link_styles.get("border-width") or "0"
            )
        block = SelectorBlock(
            attrs={"style": {}},
            params={
                "--style-padding-horizontal": padding_x.value if padding_x else 32,
                "--style-padding-horizontal--unit": padding_x.unit if padding_x else "px",
                "--style-padding-vertical": padding_y.value if padding_y else 16,
                "--style-padding-vertical--unit": padding_y.unit if padding_y else "px",
                "style-guide-override-button": True,
                "--style-background-color": _first_color(
                    regular.get("bg"),
                    element.attribute("data-bg"),
                    link_styles.get("background-color"),
                    DEFAULT_BG,
                ),
                "--style-border-color": _first_color(
                    guide.get("borderColor"),
                    element.attribute("data-border-color"),
                    link_styles.get("border-color"),
                )
                or "transparent",
                "--style-border-width": border_width.value if border_width else 0,
                "--style-border-width--unit": border_width.unit if border_width else "px",
            },
        )
        if guide_id:
            block.attr_bag()["data-style-guide-button"] = guide_id

        if guide.get("borderRadius") is not None:
            radius = _pixels(guide["borderRadius"])
        elif element.attribute("data-rounded"):
            radius = parse_measure(element.attribute("data-rounded"))
        else:
            radius = parse_radius(link_styles)
        put_measure(block, "border-radius", radius)

        shadow = parse_shadow(element.attribute("data-shadow") or link_styles.get("box-shadow"))
        block.param_bag().update(shadow_params(shadow))

        if element.attribute("data-full-width") == "true":
            block.style["width"] = "100%"
        return block

    @staticmethod
    def _text_block(
        element: SourceElement, regular: dict[str, Any], label_styles: dict[str, str]
    ) -> SelectorBlock:
        size = parse_measure(element.attribute("data-size") or label_styles.get("font-size") or "20px")
        weight = element.attribute("data-weight") or normalize_font_weight(
            label_styles.get("font-weight") or "700"
        )
        color = _first_color(
            regular.get("color"),
            element.attribute("data-color"),
            label_styles.get("color"),
            DEFAULT_TEXT_COLOR,
        )
        return SelectorBlock(
            attrs={
                "style": {
                    "color": color,
                    "font-weight": weight,
                    "font-size": size.value if size else 20,
                }
            },
            params={"font-size--unit": size.unit if size else "px", "line-height--unit": "%"},
        )

    @staticmethod
    def _icons(node: Node, element: SourceElement, link: SourceElement | None) -> None:
        params = node.param_bag()
        icon = element.attribute("data-icon")
        if icon:
            color = normalize_color(element.attribute("data-icon-color"))
            if (element.attribute("data-icon-position") or "left") == "left":
                params["iconBefore"] = icon
                selector = ".fa_prepended"
            else:
                params["iconAfter"] = icon
                selector = ".fa_apended"
            if color:
                node.selector(selector).style["color"] = color
            return
        if link is None:
            return

        before = link.select_one("span > i:first-child")
        after = link.select_one("span > i:last-child")
        if before is not None:
            params["iconBefore"] = before.attribute("class") or ""
            color = normalize_color(before.inline_style().get("color"))
            if color:
                node.selector(".fa_prepended").style["color"] = color
        if after is not None and after != before:
            params["iconAfter"] = after.attribute("class") or ""
            color = normalize_color(after.inline_style().get("color"))
            if color:
                node.selector(".fa_apended").style["color"] = color
