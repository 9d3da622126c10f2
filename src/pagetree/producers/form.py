"""Form producers: text input, text area, select box and checkbox."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock, text_node
from pagetree.producers.common import apply_spacing, new_node, put_measure, skip_flag
from pagetree.source.base import SourceElement
from pagetree.source.richtext import inline_nodes
from pagetree.styles.box import border_params, parse_background, parse_border, parse_radius, parse_spacing
from pagetree.styles.shadow import parse_shadow, shadow_params
from pagetree.styles.values import Measure, normalize_color, parse_measure, parse_number

DEFAULT_FIELD_BG = "#ffffff"
HOLDER = ".inputHolder, .borderHolder"
CORNER_HOLDER = "&.elFormItemWrapper, .inputHolder, .borderHolder"
CHECKED_COLOR = "rgb(59, 130, 246)"

# Fallback field border when the markup declares none.
DEFAULT_FIELD_BORDER: dict[str, Any] = {
    "--style-border-width": 1,
    "--style-border-style": "solid",
    "--style-border-color": "rgba(0, 0, 0, 0.2)",
}

_INPUT_TYPES = {"phone_number": "tel", "email": "email"}

_BOX_BORDER_RE = re.compile(r"(\d+)px\s+\w+\s+(.+)")


def _margin_align(element: SourceElement) -> str:
    align = element.attribute("data-align")
    return align if align in ("left", "center", "right") else "center"


def _percent_width(element: SourceElement) -> int | float:
    width = parse_number(element.attribute("data-width"))
    return width if width is not None else 100


def _required_class(element: SourceElement) -> str:
    return "required1" if element.attribute("data-required") == "true" else "required0"


def _font_block(block: SelectorBlock, element: SourceElement, control: SourceElement | None) -> None:
    """Font size and text color of a form control: attribute first, then inline style."""
    control_styles = control.inline_style() if control is not None else {}
    size = parse_measure(element.attribute("data-font-size") or control_styles.get("font-size") or "16px")
    put_measure(block, "font-size", size)
    color = normalize_color(element.attribute("data-color") or control_styles.get("color"))
    if color:
        block.style["color"] = color


class _Field:
    """The parts of a bordered field shell read from its container ``div``."""

    def __init__(self, element: SourceElement) -> None:
        self.container = element.select_one("div")
        styles = self.container.inline_style() if self.container is not None else {}
        self.background = parse_background(styles)
        self.border = parse_border(styles)
        self.radius = parse_radius(styles)
        self.shadow = parse_shadow(styles.get("box-shadow"))
        self.padding_x = parse_measure(styles.get("padding-left") or "16px")
        self.padding_y = parse_measure(styles.get("padding-top") or "12px")

    @property
    def background_color(self) -> str:
        return self.background.color or DEFAULT_FIELD_BG

    def control(self, selector: str) -> SourceElement | None:
        return self.container.select_one(selector) if self.container is not None else None

    def padding_block(self) -> SelectorBlock:
        vertical = self.padding_y.value if self.padding_y else 12
        return SelectorBlock(
            attrs={"style": {"padding-top": vertical, "padding-bottom": vertical}},
            params={
                "--style-padding-horizontal": self.padding_x.value if self.padding_x else 16,
                "--style-padding-horizontal--unit": self.padding_x.unit if self.padding_x else "px",
                "padding-top--unit": "px",
                "padding-bottom--unit": "px",
            },
        )

    def border_params(self, *, with_unit: bool = True) -> dict[str, Any]:
        if self.border:
            return border_params(self.border)
        params = dict(DEFAULT_FIELD_BORDER)
        if with_unit:
            params["--style-border-width--unit"] = "px"
        return params


class _BorderedFieldProducer(ABC):
    """Shared layout of input and text area: wrapper, holder, corners and shell."""

    container = False
    kind = ""
    control_class = ""
    control_selector = ""

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        field = _Field(element)
        wrapper = element.inline_style()
        margin_top = parse_measure(wrapper.get("margin-top") or "0px") or Measure(0, "px")
        node = new_node(
            self.kind,
            slot,
            attrs={
                "data-skip-shadow-settings": skip_flag(field.shadow),
                "style": {"width": _percent_width(element), "margin-top": margin_top.value},
            },
            params={
                "label": element.attribute("data-placeholder") or "",
                "labelType": "on-border",
                "--style-background-color": field.background_color,
                "width--unit": "%",
                "--style-margin-align": _margin_align(element),
                "margin-top--unit": margin_top.unit,
            },
        )
        apply_spacing(node, parse_spacing(wrapper))
        node.param_bag().update(shadow_params(field.shadow))

        holder = field.padding_block()
        holder.param_bag().update(field.border_params())
        corners = SelectorBlock(
            attrs={"style": {}, "data-skip-corners-settings": skip_flag(field.radius)}
        )
        put_measure(corners, "border-radius", field.radius)

        control = self.control_block(element, node)
        _font_block(control, element, field.control(self.control_selector))
        node.selectors = {
            self.control_class: control,
            HOLDER: holder,
            CORNER_HOLDER: corners,
            ".borderHolder": SelectorBlock(
                params={"--style-background-color": field.background_color}
            ),
        }
        return node

    @abstractmethod
    def control_block(self, element: SourceElement, node: Node) -> SelectorBlock:
        """Build the selector block of the form control, updating *node* as needed."""


class InputProducer(_BorderedFieldProducer):
    kind = "Input/V1"
    control_class = ".elInput"
    control_selector = "input"

    def control_block(self, element: SourceElement, node: Node) -> SelectorBlock:
        input_type = element.attribute("data-input-type") or "email"
        name = element.attribute("data-input-name") or input_type
        node.attr_bag()["type"] = _INPUT_TYPES.get(input_type, "text")
        node.param_bag()["type"] = input_type
        block = SelectorBlock(
            attrs={
                "name": name,
                "type": input_type,
                "className": _required_class(element),
                "style": {},
            },
            params={"font-size--unit": "px"},
        )
        if input_type == "custom_type":
            block.attr_bag()["data-custom-type"] = name
        return block


class TextAreaProducer(_BorderedFieldProducer):
    kind = "TextArea/V1"
    control_class = ".elTextarea"
    control_selector = "textarea"

    def control_block(self, element: SourceElement, node: Node) -> SelectorBlock:
        height = parse_number(element.attribute("data-height"))
        if height is None:
            height = 120
        node.param_bag().update({"height": height, "height--unit": "px"})
        name = element.attribute("data-textarea-name") or "message"
        return SelectorBlock(
            attrs={
                "name": name,
                "type": "custom_type",
                "data-custom-type": name,
                "className": _required_class(element),
                "style": {"height": height},
            },
            params={"height--unit": "px", "font-size--unit": "px"},
        )


class SelectBoxProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        field = _Field(element)
        wrapper = element.inline_style()
        margin_top = parse_measure(wrapper.get("margin-top") or "0px") or Measure(0, "px")
        select_type = element.attribute("data-select-type") or "custom_type"

        node = new_node(
            "SelectBox/V1",
            slot,
            attrs={"style": {"width": _percent_width(element), "margin-top": margin_top.value}},
            params={
                "label": element.attribute("data-placeholder") or "",
                "labelType": "on-border",
                "width--unit": "%",
                "margin-top--unit": margin_top.unit,
                "--style-margin-align": _margin_align(element),
                "--style-padding-horizontal": 0,
                "--style-padding-horizontal--unit": "px",
                "padding-top--unit": "px",
                "padding-bottom--unit": "px",
            },
        )
        apply_spacing(node, parse_spacing(wrapper))

        select = field.padding_block()
        select.attr_bag().update(
            {
                "data-skip-corners-settings": skip_flag(field.radius),
                "data-skip-shadow-settings": skip_flag(field.shadow),
                "name": select_type,
                "data-custom-type": element.attribute("data-select-name") or "option",
                "className": _required_class(element),
            }
        )
        select_params = select.param_bag()
        select_params["--style-background-color"] = field.background_color
        select_params.update(field.border_params(with_unit=False))
        put_measure(select, "border-radius", field.radius)
        select_params.update(shadow_params(field.shadow))

        label = SelectorBlock(attrs={"style": {}}, params={"font-size--unit": "px"})
        _font_block(label, element, field.control("select"))
        node.selectors = {
            ".elSelectWrapper": SelectorBlock(attrs={"data-type": select_type}),
            ".elSelect": select,
            ".elSelect, .elSelectLabel": label,
        }

        assert node.id is not None
        node.children = self._options(element, node.id)
        return node

    @staticmethod
    def _options(element: SourceElement, parent_id: str) -> list[Node]:
        select = element.select_one("select")
        if select is None:
            return []
        options: list[Node] = []
        for index, option in enumerate(select.select("option")):
            text = option.text()
            value = option.attribute("value")
            node = Node(
                kind="option",
                id=new_id(),
                version=0,
                parent_id=parent_id,
                order_key=key_for(index),
                attrs={"value": value if value is not None else text.strip()},
            )
            node.children = [
                text_node(
                    text, id=new_id(), version=0, parent_id=node.id, order_key=key_for(0)
                )
            ]
            options.append(node)
        return options


class CheckboxProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        label = element.select_one("label")
        text_span = label.select_one("span:last-child") if label is not None else None
        box = label.select_one("span:first-of-type") if label is not None else None
        box_styles = box.inline_style() if box is not None else {}
        text_styles = text_span.inline_style() if text_span is not None else {}
        label_styles = label.inline_style() if label is not None else {}

        box_size = parse_measure(box_styles.get("width") or "20px")
        box_radius = parse_radius(box_styles)
        border_match = _BOX_BORDER_RE.search(box_styles.get("border") or "")
        label_color = normalize_color(text_styles.get("color") or "#334155")
        label_size = parse_measure(text_styles.get("font-size") or "16px")
        gap = parse_measure(label_styles.get("gap") or "12px", "em")

        node = new_node(
            "Checkbox/V1",
            slot,
            attrs={"style": {}},
            params={
                "isFormItem": True,
                "name": element.attribute("data-name") or "agree",
                "checked": element.attribute("data-checked") == "true",
                "useCheckboxIcon": True,
                "required": element.attribute("data-required") == "true",
            },
        )
        apply_spacing(node, parse_spacing(element.inline_style()))
        node.selectors = {
            ".elCheckboxLabel": SelectorBlock(
                attrs={"style": {"gap": gap.value if gap else 1}},
                params={"gap--unit": gap.unit if gap else "em"},
            ),
            ".elCheckboxLabel .elCheckboxInput ~ .elCheckbox": SelectorBlock(
                attrs={
                    "style": {
                        "font-size": box_size.value if box_size else 20,
                        "border-radius": box_radius.value if box_radius else 4,
                        "background-color": normalize_color(
                            box_styles.get("background-color") or DEFAULT_FIELD_BG
                        ),
                    }
                },
                params={
                    "font-size--unit": box_size.unit if box_size else "px",
                    "--style-border-style": "solid",
                    "--style-border-width": int(border_match.group(1)) if border_match else 2,
                    "--style-border-width--unit": "px",
                    "--style-border-color": (
                        normalize_color(border_match.group(2).strip())
                        if border_match
                        else "rgb(229, 231, 235)"
                    ),
                    "border-radius--unit": box_radius.unit if box_radius else "px",
                },
            ),
            ".elCheckboxLabel .elCheckboxInput:checked ~ .elCheckbox": SelectorBlock(
                attrs={"style": {"background-color": CHECKED_COLOR}},
                params={"--style-border-color": CHECKED_COLOR},
            ),
            ".elCheckboxLabel .elCheckboxInput:checked ~ .elCheckboxText": SelectorBlock(
                attrs={"style": {"color": label_color}}
            ),
            ".elCheckboxLabel .elCheckboxInput ~ .elCheckboxText": SelectorBlock(
                attrs={"style": {"color": label_color}}
            ),
            ".elCheckboxText": SelectorBlock(
                attrs={
                    "style": {
                        "font-weight": text_styles.get("font-weight") or "400",
                        "font-size": label_size.value if label_size else 16,
                    }
                },
                params={"font-size--unit": label_size.unit if label_size else "px"},
            ),
        }

        assert node.id is not None
        editable = Node(
            kind="ContentEditableNode",
            id=new_id(),
            version=0,
            parent_id=node.id,
            order_key=key_for(0),
            slot_name="label",
        )
        editable.children = inline_nodes(text_span.inner_html() if text_span is not None else "")
        node.children = [editable]
        return node
