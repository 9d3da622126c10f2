"""Overlay (popup) root producer."""

from __future__ import annotations

from pagetree.engine.ids import new_id
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock
from pagetree.producers.common import put_measure, put_param_measure, skip_flag
from pagetree.source.base import SourceElement
from pagetree.styles.shadow import parse_shadow, shadow_params
from pagetree.styles.values import normalize_color, parse_measure

DEFAULT_WIDTH = "750px"
DEFAULT_OVERLAY = "rgba(0,0,0,0.5)"
DEFAULT_ROUNDED = "16px"


class ModalProducer:
    """Builds the ``ModalContainer/V1`` overlay root.

    Sections come from ``.elModalInnerContainer`` when present, else from
    the modal box itself. The overlay root sits outside the content tree,
    so it carries no parent id or order key.
    """

    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        modal = element.select_one(".cf-popup-modal, .containerModal")
        modal_styles = modal.inline_style() if modal is not None else {}
        inner = element.select_one(".elModalInnerContainer")

        width = parse_measure(element.attribute("data-popup-width") or DEFAULT_WIDTH)
        rounded = parse_measure(element.attribute("data-popup-rounded") or DEFAULT_ROUNDED)
        shadow_requested = bool(element.attribute("data-popup-shadow"))
        margin_top = parse_measure(modal_styles.get("margin-top") or "45px")
        margin_bottom = parse_measure(modal_styles.get("margin-bottom") or "10px")

        box = SelectorBlock(
            attrs={
                "data-skip-corners-settings": skip_flag(rounded),
                "data-skip-shadow-settings": skip_flag(shadow_requested),
                "style": {
                    "margin-bottom": margin_bottom.value if margin_bottom else 10,
                    "margin-top": margin_top.value if margin_top else 45,
                },
            },
            params={
                "margin-bottom--unit": margin_bottom.unit if margin_bottom else "px",
                "margin-top--unit": margin_top.unit if margin_top else "px",
            },
        )
        put_measure(box, "border-radius", rounded)

        border = parse_measure(element.attribute("data-popup-border"))
        if border:
            params = box.param_bag()
            params["--style-border-style"] = "solid"
            put_param_measure(box, "--style-border-width", border)
            params["--style-border-color"] = normalize_color(
                element.attribute("data-popup-border-color") or "#000000"
            )
        if shadow_requested:
            box.param_bag().update(shadow_params(parse_shadow(modal_styles.get("box-shadow"))))

        node = Node(
            kind=context.config.popup_kind,
            id=new_id(),
            version=0,
            selectors={
                ".containerModal": box,
                ".modal-wrapper": SelectorBlock(
                    params={
                        "--style-background-color": element.attribute("data-popup-overlay")
                        or DEFAULT_OVERLAY,
                        "--style-padding-horizontal--unit": "px",
                        "--style-padding-horizontal": 0,
                    }
                ),
                ".elModalInnerContainer": SelectorBlock(
                    attrs={"style": {"width": width.value if width else 750}},
                    params={"width--unit": width.unit if width else "px"},
                ),
            },
            children=[],
        )
        sections = inner or modal
        if sections is not None and parse_children is not None:
            assert node.id is not None
            node.children = parse_children(sections, node.id)
        return node
