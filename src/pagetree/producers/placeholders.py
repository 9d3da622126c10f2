"""Commerce placeholders: boxes in the source that become real checkout elements."""

from __future__ import annotations

from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock, text_node
from pagetree.producers.common import new_node
from pagetree.source.base import SourceElement
from pagetree.styles.box import parse_spacing, spacing_style_params

TOS_TEXT = "By completing this purchase, you agree to our terms of service."
CTA_HEADER = "Complete Your Order Today!"


def _paragraph(slot_name: str, text: str, parent_id: str, index: int) -> Node:
    paragraph = Node(
        kind="p",
        id=new_id(),
        version=0,
        parent_id=parent_id,
        order_key=key_for(index),
        slot_name=slot_name,
    )
    assert paragraph.id is not None
    paragraph.add_child(
        text_node(text, id=new_id(), version=0, parent_id=paragraph.id, order_key=key_for(0))
    )
    return paragraph


class CheckoutPlaceholderProducer:
    """Emits ``Checkout/V2`` with its terms and call-to-action slots pre-filled."""

    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        node = new_node(
            "Checkout/V2",
            slot,
            attrs={
                "style": {
                    "--container-font-family": "var(--style-guide-font-family-content)",
                    "--input-headline-font-family": "var(--style-guide-font-family-subheadline)",
                    "--multiple-payments-font-family": "sans-serif",
                    "--input-background-color": "#FFFFFF",
                }
            },
            selectors={
                ".elButton": SelectorBlock(
                    attrs={
                        "style": {"border-style": "none", "border-radius": 6},
                        "data-skip-corners-settings": "false",
                    },
                    params={"--style-border-style": "solid", "border-radius--unit": "px"},
                )
            },
        )
        assert node.id is not None
        # Only the style half of the spacing applies here.
        style, _ = spacing_style_params(parse_spacing(element.inline_style()))
        node.style.update(style)
        node.children = [
            _paragraph("tos-text", TOS_TEXT, node.id, 0),
            _paragraph("cta-header", CTA_HEADER, node.id, 1),
        ]
        return node


class OrderSummaryPlaceholderProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        node = new_node(
            "CheckoutOrderSummary/V1",
            slot,
            params={"open": True, "state": "ok", "linkWithCheckout": True},
        )
        _spacing_if_any(node, element)
        return node


class ConfirmationPlaceholderProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        node = new_node(
            "OrderConfirmation/V1",
            slot,
            selectors={
                ".elOrderConfirmationV1": SelectorBlock(
                    attrs={
                        "data-skip-corners-settings": "false",
                        "style": {"border-radius": "8px"},
                    },
                    params={
                        "--style-border-width": "1px",
                        "--style-border-style": "solid",
                        "--style-border-color": "#ECF0F5",
                    },
                )
            },
        )
        _spacing_if_any(node, element)
        return node


def _spacing_if_any(node: Node, element: SourceElement) -> None:
    """Apply spacing without creating empty ``attrs``/``params`` bags."""
    spacing = parse_spacing(element.inline_style())
    style, params = spacing_style_params(spacing)
    if style:
        node.style.update(style)
    if params:
        node.param_bag().update(params)
