"""Helpers shared by the element-kind producers."""

from __future__ import annotations

from typing import Any, Protocol

from pagetree.engine.ids import new_id
from pagetree.engine.registry import Slot
from pagetree.model.node import Node
from pagetree.source.base import SourceElement
from pagetree.styles.box import (
    CORNERS,
    Background,
    Border,
    Spacing,
    background_params,
    border_params,
    corner_values,
    spacing_style_params,
)
from pagetree.styles.shadow import Shadow, shadow_params
from pagetree.styles.values import Measure, parse_number


class Target(Protocol):
    """Anything carrying ``attrs``/``params`` bags: a node or a selector block."""

    @property
    def style(self) -> dict[str, Any]: ...

    def attr_bag(self) -> dict[str, Any]: ...

    def param_bag(self) -> dict[str, Any]: ...


# Params every text-like producer starts from; spacing values overwrite them.
PADDING_UNIT_PARAMS: dict[str, Any] = {
    "padding-top--unit": "px",
    "padding-bottom--unit": "px",
    "--style-padding-horizontal--unit": "px",
    "--style-padding-horizontal": 0,
}


def new_node(kind: str, slot: Slot, **fields: Any) -> Node:
    """Create a node with a fresh id placed at *slot*."""
    return Node(
        kind=kind,
        id=new_id(),
        version=0,
        parent_id=slot.parent_id,
        order_key=slot.order_key,
        **fields,
    )


def skip_flag(present: object) -> str:
    """Value for a ``data-skip-*-settings`` attribute."""
    return "false" if present else "true"


def apply_anchor(node: Node, element: SourceElement, *names: str) -> None:
    """Copy the first present anchor attribute into ``attrs.id``."""
    for name in names or ("id",):
        value = element.attribute(name)
        if value:
            node.attr_bag()["id"] = value
            return


def put_measure(target: Target, prop: str, measure: Measure | None) -> None:
    """Write ``style[prop] = value`` and ``params[prop--unit] = unit``."""
    if measure is None:
        return
    target.style[prop] = measure.value
    target.param_bag()[f"{prop}--unit"] = measure.unit


def put_param_measure(target: Target, prop: str, measure: Measure | None) -> None:
    """Write a measure entirely into params (``--style-*`` variables)."""
    if measure is None:
        return
    params = target.param_bag()
    params[prop] = measure.value
    params[f"{prop}--unit"] = measure.unit


def apply_spacing(target: Target, spacing: Spacing, *, defaults: bool = False) -> None:
    if defaults:
        spacing = spacing.with_defaults()
    style, params = spacing_style_params(spacing)
    target.style.update(style)
    target.param_bag().update(params)


def apply_surface(
    target: Target,
    *,
    background: Background | None = None,
    border: Border | None = None,
    shadow: Shadow | None = None,
    overlay: str | None = None,
) -> None:
    """Write background, foreground overlay, border and shadow params."""
    params = target.param_bag()
    if background is not None:
        params.update(background_params(background))
    if overlay:
        params["--style-foreground-color"] = overlay
    if border:
        params.update(border_params(border))
    if shadow is not None:
        params.update(shadow_params(shadow))


def apply_corners(
    target: Target,
    element: SourceElement,
    styles: dict[str, str],
    radius: Measure | None,
) -> bool:
    """Write the corner radius, individually when ``data-separate-corners`` is set.

    Returns whether separate corners were requested.
    """
    separate = element.attribute("data-separate-corners") == "true"
    if separate:
        target.param_bag()["separate-corners"] = True
        corners = corner_values(styles)
        for prop in CORNERS:
            put_measure(target, prop, corners.get(prop))
    put_measure(target, "border-radius", radius)
    return separate


def animation(element: SourceElement) -> tuple[dict[str, Any], dict[str, Any]]:
    """Entrance animation attrs and params, only when explicitly enabled."""
    if element.attribute("data-skip-animation-settings") != "false":
        return {}, {}
    attrs: dict[str, Any] = {"data-skip-animation-settings": "false"}
    params: dict[str, Any] = {}
    for name in ("data-animation-time", "data-animation-delay"):
        number = parse_number(element.attribute(name))
        if number is not None:
            attrs[name] = int(number)
            params[f"{name}--unit"] = "ms"
    for name in (
        "data-animation-type",
        "data-animation-trigger",
        "data-animation-timing-function",
        "data-animation-direction",
    ):
        value = element.attribute(name)
        if value:
            attrs[name] = value
    for name in ("data-animation-once", "data-animation-loop"):
        value = element.attribute(name)
        if value:
            attrs[name] = value == "true"
    return attrs, params


def apply_animation(node: Node, element: SourceElement) -> None:
    attrs, params = animation(element)
    if attrs:
        node.attr_bag().update(attrs)
    if params:
        node.param_bag().update(params)


