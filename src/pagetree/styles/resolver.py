"""Property value resolution with a fixed most-specific-wins precedence chain.

For every styleable property the resolver consults, highest first:

1. an explicit override attribute on the element (``data-color``, ``data-size``...),
2. the inline style of a designated inner element, then of the element itself,
3. a document-level default declared on the nearest ancestor,
4. a hard-coded fallback.

A level whose raw value cannot be interpreted is skipped, so a malformed
override falls through to the inline style rather than producing garbage.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pagetree.source.base import SourceElement
from pagetree.styles.values import (
    normalize_color,
    normalize_font_family,
    normalize_font_weight,
    parse_line_height,
    parse_measure,
    parse_text_align,
)

__all__ = [
    "Source",
    "ResolvedValue",
    "PropertySpec",
    "PROPERTIES",
    "resolve",
]


class Source(Enum):
    """Which precedence level produced a resolved value."""

    OVERRIDE = "override"
    INLINE = "inline"
    INHERITED = "inherited"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ResolvedValue:
    value: object
    unit: str | None = None
    source: Source = Source.FALLBACK


# Normalizer: raw string -> (value, unit) or None when the raw value is unusable.
Normalizer = Callable[[str, str], "tuple[object, str | None] | None"]


def _as_measure(raw: str, default_unit: str) -> tuple[object, str | None] | None:
    measure = parse_measure(raw, default_unit)
    return (measure.value, measure.unit) if measure else None


def _as_color(raw: str, _unit: str) -> tuple[object, str | None] | None:
    color = normalize_color(raw)
    return (color, None) if color else None


def _as_weight(raw: str, _unit: str) -> tuple[object, str | None] | None:
    weight = normalize_font_weight(raw)
    return (weight, None) if weight else None


def _as_family(raw: str, _unit: str) -> tuple[object, str | None] | None:
    family = normalize_font_family(raw)
    return (family, None) if family else None


def _as_line_height(raw: str, _unit: str) -> tuple[object, str | None] | None:
    measure = parse_line_height(raw)
    return (measure.value, measure.unit) if measure else None


def _as_align(raw: str, _unit: str) -> tuple[object, str | None] | None:
    return (parse_text_align(raw.strip()), None)


def _as_text(raw: str, _unit: str) -> tuple[object, str | None] | None:
    raw = raw.strip()
    return (raw, None) if raw else None


@dataclass(frozen=True)
class PropertySpec:
    """How one property is looked up at each precedence level.

    Attributes:
        name: Property name used as the registry key.
        overrides: Override attributes on the element, checked in order.
        style: Inline CSS property consulted on the inner element and the element.
        inherit: Attributes consulted on ancestors, nearest ancestor first.
        fallback: Raw fallback value, normalized like any other level.
        default_unit: Unit given to bare numbers.
        normalize: Converts a raw string into ``(value, unit)``.
    """

    name: str
    overrides: tuple[str, ...] = ()
    style: str | None = None
    inherit: tuple[str, ...] = ()
    fallback: str | None = None
    default_unit: str = "px"
    normalize: Normalizer = _as_text


PROPERTIES: dict[str, PropertySpec] = {
    spec.name: spec
    for spec in (
        PropertySpec(
            "color",
            overrides=("data-color",),
            style="color",
            inherit=("data-color", "data-text-color"),
            fallback="#000000",
            normalize=_as_color,
        ),
        PropertySpec(
            "font-size",
            overrides=("data-size-resolved", "data-size"),
            style="font-size",
            fallback="48px",
            normalize=_as_measure,
        ),
        PropertySpec(
            "font-weight",
            overrides=("data-weight",),
            style="font-weight",
            fallback="normal",
            normalize=_as_weight,
        ),
        PropertySpec(
            "font-family",
            overrides=("data-font",),
            style="font-family",
            normalize=_as_family,
        ),
        PropertySpec(
            "text-align",
            overrides=("data-align",),
            style="text-align",
            fallback="center",
            normalize=_as_align,
        ),
        PropertySpec(
            "line-height",
            overrides=("data-leading",),
            style="line-height",
            fallback="140%",
            normalize=_as_line_height,
        ),
        PropertySpec(
            "letter-spacing",
            overrides=("data-tracking",),
            style="letter-spacing",
            fallback="0",
            default_unit="rem",
            normalize=_as_measure,
        ),
        PropertySpec(
            "text-transform",
            overrides=("data-transform",),
            style="text-transform",
        ),
        PropertySpec(
            "link-color",
            overrides=("data-link-color",),
            normalize=_as_color,
        ),
    )
}


def _inherited(element: SourceElement, spec: PropertySpec, stop_kind: str | None) -> str | None:
    ancestor = element.parent()
    while ancestor is not None:
        for attr in spec.inherit:
            value = ancestor.attribute(attr)
            if value:
                return value
        if stop_kind is not None and ancestor.kind == stop_kind:
            return None
        ancestor = ancestor.parent()
    return None


def resolve(
    element: SourceElement,
    prop: str | PropertySpec,
    *,
    inner: SourceElement | None = None,
    stop_kind: str | None = "ContentNode",
) -> ResolvedValue | None:
    """Resolve *prop* for *element* through the precedence chain.

    *inner* designates an inner element (for example the ``<h1>`` inside a
    headline) whose inline style is consulted before the element's own.
    Ancestor lookup stops after the first ancestor of kind *stop_kind*.
    Returns ``None`` when no level yields a usable value.
    """
    spec = prop if isinstance(prop, PropertySpec) else PROPERTIES[prop]

    def accept(raw: str | None, source: Source) -> ResolvedValue | None:
        if raw is None or not str(raw).strip():
            return None
        normalized = spec.normalize(str(raw), spec.default_unit)
        if normalized is None:
            return None
        value, unit = normalized
        return ResolvedValue(value=value, unit=unit, source=source)

    for attr in spec.overrides:
        found = accept(element.attribute(attr), Source.OVERRIDE)
        if found:
            return found

    if spec.style:
        for holder in (inner, element):
            if holder is None:
                continue
            found = accept(holder.inline_style().get(spec.style), Source.INLINE)
            if found:
                return found

    if spec.inherit:
        found = accept(_inherited(element, spec, stop_kind), Source.INHERITED)
        if found:
            return found

    return accept(spec.fallback, Source.FALLBACK)
