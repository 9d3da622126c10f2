"""Box properties read from inline styles: border, background, radius, spacing, corners."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pagetree.styles.values import Measure, normalize_color, parse_measure

_BORDER_STYLES = frozenset({"solid", "dashed", "dotted", "double", "none"})
_URL_RE = re.compile(r"""url\(\s*['"]?([^'")]+)['"]?\s*\)""")

CORNERS = (
    "border-top-left-radius",
    "border-top-right-radius",
    "border-bottom-left-radius",
    "border-bottom-right-radius",
)


# ---------------------------------------------------------------------------
# Border
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Border:
    width: Measure | None = None
    style: str | None = None
    color: str | None = None

    def __bool__(self) -> bool:
        return bool(self.width or self.style or self.color)


def parse_border(styles: dict[str, str]) -> Border:
    """Read the ``border`` shorthand, then let longhand properties override it."""
    width: Measure | None = None
    style: str | None = None
    color: str | None = None
    shorthand = styles.get("border")
    if shorthand:
        for part in _split_outside_parens(shorthand):
            if part[:1].isdigit() or part[:1] == ".":
                width = parse_measure(part)
            elif part in _BORDER_STYLES:
                style = part
            else:
                color = normalize_color(part)
    if styles.get("border-width"):
        width = parse_measure(styles["border-width"])
    if styles.get("border-style"):
        style = styles["border-style"]
    if styles.get("border-color"):
        color = normalize_color(styles["border-color"])
    return Border(width=width, style=style, color=color)


def border_params(border: Border) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if border.width:
        params["--style-border-width"] = border.width.value
        params["--style-border-width--unit"] = border.width.unit
    if border.style:
        params["--style-border-style"] = border.style
    if border.color:
        params["--style-border-color"] = border.color
    return params


def _split_outside_parens(value: str) -> list[str]:
    """Split on whitespace, keeping ``rgb(0, 0, 0)`` style groups intact."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in value.strip():
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        if ch.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        parts.append("".join(current))
    return parts


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Background:
    color: str | None = None
    image_url: str | None = None
    gradient: str | None = None

    def __bool__(self) -> bool:
        return bool(self.color or self.image_url or self.gradient)


def parse_background(styles: dict[str, str]) -> Background:
    color = normalize_color(styles.get("background-color"))
    gradient = None
    image_url = None
    shorthand = styles.get("background")
    if shorthand:
        if "gradient" in shorthand:
            gradient = shorthand
        else:
            color = normalize_color(shorthand)
    image = styles.get("background-image")
    if image:
        match = _URL_RE.search(image)
        if match:
            image_url = match.group(1)
    return Background(color=color, image_url=image_url, gradient=gradient)


def background_params(background: Background) -> dict[str, Any]:
    """Gradients travel in ``--style-background-color``; the image url key is always present."""
    params: dict[str, Any] = {}
    if background.gradient:
        params["--style-background-color"] = background.gradient
    elif background.color:
        params["--style-background-color"] = background.color
    params["--style-background-image-url"] = background.image_url or ""
    return params


# ---------------------------------------------------------------------------
# Radius and corners
# ---------------------------------------------------------------------------


def parse_radius(styles: dict[str, str]) -> Measure | None:
    return parse_measure(styles.get("border-radius"))


def corner_values(styles: dict[str, str]) -> dict[str, Measure]:
    """Return the individually declared corner radii."""
    corners: dict[str, Measure] = {}
    for prop in CORNERS:
        measure = parse_measure(styles.get(prop))
        if measure:
            corners[prop] = measure
    return corners


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------

_ZERO = Measure(0, "px")


@dataclass(frozen=True)
class Spacing:
    padding_top: Measure | None = None
    padding_bottom: Measure | None = None
    padding_horizontal: Measure | None = None
    margin_top: Measure | None = None

    def with_defaults(self) -> Spacing:
        """Fill every missing side with ``0px``."""
        return Spacing(
            padding_top=self.padding_top or _ZERO,
            padding_bottom=self.padding_bottom or _ZERO,
            padding_horizontal=self.padding_horizontal or _ZERO,
            margin_top=self.margin_top or _ZERO,
        )


def parse_spacing(styles: dict[str, str]) -> Spacing:
    horizontal = styles.get("padding-left") or styles.get("padding-right")
    return Spacing(
        padding_top=parse_measure(styles.get("padding-top")),
        padding_bottom=parse_measure(styles.get("padding-bottom")),
        padding_horizontal=parse_measure(horizontal),
        margin_top=parse_measure(styles.get("margin-top")),
    )


def spacing_style_params(spacing: Spacing) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split spacing into ``attrs.style`` values and their ``--unit`` params."""
    style: dict[str, Any] = {}
    params: dict[str, Any] = {}
    if spacing.padding_top:
        style["padding-top"] = spacing.padding_top.value
        params["padding-top--unit"] = spacing.padding_top.unit
    if spacing.padding_bottom:
        style["padding-bottom"] = spacing.padding_bottom.value
        params["padding-bottom--unit"] = spacing.padding_bottom.unit
    if spacing.padding_horizontal:
        params["--style-padding-horizontal"] = spacing.padding_horizontal.value
        params["--style-padding-horizontal--unit"] = spacing.padding_horizontal.unit
    if spacing.margin_top:
        style["margin-top"] = spacing.margin_top.value
        params["margin-top--unit"] = spacing.margin_top.unit
    return style, params
