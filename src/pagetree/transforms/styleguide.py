"""Design-system decoration: apply styleguide fonts, paint themes and size presets.

The decorator runs on the *source* tree before traversal and only writes
ordinary ``data-*`` attributes, so producers see styleguide values through the
same precedence chain as hand-written overrides.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pagetree.config import ParserConfig
from pagetree.source.base import SourceElement
from pagetree.styles.values import js_round

logger = logging.getLogger(__name__)

DEFAULT_BASE_SIZE = 16
DEFAULT_SCALE_RATIO = 1.25
MISSING_COLOR = "#000000"

# Text kind -> typography font key.
_FONT_KEYS = {
    "Headline/V1": "headlineFont",
    "SubHeadline/V1": "subheadlineFont",
    "Paragraph/V1": "contentFont",
}

# Text kind -> paint theme color key.
_THEME_COLOR_KEYS = {
    "Headline/V1": "headlineColorId",
    "SubHeadline/V1": "subheadlineColorId",
    "Paragraph/V1": "contentColorId",
    "Icon/V1": "iconColorId",
}

# Kind -> typescale used to resolve its size presets.
_SCALE_KEYS = {
    "Headline/V1": "headline",
    "SubHeadline/V1": "subheadline",
    "Paragraph/V1": "paragraph",
    "BulletList/V1": "paragraph",
}


def typescale(typography: dict[str, Any] | None) -> dict[str, dict[str, int | float]] | None:
    """Per-kind maps from size preset (``xs`` .. ``5xl``) to pixel size.

    Scale points are ``baseSize * scaleRatio ** n`` rounded to whole pixels;
    the base point itself is kept as given.
    """
    if not typography:
        return None
    base = typography.get("baseSize", DEFAULT_BASE_SIZE)
    ratio = typography.get("scaleRatio", DEFAULT_SCALE_RATIO)

    def step(n: int) -> int | float:
        return base if n == 0 else js_round(base * ratio**n)

    s = {n: step(n) for n in range(-3, 9)}
    return {
        "headline": _preset_map(s, 8, 7, 6, 5, 4, 3, 2, 1, 0),
        "subheadline": _preset_map(s, 7, 6, 5, 4, 3, 2, 1, 0, -1),
        "paragraph": _preset_map(s, 6, 5, 4, 3, 2, 1, 0, -1, -2),
    }


def _preset_map(
    s: dict[int, int | float],
    xl5: int, xl4: int, xl3: int, xl2: int, xl: int, lg: int, md: int, sm: int, xs: int,
) -> dict[str, int | float]:
    return {
        "5xl": s[xl5],
        "4xl": s[xl4],
        "3xl": s[xl3],
        "2xl": s[xl2],
        "xl": s[xl],
        "l": s[lg],
        "lg": s[lg],
        "m": s[md],
        "md": s[md],
        "s": s[sm],
        "sm": s[sm],
        "xs": s[xs],
    }


def load_embedded_styleguide(
    document: SourceElement, config: ParserConfig | None = None
) -> dict[str, Any] | None:
    """Read the styleguide JSON embedded in the page, if any.

    Malformed JSON is logged and treated as absent.
    """
    config = config or ParserConfig()
    script = document.select_one(f"#{config.styleguide_script_id}")
    if script is None:
        return None
    try:
        data = json.loads(script.text())
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring malformed styleguide data: %s", exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring styleguide data of type %s", type(data).__name__)
        return None
    return data


class StyleguideDecorator:
    """Write styleguide-derived ``data-*`` attributes onto a source tree.

    Applied in order: typography fonts (only where ``data-font`` is absent),
    paint theme colors (override existing values unless an ``*-explicit``
    marker is present), then size presets resolved to ``data-size-resolved``.
    """

    def __init__(self, styleguide: dict[str, Any], config: ParserConfig | None = None) -> None:
        self.styleguide = styleguide
        self.config = config or ParserConfig()

    def apply(self, root: SourceElement) -> SourceElement:
        typography = self.styleguide.get("typography")
        if typography:
            self._apply_fonts(root, typography)
        if self.styleguide.get("paintThemes"):
            self._apply_paint_themes(root)
        if typography:
            self._apply_sizes(root, typography)
        return root

    def _kind_selector(self, kind: str) -> str:
        return f'[{self.config.kind_attribute}="{kind}"]'

    def color_hex(self, color_id: object) -> str:
        for color in self.styleguide.get("colors") or ():
            if color.get("id") == color_id:
                return color.get("hex", MISSING_COLOR)
        return MISSING_COLOR

    # --- fonts ----------------------------------------------------------------

    def _apply_fonts(self, root: SourceElement, typography: dict[str, Any]) -> None:
        for kind, key in _FONT_KEYS.items():
            font = typography.get(key)
            if not font:
                continue
            for element in root.select(f"{self._kind_selector(kind)}:not([data-font])"):
                element.set_attribute("data-font", font)

    # --- paint themes ---------------------------------------------------------

    def _apply_paint_themes(self, root: SourceElement) -> None:
        for theme in self.styleguide.get("paintThemes") or ():
            for container in root.select(f'[data-paint-colors="{theme.get("id")}"]'):
                self._paint(container, theme)

    def _paint(self, container: SourceElement, theme: dict[str, Any]) -> None:
        link_id = theme.get("linkColorId")
        link_color = self.color_hex(link_id) if link_id else None

        for kind, key in _THEME_COLOR_KEYS.items():
            color = self.color_hex(theme.get(key))
            for element in container.select(self._kind_selector(kind)):
                if not _paint_owner_is(element, container):
                    continue
                if not element.has_attribute("data-color-explicit"):
                    element.set_attribute("data-color", color)
                if link_color and kind != "Icon/V1":
                    element.set_attribute("data-link-color", link_color)

        content_color = self.color_hex(theme.get("contentColorId"))
        icon_color = self.color_hex(theme.get("iconColorId"))
        for element in container.select(self._kind_selector("BulletList/V1")):
            if not _paint_owner_is(element, container):
                continue
            if not element.has_attribute("data-text-color-explicit"):
                element.set_attribute("data-text-color", content_color)
            if not element.has_attribute("data-icon-color-explicit"):
                element.set_attribute("data-icon-color", icon_color)
            if link_color:
                element.set_attribute("data-link-color", link_color)

    # --- size presets ---------------------------------------------------------

    def _apply_sizes(self, root: SourceElement, typography: dict[str, Any]) -> None:
        scales = typescale(typography)
        if not scales:
            return
        for kind, scale_key in _SCALE_KEYS.items():
            scale = scales[scale_key]
            for element in root.select(f"{self._kind_selector(kind)}[data-size]"):
                preset = element.attribute("data-size")
                if preset in scale:
                    element.set_attribute("data-size-resolved", f"{scale[preset]}px")


def _paint_owner_is(element: SourceElement, container: SourceElement) -> bool:
    """True when *container* is the nearest paint-themed element at or above *element*."""
    current: SourceElement | None = element
    while current is not None:
        if current.has_attribute("data-paint-colors"):
            return current == container
        current = current.parent()
    return False
