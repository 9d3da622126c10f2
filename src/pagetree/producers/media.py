"""Media producers: image, icon, embedded video and divider."""

from __future__ import annotations

import re

from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock
from pagetree.producers.common import (
    PADDING_UNIT_PARAMS,
    apply_animation,
    apply_spacing,
    apply_surface,
    new_node,
    put_measure,
    skip_flag,
)
from pagetree.source.base import SourceElement
from pagetree.styles.box import parse_background, parse_border, parse_radius, parse_spacing
from pagetree.styles.shadow import parse_shadow
from pagetree.styles.values import (
    normalize_color,
    parse_measure,
    parse_number,
    parse_text_align,
)

DEFAULT_ICON = "fas fa-star"
DEFAULT_ICON_COLOR = "#3b82f6"
DEFAULT_DIVIDER_COLOR = "#e2e8f0"

_BORDER_TOP_RE = re.compile(
    r"""^(?P<width>\d+(?:\.\d+)?px) \s+
        (?P<style>solid|dashed|dotted) \s+
        (?P<color>.+)$""",
    re.IGNORECASE | re.VERBOSE,
)


def image_url_param(url: str) -> list[dict[str, str]]:
    """Image urls travel as a one-element rich-text list."""
    return [{"type": "text", "innerText": url}]


class ImageProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        wrapper = element.inline_style()
        img = element.select_one("img")
        img_styles = img.inline_style() if img is not None else {}
        radius = parse_radius(img_styles)
        shadow = parse_shadow(img_styles.get("box-shadow"))

        node = new_node(
            "Image/V2",
            slot,
            attrs={
                "alt": (img.attribute("alt") if img is not None else None) or "",
                "style": {"text-align": parse_text_align(wrapper.get("text-align"))},
            },
            params={
                "imageUrl": image_url_param(
                    (img.attribute("src") if img is not None else None) or ""
                ),
                **PADDING_UNIT_PARAMS,
            },
        )
        apply_animation(node, element)
        apply_spacing(node, parse_spacing(wrapper))

        width = parse_measure(img_styles.get("width") or "100%", "%")
        image = SelectorBlock(
            attrs={
                "style": {
                    "width": width.value if width else 100,
                    "object-fit": img_styles.get("object-fit") or "cover",
                },
                "data-image-quality": 100,
                "data-skip-corners-settings": skip_flag(radius),
                "data-skip-shadow-settings": skip_flag(shadow),
            },
            params={"width--unit": width.unit if width else "%"},
        )
        put_measure(image, "height", parse_measure(img_styles.get("height"), "px"))
        put_measure(image, "border-radius", radius)
        apply_surface(image, border=parse_border(img_styles), shadow=shadow)
        node.selectors = {".elImage": image}
        return node


class IconProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        wrapper = element.inline_style()
        glyph = element.select_one("i")
        glyph_styles = glyph.inline_style() if glyph is not None else {}

        class_name = element.attribute("data-icon")
        if not class_name:
            class_name = (glyph.attribute("class") if glyph is not None else None) or DEFAULT_ICON
        size = parse_measure(element.attribute("data-size") or glyph_styles.get("font-size") or "48px")
        color = normalize_color(
            element.attribute("data-color") or glyph_styles.get("color") or DEFAULT_ICON_COLOR
        )

        node = new_node("Icon/V1", slot, attrs={"style": {}}, params={})
        apply_animation(node, element)
        apply_spacing(node, parse_spacing(wrapper))

        icon = SelectorBlock(
            attrs={
                "className": class_name,
                "style": {"font-size": size.value if size else 48, "color": color},
            },
            params={"font-size--unit": size.unit if size else "px"},
        )
        opacity = parse_number(element.attribute("data-opacity") or glyph_styles.get("opacity"))
        if opacity is not None:
            icon.style["opacity"] = opacity
        node.selectors = {
            ".fa_icon": icon,
            ".iconElement": SelectorBlock(
                attrs={"style": {"text-align": parse_text_align(wrapper.get("text-align"))}}
            ),
        }
        return node


class VideoProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        frame = element.select_one("div")
        frame_styles = frame.inline_style() if frame is not None else {}
        radius = parse_radius(frame_styles)
        shadow = parse_shadow(frame_styles.get("box-shadow"))
        background = parse_background(frame_styles)

        node = new_node(
            "Video/V1",
            slot,
            attrs={
                "data-video-type": element.attribute("data-video-type") or "youtube",
                "data-skip-background-settings": skip_flag(background.color),
                "data-skip-shadow-settings": skip_flag(shadow),
                "data-skip-corners-settings": skip_flag(radius),
                "style": {},
            },
            params={"video_url": element.attribute("data-video-url") or "", **PADDING_UNIT_PARAMS},
            selectors={},
        )
        apply_spacing(node, parse_spacing(element.inline_style()))
        put_measure(node, "border-radius", radius)
        apply_surface(node, border=parse_border(frame_styles), shadow=shadow)
        if background.color:
            node.param_bag()["--style-background-color"] = background.color
        return node


class DividerProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        line = element.select_one("div")
        line_styles = line.inline_style() if line is not None else {}

        width: int | float = 1
        style = "solid"
        color = DEFAULT_DIVIDER_COLOR
        match = _BORDER_TOP_RE.match(line_styles.get("border-top") or "")
        if match:
            width = parse_number(match.group("width")) or 0
            style = match.group("style").lower()
            color = match.group("color").strip()

        node = new_node(
            "Divider/V1",
            slot,
            attrs={"style": {}},
            params={**PADDING_UNIT_PARAMS, "margin-top--unit": "px"},
        )
        apply_spacing(node, parse_spacing(element.inline_style()))

        line_width = parse_measure(line_styles.get("width") or "100%", "%")
        shadow_skipped = element.attribute("data-skip-shadow-settings") != "false"
        divider = SelectorBlock(
            attrs={
                "style": {
                    "width": line_width.value if line_width else 100,
                    "margin": line_styles.get("margin") or "0 auto",
                },
                "data-skip-shadow-settings": "true" if shadow_skipped else "false",
            },
            params={
                "width--unit": line_width.unit if line_width else "%",
                "--style-border-top-width": width,
                "--style-border-top-width--unit": "px",
                "--style-border-style": style,
                "--style-border-color": normalize_color(color),
            },
        )
        apply_surface(divider, shadow=parse_shadow(line_styles.get("box-shadow")))
        node.selectors = {".elDivider": divider}
        return node
