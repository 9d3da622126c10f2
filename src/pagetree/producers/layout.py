"""Layout producers: content root, sections, rows, columns and flex containers."""

from __future__ import annotations

from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock
from pagetree.producers.common import (
    Target,
    apply_anchor,
    apply_animation,
    apply_corners,
    apply_spacing,
    apply_surface,
    new_node,
    put_measure,
    put_param_measure,
    skip_flag,
)
from pagetree.source.base import SourceElement
from pagetree.styles.box import parse_background, parse_border, parse_radius, parse_spacing
from pagetree.styles.shadow import parse_shadow
from pagetree.styles.values import (
    js_round,
    parse_align_items,
    parse_flex_direction,
    parse_justify_content,
    parse_measure,
    parse_number,
)

DEFAULT_BG_CLASS = "bgCoverCenter"

# Substrings of max-width -> section container class, first match wins.
_CONTAINER_CLASSES = (
    (("550", "small"), "smallContainer"),
    (("960", "midWide"), "midWideContainer"),
    (("720", "mid"), "midContainer"),
    (("100%", "full"), "fullContainer"),
)


def _children(
    parse_children: ChildParser | None, element: SourceElement, parent_id: str
) -> list[Node]:
    return parse_children(element, parent_id) if parse_children is not None else []


def _apply_box(target: Target, element: SourceElement, styles: dict[str, str]) -> None:
    """Shared section/row decoration: spacing, surface, corners and skip flags."""
    background = parse_background(styles)
    shadow = parse_shadow(styles.get("box-shadow"))
    radius = parse_radius(styles)

    attrs = target.attr_bag()
    attrs["data-skip-background-settings"] = skip_flag(background)
    attrs["data-skip-shadow-settings"] = skip_flag(shadow)
    attrs["data-skip-corners-settings"] = skip_flag(radius)

    apply_spacing(target, parse_spacing(styles), defaults=True)
    apply_surface(
        target,
        background=background,
        border=parse_border(styles),
        shadow=shadow,
        overlay=element.attribute("data-overlay"),
    )
    apply_corners(target, element, styles, radius)


def _bg_class(element: SourceElement) -> str:
    return element.attribute("data-bg-style") or DEFAULT_BG_CLASS


class ContentNodeProducer:
    """The content root; it has an empty id and no parent."""

    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        styles = element.inline_style()
        background = parse_background(styles)
        node = Node(kind=context.config.root_kind, id="", version=0)
        apply_surface(node, background=background)
        node.param_bag()["--style-foreground-color"] = element.attribute("data-overlay") or ""
        node.style.update({"display": "block", "background-position": "center !important"})
        attrs = node.attr_bag()
        attrs["data-skip-background-settings"] = skip_flag(background)
        attrs["className"] = _bg_class(element)
        node.children = _children(parse_children, element, node.id or "")
        return node


class SectionProducer:
    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        styles = element.inline_style()
        node = new_node("SectionContainer/V1", slot)
        class_name = self.container_class(styles.get("max-width") or "1170px")
        if parse_background(styles).image_url:
            class_name = f"{class_name} {_bg_class(element)}"
        node.attr_bag()["className"] = class_name
        _apply_box(node, element, styles)
        apply_anchor(node, element)
        self._video_background(node, element)

        show_only = element.attribute("data-show")
        if show_only:
            node.attr_bag()["data-show-only"] = show_only

        assert node.id is not None
        node.children = _children(parse_children, element, node.id)
        return node

    @staticmethod
    def container_class(max_width: str) -> str:
        for needles, class_name in _CONTAINER_CLASSES:
            if any(needle in max_width for needle in needles):
                return class_name
        return "wideContainer"

    @staticmethod
    def _video_background(node: Node, element: SourceElement) -> None:
        url = element.attribute("data-video-bg-url")
        if not url or element.attribute("data-video-bg-type") != "youtube":
            return
        attrs = node.attr_bag()
        attrs["data-skip-background-settings"] = "false"
        attrs["data-skip-background-video-settings"] = "false"
        params = node.param_bag()
        params.update(
            {
                "video-bg-url": url,
                "video-bg-type": "youtube",
                "video-bg-thumbnail-background": False,
                "video-bg-use-background-as-overlay": True,
                "video-bg-hide-on-mobile": element.attribute("data-video-bg-hide-mobile") == "true",
                "video-bg-style-type": "offset",
                "video-bg-offset-y": 50,
                "--style-background-image-url": "",
            }
        )
        overlay = element.attribute("data-video-bg-overlay")
        if overlay:
            params["--style-background-color"] = overlay


class RowProducer:
    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        styles = element.inline_style()
        node = new_node("RowContainer/V1", slot)
        width = parse_measure(styles.get("width") or "1170px")
        if width is None:
            width = parse_measure("1170px")
        put_measure(node, "width", width)

        z_index = parse_number(styles.get("z-index"))
        if z_index is not None:
            node.style["z-index"] = int(z_index)

        _apply_box(node, element, styles)
        apply_animation(node, element)
        apply_anchor(node, element)
        if parse_background(styles).image_url:
            node.attr_bag()["className"] = _bg_class(element)

        col_inner = node.selector(".col-inner")
        col_inner.param_bag()["height--unit"] = "%"
        col_inner.style["height"] = "auto"

        assert node.id is not None
        node.children = _children(parse_children, element, node.id)
        return node


class ColumnProducer:
    """Columns read their decoration from the ``.col-inner`` child, if present."""

    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        styles = element.inline_style()
        node = new_node("ColContainer/V1", slot, attrs={})
        width = parse_number(styles.get("width") or "100%")
        span = js_round((width or 0) / 100 * 12) if width is not None else 0
        node.param_bag().update(
            {
                "mdNum": span or 12,
                "colDirection": element.attribute("data-col-direction") or "left",
            }
        )
        apply_anchor(node, element)

        inner_block = SelectorBlock(attrs={"style": {}}, params={})
        node.selectors = {"& > .col-inner": inner_block, ".col-inner": SelectorBlock()}

        assert node.id is not None
        col_inner = element.select_one(":scope > .col-inner")
        if col_inner is None:
            node.children = _children(parse_children, element, node.id)
            return node

        self._decorate_inner(inner_block, col_inner)
        node.children = _children(parse_children, col_inner, node.id)
        return node

    @staticmethod
    def _decorate_inner(block: Target, col_inner: SourceElement) -> None:
        styles = col_inner.inline_style()
        background = parse_background(styles)
        shadow = parse_shadow(styles.get("box-shadow"))
        radius = parse_radius(styles)
        overlay = col_inner.attribute("data-overlay")

        apply_spacing(block, parse_spacing(styles))
        margin = styles.get("margin-left") or styles.get("margin-right")
        put_param_measure(block, "--style-margin-horizontal", parse_measure(margin))

        apply_surface(
            block,
            background=background,
            border=parse_border(styles),
            shadow=shadow,
            overlay=overlay,
        )
        attrs = block.attr_bag()
        if background.image_url:
            attrs["className"] = _bg_class(col_inner)
        attrs["data-skip-shadow-settings"] = skip_flag(shadow)
        separate = apply_corners(block, col_inner, styles, radius)
        attrs["data-skip-corners-settings"] = skip_flag(radius or separate)
        attrs["data-skip-background-settings"] = skip_flag(background or overlay)


class ColumnInnerProducer:
    """Column inner wrappers are read by their column; on their own they yield nothing."""

    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        return None


class FlexProducer:
    container = True

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        styles = element.inline_style()
        background = parse_background(styles)
        shadow = parse_shadow(styles.get("box-shadow"))
        radius = parse_radius(styles)

        class_name = "elFlexNoWrapMobile"
        if styles.get("flex-wrap") == "wrap":
            class_name = f"elFlexWrap {class_name}"
        if background.image_url:
            class_name = f"{class_name} {_bg_class(element)}"

        node = new_node(
            "FlexContainer/V1",
            slot,
            attrs={
                "className": class_name,
                "data-skip-background-settings": skip_flag(background),
                "data-skip-shadow-settings": skip_flag(shadow),
                "data-skip-corners-settings": skip_flag(radius),
                "style": {
                    "flex-direction": parse_flex_direction(styles.get("flex-direction")),
                    "justify-content": parse_justify_content(styles.get("justify-content")),
                    "align-items": parse_align_items(styles.get("align-items")),
                },
            },
            params={},
        )
        apply_anchor(node, element)
        gap = parse_measure(styles.get("gap") or "1.5em", "em")
        node.style["gap"] = gap.value if gap else 0
        node.param_bag()["gap--unit"] = gap.unit if gap else "em"
        put_measure(node, "width", parse_measure(styles.get("width") or "100%", "%"))
        put_measure(node, "height", parse_measure(styles.get("height"), "px"))
        apply_spacing(node, parse_spacing(styles), defaults=True)
        apply_surface(
            node,
            background=background if background else None,
            border=parse_border(styles),
            shadow=shadow,
            overlay=element.attribute("data-overlay"),
        )
        put_measure(node, "border-radius", radius)

        assert node.id is not None
        node.children = _children(parse_children, element, node.id)
        for child in node.children:
            if child.kind != "FlexContainer/V1":
                child.style.setdefault("width", "auto")
        return node
