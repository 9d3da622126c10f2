"""Document assembly: page settings subtree, overlay placeholder, top-level envelope."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote

from pagetree.config import ParserConfig
from pagetree.engine.ids import new_id
from pagetree.engine.ordering import key_for
from pagetree.model.document import Document
from pagetree.model.node import Node, SelectorBlock
from pagetree.source.base import SourceElement
from pagetree.styles.values import normalize_color, normalize_font_family


@dataclass(frozen=True)
class PageSettings:
    """Page-level typography, colors and code blobs read from the content root."""

    text_color: str
    link_color: str
    font_family: str | None = None
    font_weight: str | None = None
    header_code: str = ""
    footer_code: str = ""
    custom_css: str = ""


def _decoded(root: SourceElement, name: str) -> str:
    raw = root.attribute(name) or ""
    return unquote(raw) if raw else ""


def build_settings(root: SourceElement, config: ParserConfig | None = None) -> PageSettings:
    """Read page settings from the ``data-*`` attributes of the content root."""
    config = config or ParserConfig()
    text_color = root.attribute("data-text-color") or config.default_text_color
    link_color = root.attribute("data-link-color") or config.default_link_color
    return PageSettings(
        text_color=normalize_color(text_color) or text_color,
        link_color=normalize_color(link_color) or link_color,
        font_family=normalize_font_family(root.attribute("data-font-family")),
        font_weight=root.attribute("data-font-weight") or None,
        header_code=_decoded(root, "data-header-code"),
        footer_code=_decoded(root, "data-footer-code"),
        custom_css=_decoded(root, "data-custom-css"),
    )


def settings_node(settings: PageSettings) -> Node:
    """Build the ``settings`` subtree: one page style block and three raw blobs."""
    node = Node(kind="settings", id=new_id(), version=0)

    page_style = Node(
        kind="css",
        id="page_style",
        version=None,
        parent_id=node.id,
        order_key=key_for(0),
        attrs={"style": {"color": settings.text_color}},
        params={},
    )
    if settings.font_family:
        page_style.style["font-family"] = settings.font_family
    if settings.font_weight:
        page_style.style["font-weight"] = settings.font_weight
    page_style.selectors = {
        ".elTypographyLink": SelectorBlock(
            attrs={"style": {"color": settings.link_color}}, params={}
        )
    }
    node.add_child(page_style)

    css = f"\n\n{settings.custom_css}" if settings.custom_css else ""
    blobs = (
        ("header-code", settings.header_code),
        ("footer-code", settings.footer_code),
        ("css", css),
    )
    for offset, (blob_id, text) in enumerate(blobs, start=1):
        node.add_child(
            Node(
                kind="raw",
                id=blob_id,
                version=None,
                parent_id=node.id,
                order_key=key_for(offset),
                inner_text=text,
            )
        )
    return node


def empty_overlay(config: ParserConfig | None = None) -> Node:
    """The minimal overlay placeholder emitted when the page has no popup."""
    config = config or ParserConfig()
    node = Node(kind=config.popup_kind, id="", version=0)
    node.selector(".containerModal").attrs = {
        "data-skip-corners-settings": "false",
        "data-style-guide-corner": "style1",
        "style": {"margin-bottom": 0},
    }
    return node


def assemble(
    content: Node,
    overlay: Node | None,
    settings: PageSettings,
    config: ParserConfig | None = None,
) -> Document:
    """Wrap the parsed subtrees in the top-level document envelope."""
    config = config or ParserConfig()
    return Document(
        format_version=config.format_version,
        content=content,
        settings=settings_node(settings),
        overlay=overlay if overlay is not None else empty_overlay(config),
    )
