"""Tests for the traversal (dispatch, wrapper elision, anchors) and document assembly."""

from __future__ import annotations

import logging

from pagetree.config import ParserConfig
from pagetree.engine.assembler import PageSettings, assemble, build_settings, empty_overlay, settings_node
from pagetree.engine.ids import new_id
from pagetree.engine.registry import ProducerRegistry
from pagetree.engine.traversal import Traverser
from pagetree.model.context import ParseContext
from pagetree.model.diagnostic import Severity
from pagetree.model.node import Node
from pagetree.source.soup import find_content_root, load_html


# ---------------------------------------------------------------------------
# Test producers
# ---------------------------------------------------------------------------


class LeafProducer:
    """Produces a bare node of a fixed kind, carrying the element's id as anchor."""

    container = False

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self.calls = 0

    def produce(self, element, slot, context, parse_children):
        self.calls += 1
        node = Node(
            kind=self.kind,
            id=new_id(),
            parent_id=slot.parent_id,
            order_key=slot.order_key,
        )
        anchor = element.attribute("id")
        if anchor:
            node.attr_bag()["id"] = anchor
        return node


class BoxProducer(LeafProducer):
    container = True

    def produce(self, element, slot, context, parse_children):
        node = super().produce(element, slot, context, parse_children)
        node.children = parse_children(element, node.id)
        return node


class NothingProducer:
    container = False

    def produce(self, element, slot, context, parse_children):
        return None


def _registry() -> ProducerRegistry:
    registry = ProducerRegistry()
    registry.register("Box", BoxProducer("Box"))
    registry.register("Leaf", LeafProducer("Leaf"))
    registry.register("Nothing", NothingProducer())
    return registry


def _parse(html: str, context: ParseContext | None = None) -> tuple[Node, ParseContext]:
    context = context or ParseContext()
    document = load_html(html)
    root = document.select_one('[data-type="Box"]')
    node = Traverser(_registry(), context).parse_element(root, None, 0)
    assert node is not None
    return node, context


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestProducerRegistry:
    def test_register_and_resolve(self):
        registry = _registry()
        assert "Leaf" in registry
        assert registry.resolve("Leaf") is not None
        assert registry.resolve("Unknown") is None

    def test_is_container(self):
        registry = _registry()
        assert registry.is_container("Box")
        assert not registry.is_container("Leaf")
        assert not registry.is_container("Unknown")

    def test_register_replaces(self):
        registry = _registry()
        replacement = LeafProducer("Other")
        registry.register("Leaf", replacement)
        assert registry.resolve("Leaf") is replacement
        assert len(registry) == 3


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class TestTraversal:
    def test_children_get_contiguous_keys(self):
        node, _ = _parse(
            '<div data-type="Box"><div data-type="Leaf"></div><div data-type="Leaf"></div></div>'
        )
        assert [c.order_key for c in node.children] == ["a0", "a1"]
        assert all(c.parent_id == node.id for c in node.children)

    def test_wrapper_children_are_spliced_in(self):
        node, _ = _parse(
            '<div data-type="Box">'
            '<div data-type="Leaf"></div>'
            '<div style="position: relative; z-index: 3">'
            '<div data-type="Leaf"></div><div><div data-type="Leaf"></div></div>'
            "</div>"
            '<div data-type="Leaf"></div>'
            "</div>"
        )
        assert [c.order_key for c in node.children] == ["a0", "a1", "a2", "a3"]
        assert all(c.parent_id == node.id for c in node.children)

    def test_overlays_are_skipped(self):
        node, _ = _parse(
            '<div data-type="Box">'
            '<div class="cf-overlay" data-type="Leaf"></div>'
            '<div data-type="Leaf"></div>'
            "</div>"
        )
        assert len(node.children) == 1
        assert node.children[0].order_key == "a0"

    def test_nested_popup_root_is_skipped(self):
        node, context = _parse(
            '<div data-type="Box">'
            '<div data-type="ModalContainer/V1"><div data-type="Leaf"></div></div>'
            '<div data-type="Leaf"></div>'
            "</div>"
        )
        assert len(node.children) == 1
        assert node.children[0].order_key == "a0"
        assert context.diagnostics == []

    def test_overlay_class_is_configurable(self):
        context = ParseContext(ParserConfig(overlay_class="shade"))
        node, _ = _parse(
            '<div data-type="Box"><div class="shade" data-type="Leaf"></div></div>', context
        )
        assert node.children == []

    def test_missing_producer_is_reported_and_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pagetree.engine.traversal"):
            node, context = _parse(
                '<div data-type="Box">'
                '<div data-type="Mystery/V9"><div data-type="Leaf"></div></div>'
                '<div data-type="Leaf"></div>'
                "</div>"
            )
        assert len(node.children) == 1
        assert node.children[0].order_key == "a0"
        assert len(context.diagnostics) == 1
        diagnostic = context.diagnostics[0]
        assert diagnostic.rule == "missing_producer"
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.kind == "Mystery/V9"
        assert "Mystery/V9" in caplog.text

    def test_producer_returning_none_consumes_no_index(self):
        node, _ = _parse(
            '<div data-type="Box">'
            '<div data-type="Nothing"></div>'
            '<div data-type="Leaf"></div>'
            "</div>"
        )
        assert [c.order_key for c in node.children] == ["a0"]

    def test_nested_containers(self):
        node, _ = _parse(
            '<div data-type="Box"><div data-type="Box"><div data-type="Leaf"></div></div></div>'
        )
        inner = node.children[0]
        assert inner.children[0].parent_id == inner.id

    def test_leaf_children_are_not_traversed(self):
        registry = _registry()
        leaf = registry.resolve("Leaf")
        document = load_html(
            '<div data-type="Box"><div data-type="Leaf"><div data-type="Leaf"></div></div></div>'
        )
        Traverser(registry, ParseContext()).parse_element(
            document.select_one('[data-type="Box"]'), None, 0
        )
        assert leaf.calls == 1

    def test_kindless_element_produces_nothing(self):
        document = load_html("<div><p>plain</p></div>")
        traverser = Traverser(_registry(), ParseContext())
        assert traverser.parse_element(document.select_one("div"), None, 0) is None

    def test_anchors_are_registered(self):
        node, context = _parse(
            '<div data-type="Box"><div data-type="Leaf" id="pricing"></div></div>'
        )
        assert context.references.lookup("pricing") == node.children[0].id

    def test_duplicate_anchor_last_write_wins(self):
        node, context = _parse(
            '<div data-type="Box">'
            '<div data-type="Leaf" id="dup"></div>'
            '<div data-type="Leaf" id="dup"></div>'
            "</div>"
        )
        assert context.references.lookup("dup") == node.children[1].id
        assert len(context.references) == 1


# ---------------------------------------------------------------------------
# Settings and assembly
# ---------------------------------------------------------------------------


class TestAssembler:
    def _root(self, attrs: str = ""):
        document = load_html(f'<div data-type="ContentNode" {attrs}></div>')
        return find_content_root(document)

    def test_settings_defaults(self):
        settings = build_settings(self._root())
        assert settings.text_color == "rgb(51, 65, 85)"
        assert settings.link_color == "rgb(59, 130, 246)"
        assert settings.font_family is None
        assert settings.custom_css == ""

    def test_settings_from_root_attributes(self):
        settings = build_settings(
            self._root(
                'data-text-color="#112233" data-font-family="Inter" data-font-weight="600" '
                'data-header-code="%3Cscript%3Ex()%3C%2Fscript%3E"'
            )
        )
        assert settings.text_color == "rgb(17, 34, 51)"
        assert settings.font_family == '"Inter", sans-serif'
        assert settings.font_weight == "600"
        assert settings.header_code == "<script>x()</script>"

    def test_settings_node_layout(self):
        node = settings_node(PageSettings("rgb(0, 0, 0)", "red", custom_css="p{}"))
        assert node.kind == "settings"
        assert [c.kind for c in node.children] == ["css", "raw", "raw", "raw"]
        assert [c.order_key for c in node.children] == ["a0", "a1", "a2", "a3"]
        assert [c.id for c in node.children] == ["page_style", "header-code", "footer-code", "css"]
        assert node.children[3].inner_text == "\n\np{}"
        style = node.children[0].selectors[".elTypographyLink"].attrs["style"]
        assert style == {"color": "red"}

    def test_empty_custom_css_stays_empty(self):
        node = settings_node(PageSettings("rgb(0, 0, 0)", "red"))
        assert node.children[3].inner_text == ""

    def test_empty_overlay(self):
        overlay = empty_overlay()
        assert overlay.kind == "ModalContainer/V1"
        assert overlay.id == ""
        assert overlay.children is None

    def test_assemble_wire_keys(self):
        content = Node(kind="ContentNode", id="")
        document = assemble(content, None, PageSettings("black", "blue"))
        data = document.to_dict()
        assert list(data) == ["version", "content", "settings", "popup"]
        assert data["version"] == 157
        assert data["popup"]["type"] == "ModalContainer/V1"

    def test_format_version_is_configurable(self):
        document = assemble(
            Node(kind="ContentNode", id=""),
            None,
            PageSettings("black", "blue"),
            ParserConfig(format_version=200),
        )
        assert document.format_version == 200
