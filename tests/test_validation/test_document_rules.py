"""Tests for document validation rules and the validator entry points."""

import pytest

from pagetree.config import ParserConfig
from pagetree.engine.assembler import PageSettings, assemble
from pagetree.model.diagnostic import Diagnostic, Severity
from pagetree.model.document import Document
from pagetree.model.node import Node
from pagetree.validation import ValidationError, validate, validate_or_raise
from pagetree.validation.rules import (
    check_content_root,
    check_parent_links,
    check_references_resolved,
    check_sibling_order,
    check_unique_ids,
)

CONFIG = ParserConfig()


def _section(node_id: str, key: str, anchor: str | None = None) -> Node:
    node = Node(kind="SectionContainer/V1", id=node_id, parent_id="", order_key=key)
    if anchor:
        node.attr_bag()["id"] = anchor
    return node


def _document(*children: Node, root_kind: str = "ContentNode") -> Document:
    content = Node(kind=root_kind, id="", children=list(children))
    return assemble(content, None, PageSettings("rgb(0, 0, 0)", "rgb(0, 0, 255)"))


def _button(node_id: str, parent: str, **params) -> Node:
    return Node(
        kind="Button/V1", id=node_id, parent_id=parent, order_key="a0", params=dict(params)
    )


# ---------------------------------------------------------------------------
# Structural rules
# ---------------------------------------------------------------------------


class TestContentRoot:
    def test_valid(self):
        assert check_content_root(_document(), CONFIG) == []

    def test_wrong_kind(self):
        diagnostics = check_content_root(_document(root_kind="SectionContainer/V1"), CONFIG)
        assert len(diagnostics) == 1
        assert diagnostics[0].severity is Severity.ERROR


class TestUniqueIds:
    def test_unique(self):
        document = _document(_section("s1", "a0"), _section("s2", "a1"))
        assert check_unique_ids(document, CONFIG) == []

    def test_duplicate(self):
        document = _document(_section("s1", "a0"), _section("s1", "a1"))
        diagnostics = check_unique_ids(document, CONFIG)
        assert [d.node_id for d in diagnostics] == ["s1"]

    def test_empty_ids_are_not_counted(self):
        # The content root and the empty overlay both carry "".
        assert check_unique_ids(_document(), CONFIG) == []

    def test_collision_with_settings(self):
        document = _document(_section("page_style", "a0"))
        assert [d.node_id for d in check_unique_ids(document, CONFIG)] == ["page_style"]


class TestSiblingOrder:
    def test_increasing(self):
        document = _document(_section("s1", "a0"), _section("s2", "a1"), _section("s3", "b00"))
        assert check_sibling_order(document, CONFIG) == []

    def test_out_of_order_reported_once_per_parent(self):
        document = _document(_section("s1", "a2"), _section("s2", "a1"), _section("s3", "a0"))
        diagnostics = check_sibling_order(document, CONFIG)
        assert len(diagnostics) == 1
        assert diagnostics[0].node_id == ""

    def test_equal_keys_rejected(self):
        document = _document(_section("s1", "a0"), _section("s2", "a0"))
        assert len(check_sibling_order(document, CONFIG)) == 1

    def test_keyless_children_ignored(self):
        inline = Node(kind="text", version=None, inner_text="x")
        paragraph = Node(kind="p", id="p1", parent_id="", order_key="a0", children=[inline, inline])
        assert check_sibling_order(_document(paragraph), CONFIG) == []


class TestParentLinks:
    def test_consistent(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "s1")]
        assert check_parent_links(_document(section), CONFIG) == []

    def test_mismatch(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "elsewhere")]
        diagnostics = check_parent_links(_document(section), CONFIG)
        assert [d.node_id for d in diagnostics] == ["b1"]
        assert diagnostics[0].kind == "Button/V1"


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


class TestReferencesResolved:
    def test_resolved_references(self):
        section = _section("s1", "a0", anchor="pricing")
        section.children = [_button("b1", "s1", href="#scroll-id-s1", showIds="id-s1")]
        assert check_references_resolved(_document(section), CONFIG) == []

    def test_unresolved_anchor(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "s1", href="#scroll-nowhere", hideIds="id-s1,ghost")]
        diagnostics = check_references_resolved(_document(section), CONFIG)
        assert len(diagnostics) == 2
        assert all(d.severity is Severity.WARNING for d in diagnostics)
        assert "'nowhere'" in diagnostics[0].message
        assert "'ghost'" in diagnostics[1].message

    def test_stale_internal_id(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "s1", href="#scroll-id-gone")]
        assert len(check_references_resolved(_document(section), CONFIG)) == 1

    def test_external_link_ignored(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "s1", href="https://example.com")]
        assert check_references_resolved(_document(section), CONFIG) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_clean_document(self):
        assert validate(_document(_section("s1", "a0"))) == []

    def test_extra_rules_run(self):
        def no_sections(document, config):
            return [
                Diagnostic(rule="no_sections", severity=Severity.INFO, message="section found")
                for node in document.nodes()
                if node.kind == "SectionContainer/V1"
            ]

        diagnostics = validate(_document(_section("s1", "a0")), extra_rules=[no_sections])
        assert [d.rule for d in diagnostics] == ["no_sections"]

    def test_raise_on_error(self):
        document = _document(_section("s1", "a0"), _section("s1", "a1"))
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise(document)
        assert len(excinfo.value.diagnostics) == 1
        assert "1 error(s)" in str(excinfo.value)

    def test_warnings_returned(self):
        section = _section("s1", "a0")
        section.children = [_button("b1", "s1", href="#scroll-nowhere")]
        diagnostics = validate_or_raise(_document(section))
        assert [d.severity for d in diagnostics] == [Severity.WARNING]
