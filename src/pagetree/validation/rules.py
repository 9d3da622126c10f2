"""Validation rules for produced page documents.

Each rule is a function taking a Document and the parser configuration and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from pagetree.config import ParserConfig
from pagetree.model.diagnostic import Diagnostic, Severity
from pagetree.model.document import Document
from pagetree.model.node import Node
from pagetree.transforms.references import LIST_PARAMS


def _all_nodes(document: Document) -> Iterator[Node]:
    yield from document.nodes()
    yield from document.settings.walk()


def _trees(document: Document) -> tuple[Node, ...]:
    return (document.content, document.overlay, document.settings)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_content_root(document: Document, config: ParserConfig) -> list[Diagnostic]:
    """The content tree must be rooted at the content root kind."""
    if document.content.kind == config.root_kind:
        return []
    return [
        Diagnostic(
            rule="check_content_root",
            severity=Severity.ERROR,
            message=(
                f"Content tree is rooted at '{document.content.kind}', "
                f"expected '{config.root_kind}'."
            ),
            kind=document.content.kind,
        )
    ]


def check_unique_ids(document: Document, config: ParserConfig) -> list[Diagnostic]:
    """Node ids must be unique across content, overlay and settings."""
    counts = Counter(node.id for node in _all_nodes(document) if node.id)
    return [
        Diagnostic(
            rule="check_unique_ids",
            severity=Severity.ERROR,
            message=f"Id '{node_id}' is used by {count} nodes.",
            node_id=node_id,
            fix="Regenerate the document; ids are assigned fresh on every parse.",
        )
        for node_id, count in counts.items()
        if count > 1
    ]


def check_sibling_order(document: Document, config: ParserConfig) -> list[Diagnostic]:
    """Sibling order keys must be strictly increasing in list order."""
    diagnostics: list[Diagnostic] = []
    for tree in _trees(document):
        for parent in tree.walk():
            keys = [c.order_key for c in parent.children or () if c.order_key is not None]
            for previous, current in zip(keys, keys[1:]):
                if not previous < current:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_sibling_order",
                            severity=Severity.ERROR,
                            message=(
                                f"Children of '{parent.id}' are out of order: "
                                f"'{current}' follows '{previous}'."
                            ),
                            node_id=parent.id,
                            kind=parent.kind,
                        )
                    )
                    break  # one diagnostic per parent is sufficient
    return diagnostics


def check_parent_links(document: Document, config: ParserConfig) -> list[Diagnostic]:
    """A child's ``parentId``, when present, must equal its parent's id."""
    diagnostics: list[Diagnostic] = []
    for tree in _trees(document):
        for parent in tree.walk():
            for child in parent.children or ():
                if child.parent_id is None or child.parent_id == parent.id:
                    continue
                diagnostics.append(
                    Diagnostic(
                        rule="check_parent_links",
                        severity=Severity.ERROR,
                        message=(
                            f"Node '{child.id}' names parent '{child.parent_id}' "
                            f"but sits under '{parent.id}'."
                        ),
                        node_id=child.id,
                        kind=child.kind,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Semantic rules (WARNING severity)
# ---------------------------------------------------------------------------


def _unresolved_tokens(node: Node, config: ParserConfig, ids: set[str]) -> list[str]:
    prefix = config.reference_prefix
    params = node.params or {}
    tokens: list[str] = []
    href = params.get("href")
    if isinstance(href, str) and href.startswith(config.scroll_prefix):
        tokens.append(href[len(config.scroll_prefix):])
    for name in LIST_PARAMS:
        value = params.get(name)
        if isinstance(value, str) and value:
            tokens.extend(part.strip() for part in value.split(",") if part.strip())
    return [
        token
        for token in tokens
        if not (token.startswith(prefix) and token[len(prefix):] in ids)
    ]


def check_references_resolved(document: Document, config: ParserConfig) -> list[Diagnostic]:
    """Scroll targets and show/hide lists should name nodes of this document."""
    ids = {node.id for node in document.nodes() if node.id}
    diagnostics: list[Diagnostic] = []
    for node in document.nodes():
        if node.kind not in config.reference_kinds:
            continue
        for token in _unresolved_tokens(node, config, ids):
            diagnostics.append(
                Diagnostic(
                    rule="check_references_resolved",
                    severity=Severity.WARNING,
                    message=f"Reference '{token}' does not match any element anchor.",
                    node_id=node.id,
                    kind=node.kind,
                    fix=f"Give the target element id=\"{token}\" or fix the reference.",
                )
            )
    return diagnostics


ALL_RULES = [
    check_content_root,
    check_unique_ids,
    check_sibling_order,
    check_parent_links,
    check_references_resolved,
]
