"""Top-level entry points: parse markup into a Document and serialize it."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pagetree.config import ParserConfig
from pagetree.engine.assembler import assemble, build_settings
from pagetree.engine.registry import ProducerRegistry
from pagetree.engine.traversal import Traverser
from pagetree.model.context import ParseContext
from pagetree.model.diagnostic import Severity
from pagetree.model.document import Document
from pagetree.producers import create_default_registry
from pagetree.source.base import SourceElement
from pagetree.source.soup import find_content_root, find_overlay_root, load_html, owner_document
from pagetree.transforms import apply_transforms
from pagetree.transforms.base import Transform
from pagetree.transforms.references import ReferenceResolver
from pagetree.transforms.styleguide import StyleguideDecorator, load_embedded_styleguide

logger = logging.getLogger(__name__)


def parse(
    source: str | SourceElement,
    *,
    config: ParserConfig | None = None,
    context: ParseContext | None = None,
    styleguide: dict[str, Any] | None = None,
    registry: ProducerRegistry | None = None,
    transforms: list[Transform] | None = None,
) -> Document | None:
    """Parse page markup (or an already loaded source tree) into a Document.

    Args:
        source: HTML markup, or a source element whose subtree holds the
            content root. The styleguide and the popup are looked up in the
            whole document the element belongs to.
        config: Parser configuration. Taken from *context* when that is given.
        context: Parse context to record diagnostics and anchors in. A fresh
            one is created when omitted.
        styleguide: Design-system object. When omitted, a styleguide embedded
            in the page is used if present.
        registry: Producer registry. Defaults to every known element kind.
        transforms: Extra tree rewrites run after reference resolution, on
            the content tree and then on the overlay tree.

    Returns:
        The document, or ``None`` when the page has no content root. The
        reason is reported as a diagnostic on *context*.
    """
    if context is None:
        context = ParseContext(config)
    config = context.config

    if isinstance(source, str):
        document = scope = load_html(source, config)
    else:
        document, scope = owner_document(source), source

    guide = styleguide if styleguide is not None else load_embedded_styleguide(document, config)
    if guide:
        StyleguideDecorator(guide, config).apply(document)
        context.styleguide = guide

    root = find_content_root(scope, config)
    if root is None:
        logger.error("No %s element found; nothing to parse", config.root_kind)
        context.report(
            "missing_content_root",
            Severity.ERROR,
            f"No element with {config.kind_attribute}=\"{config.root_kind}\" found.",
            kind=config.root_kind,
        )
        return None

    traverser = Traverser(registry or create_default_registry(), context)
    content = traverser.parse_element(root, None, 0)
    if content is None:
        logger.error("The %s element produced no node", config.root_kind)
        context.report(
            "missing_content_root",
            Severity.ERROR,
            f"The {config.root_kind} element produced no node.",
            kind=config.root_kind,
        )
        return None

    overlay = None
    overlay_root = find_overlay_root(document, config)
    if overlay_root is not None:
        overlay = traverser.parse_element(overlay_root, None, 0)

    # Both trees resolve against the one index filled while traversing them.
    pipeline: list[Transform] = [ReferenceResolver(context.references, config)]
    pipeline.extend(transforms or ())
    content = apply_transforms(content, pipeline)
    if overlay is not None:
        overlay = apply_transforms(overlay, pipeline)

    logger.debug(
        "Parsed %d nodes with %d anchors",
        sum(1 for _ in content.walk()),
        len(context.references),
    )
    return assemble(content, overlay, build_settings(root, config), config)


def serialize(document: Document, pretty: bool = True) -> str:
    """Return the document as JSON text."""
    if pretty:
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    return json.dumps(document.to_dict(), separators=(",", ":"), ensure_ascii=False)


def write_document(document: Document, path: str | Path, pretty: bool = True) -> Path:
    """Write the document JSON to *path* and return the path."""
    target = Path(path)
    target.write_text(serialize(document, pretty) + "\n", encoding="utf-8")
    logger.info("Wrote %s", target)
    return target
