"""Per-parse state: the reference index and collected diagnostics."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from pagetree.config import ParserConfig
from pagetree.model.diagnostic import Diagnostic, Severity

logger = logging.getLogger(__name__)


class ReferenceIndex:
    """Maps author-assigned anchor names to internally assigned node ids.

    Registration is last-write-wins: when two elements share an anchor name,
    the one produced later in document order owns it.
    """

    def __init__(self) -> None:
        self._ids: dict[str, str] = {}

    def register(self, anchor: str, node_id: str) -> None:
        previous = self._ids.get(anchor)
        if previous is not None and previous != node_id:
            logger.debug("Anchor %r re-registered: %s -> %s", anchor, previous, node_id)
        self._ids[anchor] = node_id

    def lookup(self, anchor: str) -> str | None:
        return self._ids.get(anchor)

    def internal_ids(self) -> set[str]:
        return set(self._ids.values())

    def __contains__(self, anchor: str) -> bool:
        return anchor in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __repr__(self) -> str:
        return f"ReferenceIndex(anchors={len(self._ids)})"


class ParseContext:
    """State threaded through one parse call and discarded afterwards.

    Holds the configuration, the optional design-system object consumed by
    button producers, the reference index built during traversal, and the
    diagnostics reported along the way.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        styleguide: dict[str, Any] | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.styleguide = styleguide
        self.references = ReferenceIndex()
        self.diagnostics: list[Diagnostic] = []

    def report(
        self,
        rule: str,
        severity: Severity,
        message: str,
        *,
        node_id: str | None = None,
        kind: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic and return it."""
        diagnostic = Diagnostic(
            rule=rule, severity=severity, message=message, node_id=node_id, kind=kind
        )
        self.diagnostics.append(diagnostic)
        return diagnostic

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    def __repr__(self) -> str:
        return (
            f"ParseContext(anchors={len(self.references)}, "
            f"diagnostics={len(self.diagnostics)})"
        )
