"""Producer protocol and the registry mapping source kinds to producers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from pagetree.engine.ordering import key_for
from pagetree.model.context import ParseContext
from pagetree.model.node import Node
from pagetree.source.base import SourceElement

# Bound to the traversal: parses the children of a source element under a parent id.
ChildParser = Callable[[SourceElement, str], "list[Node]"]


@dataclass(frozen=True)
class Slot:
    """Where a produced node goes: its parent id and sibling position."""

    parent_id: str | None
    index: int = 0

    @property
    def order_key(self) -> str:
        return key_for(self.index)


class Producer(Protocol):
    """Builds zero or one output node from one source element.

    Container producers (``container = True``) receive a :data:`ChildParser`
    bound to the traversal; leaf producers receive ``None`` and read any
    nested source structure themselves.
    """

    container: bool

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None: ...


class ProducerRegistry:
    """Maps source element kinds (``data-type`` values) to producers."""

    def __init__(self) -> None:
        self._producers: dict[str, Producer] = {}

    def register(self, kind: str, producer: Producer) -> None:
        """Register a producer for a source kind, replacing any previous one."""
        self._producers[kind] = producer

    def resolve(self, kind: str) -> Producer | None:
        return self._producers.get(kind)

    def is_container(self, kind: str) -> bool:
        producer = self._producers.get(kind)
        return bool(producer is not None and producer.container)

    def kinds(self) -> list[str]:
        return list(self._producers)

    def __contains__(self, kind: str) -> bool:
        return kind in self._producers

    def __len__(self) -> int:
        return len(self._producers)
