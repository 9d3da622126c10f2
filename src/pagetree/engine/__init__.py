"""Parse engine: order keys, ids, producer registry, traversal, and document assembly."""

from pagetree.engine.assembler import PageSettings, assemble, build_settings, empty_overlay
from pagetree.engine.ids import new_id, new_link_id
from pagetree.engine.ordering import key_for, keys_for
from pagetree.engine.registry import ChildParser, Producer, ProducerRegistry, Slot
from pagetree.engine.traversal import Traverser

__all__ = [
    "key_for",
    "keys_for",
    "new_id",
    "new_link_id",
    "Slot",
    "Producer",
    "ChildParser",
    "ProducerRegistry",
    "Traverser",
    "PageSettings",
    "build_settings",
    "empty_overlay",
    "assemble",
]
