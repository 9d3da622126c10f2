"""Base protocol for tree transforms."""

from __future__ import annotations

from typing import Protocol

from pagetree.model.node import Node


class Transform(Protocol):
    """An in-place rewrite of a produced node tree."""

    def apply(self, tree: Node) -> Node: ...
