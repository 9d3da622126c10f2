from __future__ import annotations

from typing import Iterable

from pagetree.model.node import Node
from pagetree.transforms.base import Transform
from pagetree.transforms.references import ReferenceResolver, resolve_references
from pagetree.transforms.styleguide import (
    StyleguideDecorator,
    load_embedded_styleguide,
    typescale,
)

__all__ = [
    "Transform",
    "apply_transforms",
    "ReferenceResolver",
    "resolve_references",
    "StyleguideDecorator",
    "load_embedded_styleguide",
    "typescale",
]


def apply_transforms(tree: Node, transforms: Iterable[Transform]) -> Node:
    """Apply each transform to *tree* in order and return the result."""
    for transform in transforms:
        tree = transform.apply(tree)
    return tree
