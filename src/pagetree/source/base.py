"""Read-only tree cursor the parser walks, independent of any markup library."""

from __future__ import annotations

from typing import Protocol


class SourceElement(Protocol):
    """One element of the source tree.

    ``kind`` is the value of the kind attribute (``data-type``), or ``None``
    for pure layout wrappers. ``children`` returns element children only, in
    document order.
    """

    @property
    def kind(self) -> str | None: ...

    @property
    def tag(self) -> str: ...

    @property
    def classes(self) -> list[str]: ...

    def attribute(self, name: str) -> str | None: ...

    def has_attribute(self, name: str) -> bool: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def inline_style(self) -> dict[str, str]: ...

    def children(self) -> list[SourceElement]: ...

    def parent(self) -> SourceElement | None: ...

    def select_one(self, selector: str) -> SourceElement | None: ...

    def select(self, selector: str) -> list[SourceElement]: ...

    def text(self) -> str: ...

    def inner_html(self) -> str: ...
