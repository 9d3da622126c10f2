"""BeautifulSoup adapter implementing the :class:`SourceElement` cursor."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from pagetree.config import ParserConfig
from pagetree.source.base import SourceElement
from pagetree.styles.declarations import parse_declarations

logger = logging.getLogger(__name__)


class SoupElement:
    """Wraps a bs4 :class:`~bs4.Tag` (or the document itself) as a source element.

    Wrappers are cheap and created on demand; two wrappers around the same
    tag compare equal.
    """

    __slots__ = ("_tag", "_kind_attribute")

    def __init__(self, tag: Tag, kind_attribute: str = "data-type") -> None:
        self._tag = tag
        self._kind_attribute = kind_attribute

    def _wrap(self, tag: Tag) -> SoupElement:
        return SoupElement(tag, self._kind_attribute)

    # --- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupElement) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        kind = f" {self._kind_attribute}={self.kind!r}" if self.kind else ""
        return f"<SoupElement {self._tag.name}{kind}>"

    # --- attributes -----------------------------------------------------------

    @property
    def kind(self) -> str | None:
        return self.attribute(self._kind_attribute) or None

    @property
    def tag(self) -> str:
        return self._tag.name

    @property
    def classes(self) -> list[str]:
        value = self._tag.get("class")
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return list(value)

    def attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has_attribute(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def set_attribute(self, name: str, value: str) -> None:
        self._tag[name] = value

    def inline_style(self) -> dict[str, str]:
        return parse_declarations(self.attribute("style"))

    # --- structure ------------------------------------------------------------

    def children(self) -> list[SoupElement]:
        return [self._wrap(child) for child in self._tag.children if isinstance(child, Tag)]

    def parent(self) -> SoupElement | None:
        parent = self._tag.parent
        if parent is None:
            return None
        return self._wrap(parent)

    def select_one(self, selector: str) -> SoupElement | None:
        found = self._tag.select_one(selector)
        return self._wrap(found) if found is not None else None

    def select(self, selector: str) -> list[SoupElement]:
        return [self._wrap(tag) for tag in self._tag.select(selector)]

    def text(self) -> str:
        return self._tag.get_text()

    def inner_html(self) -> str:
        return self._tag.decode_contents()


def load_html(markup: str, config: ParserConfig | None = None) -> SoupElement:
    """Parse page markup and return the document as a source element."""
    config = config or ParserConfig()
    soup = BeautifulSoup(markup, "html.parser")
    logger.debug("Loaded %d characters of markup", len(markup))
    return SoupElement(soup, config.kind_attribute)


def find_content_root(
    document: SourceElement, config: ParserConfig | None = None
) -> SourceElement | None:
    """Locate the content root element; the document element itself counts."""
    config = config or ParserConfig()
    if document.kind == config.root_kind:
        return document
    return document.select_one(f'[{config.kind_attribute}="{config.root_kind}"]')


def find_overlay_root(
    document: SourceElement, config: ParserConfig | None = None
) -> SourceElement | None:
    config = config or ParserConfig()
    return document.select_one(config.popup_selector)


def owner_document(element: SourceElement) -> SourceElement:
    """Return the top of *element*'s tree, the loaded document when it has one."""
    while True:
        parent = element.parent()
        if parent is None:
            return element
        element = parent
