"""Queryable HTML document backed by BeautifulSoup."""

from dataclasses import dataclass
from typing import Protocol

from bs4 import BeautifulSoup, Tag


class HtmlNode(Protocol):
    """Read-only view of an element in a parsed HTML document."""

    def select(self, selector: str) -> list["HtmlNode"]:
        """Return descendants matching a CSS selector, in document order."""

    def select_one(self, selector: str) -> "HtmlNode | None":
        """Return the first descendant matching a CSS selector."""

    def text(self) -> str:
        """Return the concatenated text content."""

    def attr(self, name: str) -> str | None:
        """Return an attribute value, if present."""

    def has_class(self, name: str) -> bool:
        """Return whether the element carries a CSS class."""

    def next_sibling(self) -> "HtmlNode | None":
        """Return the next sibling element, skipping text nodes."""


@dataclass(frozen=True)
class SoupNode(HtmlNode):
    """HtmlNode implementation wrapping a BeautifulSoup tag."""

    tag: Tag

    def select(self, selector: str) -> list[HtmlNode]:
        return [SoupNode(found) for found in self.tag.select(selector)]

    def select_one(self, selector: str) -> HtmlNode | None:
        found = self.tag.select_one(selector)
        return SoupNode(found) if found is not None else None

    def text(self) -> str:
        return self.tag.get_text()

    def attr(self, name: str) -> str | None:
        value = self.tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def has_class(self, name: str) -> bool:
        classes = self.tag.get("class") or []
        return name in classes

    def next_sibling(self) -> HtmlNode | None:
        sibling = self.tag.find_next_sibling()
        return SoupNode(sibling) if isinstance(sibling, Tag) else None


def parse_html(html: str) -> HtmlNode:
    """Parse an HTML string into a queryable document root."""
    return SoupNode(BeautifulSoup(html or "", "html.parser"))


def joined_text(nodes: list[HtmlNode]) -> str:
    """Concatenate the text of several nodes."""
    return "".join(node.text() for node in nodes)
