"""Queryable document capability used by the check catalogs."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

Element = Any


class QueryableDocument(Protocol):
    """Selector based access to a parsed HTML tree.

    Checks only talk to this interface so the parser behind it can be
    swapped without touching the catalogs.
    """

    def select_first(self, selector: str) -> Optional[Element]:
        ...

    def select_all(self, selector: str) -> List[Element]:
        ...

    def attribute(self, element: Optional[Element], name: str) -> Optional[str]:
        ...

    def text(self, element: Optional[Element]) -> str:
        ...


class SoupDocument:
    """:class:`QueryableDocument` backed by BeautifulSoup and lxml."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "lxml")

    def select_first(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    def select_all(self, selector: str) -> List[Tag]:
        return list(self._soup.select(selector))

    def attribute(self, element: Optional[Tag], name: str) -> Optional[str]:
        if element is None:
            return None
        value = element.get(name)
        # Multi-valued attributes such as ``rel`` come back as lists.
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self, element: Optional[Tag]) -> str:
        if element is None:
            return ""
        return element.get_text()


__all__ = ["Element", "QueryableDocument", "SoupDocument"]
