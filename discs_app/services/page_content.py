"""
Parsed lddb.com page.

Wraps a BeautifulSoup tree and exposes the small surface the extraction
strategies need: the flattened page text, elements by tag name, direct child
cell texts and attribute values.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class PageContent:
    def __init__(self, html_content: str, url: str = ""):
        self.url = url
        self.soup = BeautifulSoup(html_content, "lxml")
        self._text: str | None = None

    @property
    def text(self) -> str:
        """Full flattened text of the document, text nodes joined as-is."""
        if self._text is None:
            self._text = self.soup.get_text()
        return self._text

    def find_all(self, tag_name: str) -> list[Tag]:
        return self.soup.find_all(tag_name)

    @staticmethod
    def element_text(element: Tag) -> str:
        return element.get_text()

    @staticmethod
    def cell_texts(element: Tag, tag_name: str) -> list[str]:
        """Whitespace-collapsed texts of the descendants of element named tag_name, in document order."""
        return [" ".join(child.get_text().split()) for child in element.find_all(tag_name)]

    @staticmethod
    def attr(element: Tag, name: str) -> str:
        """
        Attribute value as a string ('' when missing).

        Multi-valued attributes like class are joined with spaces.
        """
        value = element.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return str(value)
