from __future__ import annotations

import logging
from typing import Iterable

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from .config import TypographConfig
from .tree import TreeAdapter, typograph_tree

logger = logging.getLogger(__name__)


class SoupAdapter(TreeAdapter[PageElement]):
    """Expose a BeautifulSoup tree to the text-leaf traversal."""

    BLOCK_TAGS = {
        "p",
        "div",
        "br",
        "li",
        "ul",
        "ol",
        "section",
        "article",
        "blockquote",
        "td",
        "th",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
    }
    # Content of these tags is code or markup, not prose.
    SKIP_TAGS = {"script", "style", "pre", "code", "textarea"}

    def is_text_leaf(self, node: PageElement) -> bool:
        return isinstance(node, NavigableString) and not isinstance(
            node, PreformattedString
        )

    def get_text(self, node: PageElement) -> str:
        return str(node)

    def set_text(self, node: PageElement, text: str) -> None:
        node.replace_with(NavigableString(text))

    def children(self, node: PageElement) -> Iterable[PageElement]:
        if isinstance(node, Tag) and node.name not in self.SKIP_TAGS:
            return node.children
        return ()

    def is_block(self, node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name in self.BLOCK_TAGS


def typograph_html(html: str, config: TypographConfig | None = None) -> str:
    """Rewrite the text nodes of an HTML document or fragment."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    changed = typograph_tree(root, SoupAdapter(), config)
    logger.info("Rewrote %d HTML text nodes", changed)
    return str(soup)


def html_text(html: str) -> str:
    """Return the visible text of an HTML document."""
    soup = BeautifulSoup(html, "html.parser")
    return soup.get_text()
