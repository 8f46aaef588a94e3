"""
Format-independent traversal of document trees.

Adapters expose a markup tree through TreeAdapter; the helpers here gather the
text leaves of each block, hand them to process_with_formatting as runs of a
paragraph and write the rewritten text back. Whitespace-only leaves are
structural (indentation between tags, empty paragraphs) and are never touched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, TypeVar

from .config import TypographConfig
from .models import FormattedParagraph, FormattedRun
from .pipeline import process_with_formatting

N = TypeVar("N")


def is_blank(text: str) -> bool:
    return not text.strip()


class TreeAdapter(ABC, Generic[N]):
    """Minimal view of a document tree needed to rewrite its text."""

    @abstractmethod
    def is_text_leaf(self, node: N) -> bool:
        """Return True if node carries rewritable text."""
        raise NotImplementedError

    @abstractmethod
    def get_text(self, node: N) -> str:
        raise NotImplementedError

    @abstractmethod
    def set_text(self, node: N, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def children(self, node: N) -> Iterable[N]:
        raise NotImplementedError

    def is_block(self, node: N) -> bool:
        """Return True if node starts a new paragraph."""
        return False


def group_text_leaves(
    root: N,
    adapter: TreeAdapter[N],
    is_empty: Callable[[str], bool] = is_blank,
) -> List[List[N]]:
    """Collect non-empty text leaves, one list per enclosing block."""
    groups: List[List[N]] = [[]]

    def visit(node: N) -> None:
        if adapter.is_text_leaf(node):
            if not is_empty(adapter.get_text(node)):
                groups[-1].append(node)
            return
        block = adapter.is_block(node)
        if block:
            groups.append([])
        for child in list(adapter.children(node)):
            visit(child)
        if block:
            groups.append([])

    visit(root)
    return [group for group in groups if group]


def typograph_tree(
    root: N,
    adapter: TreeAdapter[N],
    config: TypographConfig | None = None,
    is_empty: Callable[[str], bool] = is_blank,
) -> int:
    """Rewrite every text leaf under root in place; return the number changed."""
    groups = group_text_leaves(root, adapter, is_empty)
    paragraphs = [
        FormattedParagraph(runs=[FormattedRun(adapter.get_text(node)) for node in group])
        for group in groups
    ]
    changed = 0
    for group, paragraph in zip(groups, process_with_formatting(paragraphs, config)):
        for node, run in zip(group, paragraph.runs):
            if run.text != adapter.get_text(node):
                adapter.set_text(node, run.text)
                changed += 1
    return changed
