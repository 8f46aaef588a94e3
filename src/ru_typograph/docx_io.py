from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, Iterable, Iterator

import docx
from docx.document import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from docx.table import _Cell
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from .config import TypographConfig
from .models import FormattedParagraph, FormattedRun
from .tree import TreeAdapter, typograph_tree

logger = logging.getLogger(__name__)

STYLE_TAGS = {
    "normal": "normal",
    "heading 1": "heading1",
    "heading 2": "heading2",
    "quote": "quote",
    "intense quote": "quote",
}


class DocumentFormatError(RuntimeError):
    """Raised when a document cannot be read or written."""


class DocxAdapter(TreeAdapter[Any]):
    """Expose paragraphs (including table cells) and runs of a DOCX body."""

    def __init__(self) -> None:
        self._seen_cells: set[Any] = set()

    def is_text_leaf(self, node: Any) -> bool:
        return isinstance(node, Run)

    def get_text(self, node: Any) -> str:
        return node.text

    def set_text(self, node: Any, text: str) -> None:
        node.text = text

    def children(self, node: Any) -> Iterable[Any]:
        if isinstance(node, Paragraph):
            return node.runs
        if isinstance(node, (DocxDocument, _Cell)):
            return self._container_children(node)
        return ()

    def is_block(self, node: Any) -> bool:
        return isinstance(node, Paragraph)

    def _container_children(self, container: Any) -> Iterator[Any]:
        yield from container.paragraphs
        for table in container.tables:
            for row in table.rows:
                for cell in row.cells:
                    # Merged cells are reported once per grid position.
                    if cell._tc in self._seen_cells:
                        continue
                    self._seen_cells.add(cell._tc)
                    yield cell


def load_docx(path: Path) -> DocxDocument:
    """Open a DOCX file, translating library errors into DocumentFormatError."""
    if not path.exists():
        raise DocumentFormatError(f"DOCX file not found: {path}")
    try:
        return docx.Document(str(path))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise DocumentFormatError(f"Invalid DOCX archive: {path}") from exc


def read_paragraphs(path: Path) -> list[FormattedParagraph]:
    """Return the body paragraphs of a DOCX file as formatted runs."""
    document = load_docx(path)
    return [_paragraph_model(paragraph) for paragraph in document.paragraphs]


def extract_text(path: Path) -> str:
    """Return the body text of a DOCX file, one line per paragraph."""
    return "\n".join(paragraph.text for paragraph in read_paragraphs(path))


def typograph_docx(
    source: Path, destination: Path, config: TypographConfig | None = None
) -> int:
    """Rewrite the text of every run in source and save the result."""
    document = load_docx(source)
    changed = typograph_tree(document, DocxAdapter(), config)
    destination.parent.mkdir(parents=True, exist_ok=True)
    document.save(str(destination))
    logger.info("Rewrote %d runs of %s into %s", changed, source, destination)
    return changed


def _paragraph_model(paragraph: Paragraph) -> FormattedParagraph:
    style_name = paragraph.style.name.lower() if paragraph.style is not None else ""
    left_indent = paragraph.paragraph_format.left_indent
    alignment = paragraph.alignment
    return FormattedParagraph(
        runs=[FormattedRun(text=run.text, style=_run_style(run)) for run in paragraph.runs],
        style=STYLE_TAGS.get(style_name, style_name.replace(" ", "") or "normal"),
        alignment=alignment.name.lower() if alignment is not None else None,
        indent=left_indent.pt if left_indent is not None else None,
    )


def _run_style(run: Run) -> dict[str, Any]:
    style: dict[str, Any] = {}
    font = run.font
    if font.bold:
        style["bold"] = True
    if font.italic:
        style["italic"] = True
    if font.underline:
        style["underline"] = True
    if font.size is not None:
        style["font_size"] = font.size.pt
    if font.color is not None and font.color.type is not None and font.color.rgb:
        style["color"] = str(font.color.rgb)
    return style
