from __future__ import annotations

from pathlib import Path

import docx
from docx.enum.text import WD_ALIGN_PARAGRAPH

SECOND_STANZA = (
    "    Играют волны -- ветер свищет,\n"
    "    И мачта гнется и скрыпит...\n"
    "    Увы! он счастия не ищет\n"
    "    И не от счастия бежит!"
)

LONG_PARAGRAPH = (
    "Это длинное предложение о погоде, работе и планах на выходные дни. " * 5
).strip()


def write_sample_docx(path: Path) -> None:
    """Create a DOCX with styled runs, a heading, a centered line, prose and a table."""
    document = docx.Document()
    document.add_heading("Заголовок", level=1)
    paragraph = document.add_paragraph()
    bold = paragraph.add_run("Он сказал")
    bold.bold = True
    paragraph.add_run(" - в дом")
    centered = document.add_paragraph("Подождите...")
    centered.alignment = WD_ALIGN_PARAGRAPH.CENTER
    document.add_paragraph("")
    for _ in range(2):
        document.add_paragraph(LONG_PARAGRAPH)
    table = document.add_table(rows=1, cols=1)
    table.cell(0, 0).text = "Цена 15%"
    document.save(str(path))


def write_docx_with_break(path: Path) -> None:
    """Create a DOCX whose first paragraph has a soft line break between runs."""
    document = docx.Document()
    paragraph = document.add_paragraph()
    first = paragraph.add_run("Первая строка")
    first.add_break()
    paragraph.add_run("вторая строка")
    for _ in range(2):
        document.add_paragraph(LONG_PARAGRAPH)
    document.save(str(path))
