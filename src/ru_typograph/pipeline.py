from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Tuple

from .classifier import classify
from .config import TypographConfig
from .models import Classification, Document, FormattedParagraph, ProcessingStats
from .protection import TokenVault
from .rules import POETRY_RULES, PROSE_STEPS, RuleContext
from .stats import processing_stats

logger = logging.getLogger(__name__)

POETRY_STYLE = "poetry"
DEFAULT_STYLE = "normal"


def process_prose(
    text: str | None,
    is_first_run: bool = False,
    config: TypographConfig | None = None,
    is_last_run: bool = True,
) -> str:
    """Apply the full prose rule pipeline to text."""
    config = config or TypographConfig()
    result = text or ""
    TokenVault.check(result)
    ctx = RuleContext(
        is_first_run=is_first_run,
        is_last_run=is_last_run,
        bind_all_numbers=config.bind_all_numbers,
        strip_trailing_blank_lines=config.strip_trailing_blank_lines,
    )
    for _, step in PROSE_STEPS:
        result = step(result, ctx)
    return result


def process_poetry(text: str | None) -> str:
    """Fix punctuation line by line while keeping verse indentation intact."""
    processed: list[str] = []
    for line in (text or "").split("\n"):
        content = line.lstrip()
        indent = line[: len(line) - len(content)]
        if not content:
            processed.append(line)
            continue
        for _, rule in POETRY_RULES:
            content = rule(content)
        processed.append(indent + content)
    return "\n".join(processed)


def resolve_classification(
    text: str, config: TypographConfig
) -> Classification:
    """Classify text unless the configuration forces a mode."""
    if config.mode == "prose":
        return Classification(is_poetry=False)
    if config.mode == "poetry":
        return Classification(is_poetry=True)
    return classify(text, config.classifier)


def process(
    text: str | None,
    is_first_run: bool = False,
    config: TypographConfig | None = None,
) -> str:
    """Classify text and run the matching pipeline."""
    config = config or TypographConfig()
    text = text or ""
    classification = resolve_classification(text, config)
    return _apply(text, classification, is_first_run, config)


def process_with_formatting(
    paragraphs: Iterable[FormattedParagraph],
    config: TypographConfig | None = None,
) -> List[FormattedParagraph]:
    """
    Rewrite every run of every paragraph while passing styles through.

    The verse/prose decision is made once for the whole document. Paragraphs
    tagged with the default style are retagged as verse when the document is
    poetry. Trailing blank lines are stripped from the last run of a paragraph
    only, so line breaks between runs survive. The input paragraphs are not
    mutated.
    """
    config = config or TypographConfig()
    paragraphs = list(paragraphs)
    full_text = "\n".join(paragraph.text for paragraph in paragraphs)
    classification = resolve_classification(full_text, config)
    logger.debug(
        "Rewriting %d paragraphs as %s",
        len(paragraphs),
        "poetry" if classification.is_poetry else "prose",
    )

    result: List[FormattedParagraph] = []
    for paragraph in paragraphs:
        last = len(paragraph.runs) - 1
        runs = [
            replace(
                run,
                text=_apply(
                    run.text, classification, index == 0, config, index == last
                ),
                style=dict(run.style),
            )
            for index, run in enumerate(paragraph.runs)
        ]
        style = paragraph.style
        if classification.is_poetry and style == DEFAULT_STYLE:
            style = POETRY_STYLE
        result.append(replace(paragraph, runs=runs, style=style))
    return result


def process_document(
    doc: Document, config: TypographConfig | None = None
) -> Tuple[Document, ProcessingStats]:
    """Process a whole plain-text document and report statistics."""
    config = config or TypographConfig()
    processed = process(doc.text, is_first_run=True, config=config)
    stats = processing_stats(doc.text, processed, config.classifier)
    logger.info(
        "Processed %s: %d -> %d chars (poetry=%s)",
        doc.doc_id,
        stats.original_length,
        stats.processed_length,
        stats.is_poetry,
    )
    return replace(doc, text=processed), stats


def _apply(
    text: str,
    classification: Classification,
    is_first_run: bool,
    config: TypographConfig,
    is_last_run: bool = True,
) -> str:
    if classification.is_poetry:
        return process_poetry(text)
    return process_prose(text, is_first_run, config, is_last_run)
