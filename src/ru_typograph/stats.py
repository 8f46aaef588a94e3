from __future__ import annotations

import re
from typing import List

from .classifier import classify
from .config import ClassifierSettings
from .models import ProcessingStats

MULTI_SPACE_RE = re.compile(r"[ ]{2,}")
DOUBLE_HYPHEN_RE = re.compile(r"--")
TRIPLE_DOT_RE = re.compile(r"\.{3,}")


def detect_stanzas(text: str) -> List[str]:
    """Split verse into stanzas separated by one or more blank lines."""
    stanzas: List[str] = []
    current: List[str] = []
    for line in text.split("\n"):
        if line.strip():
            current.append(line)
        elif current:
            stanzas.append("\n".join(current))
            current = []
    if current:
        stanzas.append("\n".join(current))
    return stanzas


def processing_stats(
    original: str | None,
    processed: str | None,
    settings: ClassifierSettings | None = None,
) -> ProcessingStats:
    """Count the patterns in the original text that the rules target."""
    original = original or ""
    processed = processed or ""
    is_poetry = classify(original, settings).is_poetry
    return ProcessingStats(
        original_length=len(original),
        processed_length=len(processed),
        is_poetry=is_poetry,
        multi_space_count=len(MULTI_SPACE_RE.findall(original)),
        double_hyphen_count=len(DOUBLE_HYPHEN_RE.findall(original)),
        triple_dot_count=len(TRIPLE_DOT_RE.findall(original)),
        stanza_count=len(detect_stanzas(original)) if is_poetry else None,
    )
