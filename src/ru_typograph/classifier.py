from __future__ import annotations

import logging
import re
import statistics
from dataclasses import dataclass
from typing import Callable

from .config import ClassifierSettings
from .models import Classification

logger = logging.getLogger(__name__)

INDENT_RE = re.compile(r"(?:\s{2,}|\t)")
CAPITAL_RE = re.compile(r"[А-ЯЁA-Z]")


@dataclass(frozen=True, slots=True)
class BlockFeatures:
    """Line statistics of a text block that the heuristics score."""

    line_count: int
    mean_line_length: float
    break_ratio: float
    indented_share: float
    capitalized_share: float
    length_variance: float


Predicate = Callable[[BlockFeatures, ClassifierSettings], bool]

# (name, predicate, name of the ClassifierSettings weight field)
HEURISTICS: tuple[tuple[str, Predicate, str], ...] = (
    (
        "short_lines",
        lambda f, s: f.mean_line_length < s.max_mean_line_length,
        "short_lines_weight",
    ),
    (
        "dense_breaks",
        lambda f, s: f.break_ratio > s.min_break_ratio,
        "dense_breaks_weight",
    ),
    (
        "indented",
        lambda f, s: f.indented_share > s.min_indented_share,
        "indented_weight",
    ),
    (
        "capitalized",
        lambda f, s: f.capitalized_share > s.min_capitalized_share,
        "capitalized_weight",
    ),
    (
        "regular_rhythm",
        lambda f, s: f.length_variance < s.max_length_variance,
        "regular_rhythm_weight",
    ),
)


def split_lines(text: str) -> list[str]:
    """Return the non-blank lines of text, keeping their indentation."""
    return [line for line in text.split("\n") if line.strip()]


def compute_features(text: str) -> BlockFeatures:
    """Measure the statistics used by the verse heuristics."""
    lines = split_lines(text)
    if not lines:
        return BlockFeatures(0, 0.0, 0.0, 0.0, 0.0, 0.0)
    lengths = [len(line.strip()) for line in lines]
    word_count = len(text.split())
    line_breaks = text.count("\n")
    indented = sum(1 for line in lines if INDENT_RE.match(line))
    capitalized = sum(1 for line in lines if CAPITAL_RE.match(line.strip()))
    return BlockFeatures(
        line_count=len(lines),
        mean_line_length=float(statistics.mean(lengths)),
        break_ratio=line_breaks / word_count if word_count else 0.0,
        indented_share=indented / len(lines),
        capitalized_share=capitalized / len(lines),
        length_variance=float(statistics.pvariance(lengths)),
    )


def classify(
    text: str | None, settings: ClassifierSettings | None = None
) -> Classification:
    """Score text as verse or prose."""
    settings = settings or ClassifierSettings()
    features = compute_features(text or "")
    if features.line_count < settings.min_lines:
        return Classification(is_poetry=False)

    score = 0
    fired: list[str] = []
    for name, predicate, weight_field in HEURISTICS:
        if predicate(features, settings):
            score += getattr(settings, weight_field)
            fired.append(name)

    is_poetry = score >= settings.poetry_threshold
    logger.debug(
        "Classified %d lines: score=%d poetry=%s heuristics=%s",
        features.line_count,
        score,
        is_poetry,
        ",".join(fired) or "-",
    )
    return Classification(is_poetry=is_poetry, score=score, heuristics=tuple(fired))
