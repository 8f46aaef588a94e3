from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Classification:
    """Verse/prose decision plus the heuristic score that produced it."""

    is_poetry: bool
    score: int = 0
    heuristics: tuple[str, ...] = ()


@dataclass(slots=True)
class FormattedRun:
    """A run of text sharing one set of character style attributes."""

    text: str
    style: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class FormattedParagraph:
    """A paragraph as a sequence of runs plus paragraph-level attributes."""

    runs: list[FormattedRun] = field(default_factory=list)
    style: str = "normal"
    alignment: str | None = None
    indent: float | None = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True, slots=True)
class ProcessingStats:
    """Diagnostic counts describing an original text and its processed form."""

    original_length: int
    processed_length: int
    is_poetry: bool
    multi_space_count: int
    double_hyphen_count: int
    triple_dot_count: int
    stanza_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return dict(asdict(self))
