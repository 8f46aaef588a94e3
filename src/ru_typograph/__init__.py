"""
ru_typograph package exports the typography engine for library consumers.
"""

from __future__ import annotations

from .classifier import classify
from .config import (
    ClassifierSettings,
    TypographConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .models import (
    Classification,
    Document,
    FormattedParagraph,
    FormattedRun,
    ProcessingStats,
)
from .pipeline import (
    process,
    process_document,
    process_poetry,
    process_prose,
    process_with_formatting,
)
from .protection import MarkerCollisionError
from .stats import detect_stanzas, processing_stats

__all__ = [
    "Classification",
    "ClassifierSettings",
    "Document",
    "FormattedParagraph",
    "FormattedRun",
    "MarkerCollisionError",
    "ProcessingStats",
    "TypographConfig",
    "classify",
    "config_from_dict",
    "config_from_yaml",
    "detect_stanzas",
    "load_config",
    "process",
    "process_document",
    "process_poetry",
    "process_prose",
    "process_with_formatting",
    "processing_stats",
]

__version__ = "0.1.0"
