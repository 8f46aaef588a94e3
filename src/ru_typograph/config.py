from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

# Classifier defaults. Each is independently tunable through ClassifierSettings.
MIN_LINES = 3
MAX_MEAN_LINE_LENGTH = 60.0
MIN_BREAK_RATIO = 0.1
MIN_INDENTED_SHARE = 0.3
MIN_CAPITALIZED_SHARE = 0.7
MAX_LENGTH_VARIANCE = 100.0
SHORT_LINES_WEIGHT = 2
DENSE_BREAKS_WEIGHT = 2
INDENTED_WEIGHT = 3
CAPITALIZED_WEIGHT = 1
REGULAR_RHYTHM_WEIGHT = 1
POETRY_THRESHOLD = 5

MODES = ("auto", "prose", "poetry")


@dataclass(slots=True)
class ClassifierSettings:
    """Thresholds and weights of the verse/prose heuristics."""

    min_lines: int = MIN_LINES
    max_mean_line_length: float = MAX_MEAN_LINE_LENGTH
    min_break_ratio: float = MIN_BREAK_RATIO
    min_indented_share: float = MIN_INDENTED_SHARE
    min_capitalized_share: float = MIN_CAPITALIZED_SHARE
    max_length_variance: float = MAX_LENGTH_VARIANCE
    short_lines_weight: int = SHORT_LINES_WEIGHT
    dense_breaks_weight: int = DENSE_BREAKS_WEIGHT
    indented_weight: int = INDENTED_WEIGHT
    capitalized_weight: int = CAPITALIZED_WEIGHT
    regular_rhythm_weight: int = REGULAR_RHYTHM_WEIGHT
    poetry_threshold: int = POETRY_THRESHOLD


@dataclass(slots=True)
class TypographConfig:
    """Configuration options for the typograph pipelines."""

    mode: str = "auto"
    bind_all_numbers: bool = True
    strip_trailing_blank_lines: bool = True
    log_level: str = "WARNING"
    classifier: ClassifierSettings = field(default_factory=ClassifierSettings)

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(
                f"Unknown mode '{self.mode}'. Expected one of: {', '.join(MODES)}."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TypographConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "classifier" in data:
        classifier_value = data["classifier"]
        if isinstance(classifier_value, ClassifierSettings):
            kwargs["classifier"] = classifier_value
        elif isinstance(classifier_value, Mapping):
            kwargs["classifier"] = _build_classifier_settings(classifier_value)
        else:
            kwargs.pop("classifier")
    return kwargs


def _build_classifier_settings(data: Mapping[str, Any]) -> ClassifierSettings:
    classifier_allowed = {field.name for field in fields(ClassifierSettings)}
    filtered = {key: data[key] for key in data if key in classifier_allowed}
    return ClassifierSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> TypographConfig:
    """Build a TypographConfig from a dictionary-like input."""
    if data is None:
        return TypographConfig()
    return TypographConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TypographConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TypographConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TypographConfig()
    return config_from_yaml(path)
