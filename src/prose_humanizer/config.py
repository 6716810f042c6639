from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .sampling import clamp01

DEFAULT_CREATIVITY = 0.95
DEFAULT_WORD_CAP = 1000

# Probability of replacing an eligible token that has synonyms.
SYNONYM_BASE_PROB = 0.72
SYNONYM_CREATIVITY_SCALE = 0.25

POSSESSIVE_BASE_PROB = 0.35
POSSESSIVE_CREATIVITY_SCALE = 0.3

EM_DASH_BASE_PROB = 0.25
EM_DASH_CREATIVITY_SCALE = 0.4
SERIAL_COMMA_BASE_PROB = 0.2
SERIAL_COMMA_CREATIVITY_SCALE = 0.3

HEDGE_BASE_PROB = 0.2
HEDGE_CREATIVITY_SCALE = 0.7

# Optional transforms fire only above these creativity levels.
THERE_IS_MIN_CREATIVITY = 0.4
CLAUSE_REORDER_MIN_CREATIVITY = 0.35

LONG_SENTENCE_TOKENS = 28
SHORT_SENTENCE_TOKENS = 6
RUNAWAY_SENTENCE_CHARS = 220


def scaled_probability(base: float, scale: float, creativity: float) -> float:
    """Return base + scale * creativity, clamped into [0, 1]."""
    return clamp01(base + scale * clamp01(creativity))


@dataclass(slots=True)
class RewriteConfig:
    """Per-call rewrite settings."""

    creativity: float = DEFAULT_CREATIVITY
    word_cap: int = DEFAULT_WORD_CAP

    def __post_init__(self) -> None:
        self.creativity = clamp01(self.creativity)
        if int(self.word_cap) <= 0:
            raise ValueError(f"word_cap must be positive, got {self.word_cap!r}.")
        self.word_cap = int(self.word_cap)


@dataclass(slots=True)
class HumanizerConfig:
    """Configuration options for the command line and library helpers."""

    rewrite: RewriteConfig = field(default_factory=RewriteConfig)
    seed: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(HumanizerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "rewrite" in data:
        rewrite_value = data["rewrite"]
        if isinstance(rewrite_value, RewriteConfig):
            kwargs["rewrite"] = rewrite_value
        elif isinstance(rewrite_value, Mapping):
            kwargs["rewrite"] = _build_rewrite_config(rewrite_value)
        else:
            kwargs.pop("rewrite")
    return kwargs


def _build_rewrite_config(data: Mapping[str, Any]) -> RewriteConfig:
    rewrite_allowed = {field.name for field in fields(RewriteConfig)}
    filtered = {key: data[key] for key in data if key in rewrite_allowed}
    return RewriteConfig(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> HumanizerConfig:
    """Build a HumanizerConfig from a dictionary-like input."""
    if data is None:
        return HumanizerConfig()
    return HumanizerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> HumanizerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> HumanizerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return HumanizerConfig()
    return config_from_yaml(path)
