"""
prose_humanizer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import (
    HumanizerConfig,
    RewriteConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .models import ScanResult, SentenceCue
from .pipeline import rewrite
from .sampling import make_rng
from .scoring import scan
from .tokenization import cap_to_words, word_count

__all__ = [
    "HumanizerConfig",
    "RewriteConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ScanResult",
    "SentenceCue",
    "rewrite",
    "scan",
    "make_rng",
    "cap_to_words",
    "word_count",
]

__version__ = "0.1.0"
