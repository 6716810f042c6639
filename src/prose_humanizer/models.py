from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Token:
    """A word and where it sits in the source text (end offset exclusive)."""

    text: str
    start_char: int
    end_char: int


@dataclass(slots=True)
class SentenceMetrics:
    """Surface statistics for a single sentence."""

    length: int
    avg_word_len: float
    commas: int
    has_stock_opener: bool
    unique_stems: int
    content_words: int

    @property
    def uniqueness(self) -> float:
        """Distinct stems over content words (1.0 when there are none)."""
        if not self.content_words:
            return 1.0
        return self.unique_stems / self.content_words


@dataclass(slots=True)
class DocumentFeatures:
    """Document-level aggregates of sentence metrics."""

    num_sentences: int
    length_cov: float
    mean_uniqueness: float
    mean_word_len: float
    mean_commas: float
    opener_fraction: float


@dataclass(slots=True)
class SentenceCue:
    """Cue strength attached to one scanned sentence."""

    sentence: str
    cue_strength: float


@dataclass(slots=True)
class ScanResult:
    """AI-likelihood estimate for a document."""

    ai_score: int
    human_score: int
    per_sentence_cues: list[SentenceCue] = field(default_factory=list)
    threshold: float = 0.0

    def is_ai_like(self, cue: SentenceCue) -> bool:
        return cue.cue_strength > self.threshold

    def flagged_sentences(self) -> list[str]:
        """Sentences whose cue strength exceeds the document threshold."""
        return [cue.sentence for cue in self.per_sentence_cues if self.is_ai_like(cue)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ai_score": self.ai_score,
            "human_score": self.human_score,
            "threshold": self.threshold,
            "per_sentence_cues": [
                {
                    "sentence": cue.sentence,
                    "cue_strength": cue.cue_strength,
                    "ai_like": self.is_ai_like(cue),
                }
                for cue in self.per_sentence_cues
            ],
        }
