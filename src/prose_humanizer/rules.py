from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterable

SentenceRewrite = Callable[[str, float, random.Random], str]


def _always(creativity: float) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class SentenceTransform:
    """A named sentence rewrite plus the creativity gate that enables it."""

    name: str
    apply: SentenceRewrite
    enabled: Callable[[float], bool] = _always

    def __call__(self, sentence: str, creativity: float, rng: random.Random) -> str:
        if not self.enabled(creativity):
            return sentence
        return self.apply(sentence, creativity, rng)


def run_transforms(
    transforms: Iterable[SentenceTransform],
    sentence: str,
    creativity: float,
    rng: random.Random,
) -> str:
    """Apply transforms in order, feeding each the previous output."""
    for transform in transforms:
        sentence = transform(sentence, creativity, rng)
    return sentence
