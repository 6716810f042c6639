from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def make_rng(seed: int | None = None) -> random.Random:
    """Return a private generator; pass a seed for reproducible rewrites."""
    return random.Random(seed)


def chance(rng: random.Random, probability: float) -> bool:
    """Draw once from rng and return True with the given probability."""
    return rng.random() < clamp01(probability)


def pick(rng: random.Random, options: Sequence[T]) -> T:
    return options[rng.randrange(len(options))]
