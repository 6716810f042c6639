import random

import pytest


class AlwaysRandom(random.Random):
    """Every chance() succeeds and pick() returns the first option."""

    def random(self) -> float:
        return 0.0

    def randrange(self, *args, **kwargs) -> int:  # type: ignore[override]
        return 0


class NeverRandom(random.Random):
    """Every chance() fails."""

    def random(self) -> float:
        return 0.999999


@pytest.fixture
def always_rng() -> random.Random:
    return AlwaysRandom()


@pytest.fixture
def never_rng() -> random.Random:
    return NeverRandom()
