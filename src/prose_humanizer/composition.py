from __future__ import annotations

import random
import re
from typing import List, Sequence, Tuple

from .config import (
    EM_DASH_BASE_PROB,
    EM_DASH_CREATIVITY_SCALE,
    HEDGE_BASE_PROB,
    HEDGE_CREATIVITY_SCALE,
    LONG_SENTENCE_TOKENS,
    SERIAL_COMMA_BASE_PROB,
    SERIAL_COMMA_CREATIVITY_SCALE,
    SHORT_SENTENCE_TOKENS,
    scaled_probability,
)
from .lexicon import HEDGES, SPLIT_CONJUNCTIONS, STOCK_OPENERS
from .sampling import chance
from .textutils import match_case, tidy
from .tokenization import word_count

SPLIT_POINT_RE = re.compile(
    r",|\b(?:" + "|".join(SPLIT_CONJUNCTIONS) + r")\b", re.IGNORECASE
)
RELATIVE_COMMA_RE = re.compile(r", (which|who)\b", re.IGNORECASE)
COMMA_AND_RE = re.compile(r", and\b", re.IGNORECASE)
HEDGE_RE = re.compile(
    r"\b(" + "|".join(HEDGES) + r")\b", re.IGNORECASE | re.ASCII
)
STOCK_OPENER_RES: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(r"^\s*" + r"\s+".join(opener.split()) + r"\b\s*,?\s*", re.IGNORECASE)
    for opener in STOCK_OPENERS
)

_TERMINATORS = (".", "!", "?")


def weave_lengths(sentences: Sequence[str]) -> List[str]:
    """
    Even out a paragraph's rhythm.

    Long sentences are split in two, and short ones are folded into the
    sentence before them. A short opening sentence has nothing to merge into,
    so it stays on its own.
    """
    woven: List[str] = []
    for sentence in sentences:
        length = word_count(sentence)
        if length > LONG_SENTENCE_TOKENS:
            woven.extend(split_long_sentence(sentence))
            continue
        if length < SHORT_SENTENCE_TOKENS and woven:
            woven[-1] = tidy(woven[-1] + " " + sentence)
        else:
            woven.append(sentence)
    return woven


def split_long_sentence(sentence: str) -> List[str]:
    """Split at the first comma or conjunction, else near the midpoint."""
    for match in SPLIT_POINT_RE.finditer(sentence):
        head = sentence[: match.start()]
        # A comma is dropped; a conjunction opens the second sentence.
        if match.group(0) == ",":
            tail = sentence[match.end() :]
        else:
            tail = sentence[match.start() :]
        if word_count(head) and word_count(tail):
            return [_close_sentence(head), tidy(tail)]

    midpoint = len(sentence) // 2
    cut = sentence.find(" ", midpoint)
    if cut == -1:
        cut = sentence.rfind(" ", 0, midpoint)
    if cut <= 0:
        cut = midpoint
    if cut == 0:
        return [sentence]
    return [_close_sentence(sentence[:cut]), tidy(sentence[cut:])]


def vary_punctuation(text: str, creativity: float, rng: random.Random) -> str:
    """Swap some relative-clause commas for dashes and drop some serial commas."""
    if RELATIVE_COMMA_RE.search(text) and chance(
        rng, scaled_probability(EM_DASH_BASE_PROB, EM_DASH_CREATIVITY_SCALE, creativity)
    ):
        text = RELATIVE_COMMA_RE.sub(r" — \1", text)
    if COMMA_AND_RE.search(text) and chance(
        rng,
        scaled_probability(
            SERIAL_COMMA_BASE_PROB, SERIAL_COMMA_CREATIVITY_SCALE, creativity
        ),
    ):
        text = COMMA_AND_RE.sub(lambda m: " " + m.group(0)[2:], text)
    return text


def soften_absolutes(text: str, creativity: float, rng: random.Random) -> str:
    """Replace over-certain words with hedged ones, one draw per occurrence."""
    probability = scaled_probability(HEDGE_BASE_PROB, HEDGE_CREATIVITY_SCALE, creativity)

    def _replace(match: re.Match[str]) -> str:
        word = match.group(0)
        if not chance(rng, probability):
            return word
        return match_case(word, HEDGES[word.lower()])

    return HEDGE_RE.sub(_replace, text)


def strip_stock_openers(text: str) -> str:
    """Remove discourse markers such as 'In conclusion,' from the start."""
    for pattern in STOCK_OPENER_RES:
        text = pattern.sub("", text, count=1)
    return text


def _close_sentence(fragment: str) -> str:
    closed = fragment.rstrip(" ,;:")
    if not closed.endswith(_TERMINATORS):
        closed += "."
    return tidy(closed)
