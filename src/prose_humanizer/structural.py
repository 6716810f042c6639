from __future__ import annotations

import random
import re
from typing import Tuple

from .config import (
    CLAUSE_REORDER_MIN_CREATIVITY,
    POSSESSIVE_BASE_PROB,
    POSSESSIVE_CREATIVITY_SCALE,
    THERE_IS_MIN_CREATIVITY,
    scaled_probability,
)
from .lexicon import FILLER_THAT_VERBS, REORDER_SUBORDINATORS, is_stop_word
from .rules import SentenceTransform, run_transforms
from .sampling import chance
from .textutils import capitalize_first

FILLER_THAT_RE = re.compile(
    r"\b(" + "|".join(FILLER_THAT_VERBS) + r")\s+that\b", re.IGNORECASE
)
# Only "<be> <verb>ed by <Capitalized Agent>"; anything looser is left alone.
PASSIVE_RE = re.compile(
    r"\b(?:was|were|is|are|been|being)\s+(\w+?ed)\s+by\s+"
    r"([A-Z][\w-]*(?:\s+[A-Z][\w-]*)*)\b"
)
THERE_IS_RE = re.compile(r"^(\s*)there\s+(?:is|are)\s+([a-z][^.!?]*)", re.IGNORECASE)
CLAUSE_REORDER_RE = re.compile(
    r"(.+?),\s*(" + "|".join(REORDER_SUBORDINATORS) + r")\s+([^,.!?]{3,})([.!?])",
    re.IGNORECASE,
)
POSSESSIVE_RE = re.compile(r"\b[Tt]he\s+([a-z]+)\s+of\s+([a-z][a-z-]*)\b")

MIN_REORDER_CLAUSE_WORDS = 3


def drop_filler_that(text: str) -> str:
    """'They said that it works' -> 'They said it works'."""
    return FILLER_THAT_RE.sub(lambda m: m.group(1), text)


def passive_to_active(text: str) -> str:
    """'was reviewed by Smith' -> 'Smith review'; only with a capitalized agent."""

    def _replace(match: re.Match[str]) -> str:
        verb_ed, agent = match.group(1), match.group(2)
        return f"{agent} {verb_ed[:-2]}"

    return PASSIVE_RE.sub(_replace, text)


def promote_there_is(text: str) -> str:
    """Drop a leading 'There is/are' and promote the rest of the clause."""

    def _replace(match: re.Match[str]) -> str:
        clause = match.group(2).strip()
        if not clause:
            return match.group(0)
        return match.group(1) + capitalize_first(clause)

    return THERE_IS_RE.sub(_replace, text)


def reorder_clauses(text: str) -> str:
    """'X, because Y.' -> 'Because Y, x.' when Y has at least three words."""

    def _replace(match: re.Match[str]) -> str:
        main, conj, clause, end = match.groups()
        if len(clause.split()) < MIN_REORDER_CLAUSE_WORDS:
            return match.group(0)
        lead = conj.lower().capitalize()
        return f"{lead} {clause.strip()}, {_demote_opening(main.strip())}{end}"

    return CLAUSE_REORDER_RE.sub(_replace, text)


def of_to_possessive(text: str, creativity: float, rng: random.Random) -> str:
    """'the opinion of experts' -> "experts' opinion", for some sentences."""
    if not POSSESSIVE_RE.search(text):
        return text
    probability = scaled_probability(
        POSSESSIVE_BASE_PROB, POSSESSIVE_CREATIVITY_SCALE, creativity
    )
    if not chance(rng, probability):
        return text

    def _replace(match: re.Match[str]) -> str:
        noun, owner = match.groups()
        if is_stop_word(owner):
            return match.group(0)
        marker = "'" if owner.endswith("s") else "'s"
        return f"{owner}{marker} {noun}"

    return POSSESSIVE_RE.sub(_replace, text)


STRUCTURAL_TRANSFORMS: Tuple[SentenceTransform, ...] = (
    SentenceTransform("filler-that", lambda s, c, r: drop_filler_that(s)),
    SentenceTransform("passive-to-active", lambda s, c, r: passive_to_active(s)),
    SentenceTransform(
        "there-is",
        lambda s, c, r: promote_there_is(s),
        enabled=lambda c: c > THERE_IS_MIN_CREATIVITY,
    ),
    SentenceTransform(
        "clause-reorder",
        lambda s, c, r: reorder_clauses(s),
        enabled=lambda c: c > CLAUSE_REORDER_MIN_CREATIVITY,
    ),
    SentenceTransform("possessive", of_to_possessive),
)


def rewrite_structure(sentence: str, creativity: float, rng: random.Random) -> str:
    return run_transforms(STRUCTURAL_TRANSFORMS, sentence, creativity, rng)


def _demote_opening(main: str) -> str:
    # "The", "We", "It" move mid-sentence; "I" and names keep their capital.
    first, _, rest = main.partition(" ")
    if first == "I" or not is_stop_word(first):
        return main
    if first[:1].isupper() and first[1:] == first[1:].lower():
        return first.lower() + (" " + rest if rest else "")
    return main
