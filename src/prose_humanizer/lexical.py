from __future__ import annotations

import random
import re
from typing import Tuple

from .config import SYNONYM_BASE_PROB, SYNONYM_CREATIVITY_SCALE, scaled_probability
from .lexicon import PHRASE_PATTERNS, SIMPLIFICATIONS, SYNONYMS, is_stop_word
from .rules import SentenceTransform, run_transforms
from .sampling import chance, pick
from .textutils import match_case
from .tokenization import TOKEN_PATTERN

_SIMPLIFY_RE = re.compile(
    r"\b("
    + "|".join(sorted((re.escape(key) for key in SIMPLIFICATIONS), key=len, reverse=True))
    + r")\b",
    re.IGNORECASE | re.ASCII,
)
_ALPHA_WORD_RE = re.compile(r"[A-Za-z]+(?:['-][A-Za-z]+)*")
_PROPER_NOUN_RE = re.compile(r"[A-Z][a-z]+")
_URL_SYMBOLS = frozenset("/@_#%")


def swap_phrases(text: str) -> str:
    """Replace wordy stock phrases with shorter equivalents."""
    for pattern, replacement in PHRASE_PATTERNS:
        text = pattern.sub(lambda m, rep=replacement: match_case(m.group(0), rep), text)
    return text


def simplify_words(text: str) -> str:
    """Swap formal vocabulary for plain words, keeping the source case."""

    def _replace(match: re.Match[str]) -> str:
        word = match.group(0)
        return match_case(word, SIMPLIFICATIONS[word.lower()])

    return _SIMPLIFY_RE.sub(_replace, text)


def synonym_probability(creativity: float) -> float:
    return scaled_probability(SYNONYM_BASE_PROB, SYNONYM_CREATIVITY_SCALE, creativity)


def is_synonym_eligible(text: str, start: int, end: int) -> bool:
    """
    Decide whether the token at text[start:end] may be swapped for a synonym.

    Stop words, tokens with digits, tokens glued to URL-ish symbols and
    capitalized words away from a sentence start are all left alone.
    """
    token = text[start:end]
    if not _ALPHA_WORD_RE.fullmatch(token):
        return False
    if is_stop_word(token):
        return False
    if _looks_like_reference(_surrounding_chunk(text, start, end)):
        return False
    if _PROPER_NOUN_RE.fullmatch(token) and not _at_sentence_start(text, start):
        return False
    return True


def apply_synonyms(text: str, creativity: float, rng: random.Random) -> str:
    """Replace eligible words with a random synonym, one draw per occurrence."""
    probability = synonym_probability(creativity)

    def _replace(match: re.Match[str]) -> str:
        raw = match.group(0)
        options = SYNONYMS.get(raw.lower())
        if not options or not is_synonym_eligible(text, match.start(), match.end()):
            return raw
        if not chance(rng, probability):
            return raw
        return match_case(raw, pick(rng, options))

    return TOKEN_PATTERN.sub(_replace, text)


LEXICAL_TRANSFORMS: Tuple[SentenceTransform, ...] = (
    SentenceTransform("phrase-swap", lambda s, c, r: swap_phrases(s)),
    SentenceTransform("simplify", lambda s, c, r: simplify_words(s)),
    SentenceTransform("synonyms", apply_synonyms),
)


def rewrite_lexical(sentence: str, creativity: float, rng: random.Random) -> str:
    return run_transforms(LEXICAL_TRANSFORMS, sentence, creativity, rng)


def _surrounding_chunk(text: str, start: int, end: int) -> str:
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[start:end]


def _looks_like_reference(chunk: str) -> bool:
    if any(symbol in chunk for symbol in _URL_SYMBOLS):
        return True
    return ":" in chunk.rstrip(":")


def _at_sentence_start(text: str, start: int) -> bool:
    before = text[:start].rstrip(" \t\n\"'([“‘")
    return not before or before[-1] in ".!?"
