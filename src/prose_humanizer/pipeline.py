from __future__ import annotations

import logging
import random
import re
from typing import Tuple

from .composition import (
    soften_absolutes,
    strip_stock_openers,
    vary_punctuation,
    weave_lengths,
)
from .config import RUNAWAY_SENTENCE_CHARS, RewriteConfig
from .lexical import LEXICAL_TRANSFORMS
from .rules import SentenceTransform, run_transforms
from .sampling import make_rng
from .segmentation import (
    join_paragraphs,
    join_sentences,
    split_paragraphs,
    split_sentences,
)
from .structural import STRUCTURAL_TRANSFORMS
from .textutils import normalize_control_whitespace, tidy
from .tokenization import cap_to_words, word_count

logger = logging.getLogger(__name__)

SENTENCE_TRANSFORMS: Tuple[SentenceTransform, ...] = (
    (SentenceTransform("strip-stock-opener", lambda s, c, r: strip_stock_openers(s)),)
    + LEXICAL_TRANSFORMS
    + STRUCTURAL_TRANSFORMS
    + (
        SentenceTransform("punctuation", vary_punctuation),
        SentenceTransform("hedging", soften_absolutes),
    )
)

# A sentence-like run (parenthesised asides may hold stops) plus its trailing gap.
RUNAWAY_RE = re.compile(r"(?:[^.!?\n(]|\([^)\n]*\))+[.!?]+[ \t]+(?=\S)")


def rewrite_sentence(sentence: str, creativity: float, rng: random.Random) -> str:
    """Run every sentence transform in order and tidy the result."""
    return tidy(run_transforms(SENTENCE_TRANSFORMS, sentence, creativity, rng))


def rewrite_paragraph(paragraph: str, creativity: float, rng: random.Random) -> str:
    """Rewrite one paragraph; blank paragraphs are returned as they came."""
    if not paragraph.strip():
        return paragraph
    sentences = weave_lengths(split_sentences(paragraph))
    rewritten = []
    for sentence in sentences:
        result = rewrite_sentence(sentence, creativity, rng)
        # A sentence that was only a stock opener leaves bare punctuation.
        if result and (word_count(result) or not word_count(sentence)):
            rewritten.append(result)
    return tidy(join_sentences(rewritten))


def break_runaway_sentences(text: str, max_chars: int = RUNAWAY_SENTENCE_CHARS) -> str:
    """Start a new paragraph after any sentence longer than max_chars."""

    def _replace(match: re.Match[str]) -> str:
        run = match.group(0)
        if len(run.rstrip()) > max_chars:
            return run.rstrip() + "\n\n"
        return run

    return RUNAWAY_RE.sub(_replace, text)


def rewrite(
    text: str,
    config: RewriteConfig | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Rewrite text to change its surface features while keeping its meaning.

    The input is capped to config.word_cap words before anything else runs.
    Pass a seeded generator (see make_rng) to make the output reproducible.
    """
    if config is None:
        config = RewriteConfig()
    if rng is None:
        rng = make_rng()

    stripped = text.strip()
    capped = cap_to_words(stripped, config.word_cap)
    if len(capped) < len(stripped):
        logger.debug("Input truncated to %d words", config.word_cap)
    # Normalizing can surface new tokens (fullwidth letters), so cap again.
    normalized = cap_to_words(normalize_control_whitespace(capped), config.word_cap)

    paragraphs = split_paragraphs(normalized)
    rewritten = [
        rewrite_paragraph(paragraph, config.creativity, rng) for paragraph in paragraphs
    ]
    output = tidy(break_runaway_sentences(join_paragraphs(p for p in rewritten if p)))
    logger.info(
        "Rewrote %d words in %d paragraphs (creativity=%.2f) -> %d words",
        word_count(capped),
        len(paragraphs),
        config.creativity,
        word_count(output),
    )
    return output
