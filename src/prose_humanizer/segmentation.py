from __future__ import annotations

import re
from typing import Iterable, List

PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")
SENTENCE_BOUNDARY_RE = re.compile(r"([.!?]+)\s+")
_WHITESPACE_RE = re.compile(r"\s+")


def split_paragraphs(text: str) -> List[str]:
    """Split text on runs of two or more newlines."""
    return PARAGRAPH_BREAK_RE.split(text.replace("\r\n", "\n"))


def join_paragraphs(paragraphs: Iterable[str]) -> str:
    return "\n\n".join(paragraphs)


def split_sentences(paragraph: str) -> List[str]:
    """
    Split a paragraph into sentences using terminal punctuation runs.

    Punctuation stays attached to the sentence it closes. A paragraph without
    any boundary comes back as a single sentence, and a blank paragraph is
    returned untouched.
    """
    if not paragraph.strip():
        return [paragraph]
    normalized = _WHITESPACE_RE.sub(" ", paragraph)
    pieces = SENTENCE_BOUNDARY_RE.split(normalized)
    sentences: List[str] = []
    for idx in range(0, len(pieces), 2):
        punct = pieces[idx + 1] if idx + 1 < len(pieces) else ""
        sentence = (pieces[idx] + punct).strip()
        if sentence:
            sentences.append(sentence)
    return sentences or [paragraph.strip()]


def join_sentences(sentences: Iterable[str]) -> str:
    return " ".join(sentences)
