from __future__ import annotations

import re
from typing import List

from .models import Token

TOKEN_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9'-]*")


def tokenize_words(text: str) -> List[Token]:
    """Split text into ASCII word tokens, keeping apostrophes and hyphens."""
    return [
        Token(text=match.group(), start_char=match.start(), end_char=match.end())
        for match in TOKEN_PATTERN.finditer(text)
    ]


def word_count(text: str) -> int:
    return sum(1 for _ in TOKEN_PATTERN.finditer(text))


def cap_to_words(text: str, max_words: int) -> str:
    """
    Truncate text after its max_words-th word.

    The cut always lands on the end of a token, so words are never split.
    Text with at most max_words words is returned unchanged.
    """
    if not text or max_words <= 0:
        return ""
    tokens = tokenize_words(text)
    if len(tokens) <= max_words:
        return text
    return text[: tokens[max_words - 1].end_char]
