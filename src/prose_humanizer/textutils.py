from __future__ import annotations

import re
import unicodedata

_SPACE_BEFORE_PUNCT_RE = re.compile(r"[ \t]+([.,!?;:])")
_REPEATED_SPACE_RE = re.compile(r"[ \t]{2,}")
_SENTENCE_START_RE = re.compile(r"(^|[.!?]\s+)([a-z])")
_CONTROL_SPACE_RE = re.compile(r"[\r\t\f\v]+")
_INDENT_AFTER_NEWLINE_RE = re.compile(r"\n[ \t]+")


def capitalize_first(value: str) -> str:
    """Upper-case the first character, leaving the rest alone."""
    return value[:1].upper() + value[1:] if value else value


def match_case(source: str, replacement: str) -> str:
    """
    Give replacement the case pattern of source.

    ALL-CAPS sources yield an upper-cased replacement, a leading capital yields
    a capitalized replacement, anything else returns replacement as-is.
    """
    if not source or not replacement:
        return replacement
    letters = [ch for ch in source if ch.isalpha()]
    if len(letters) > 1 and all(ch.isupper() for ch in letters):
        return replacement.upper()
    if source[0].isupper():
        return capitalize_first(replacement)
    return replacement


def normalize_control_whitespace(text: str) -> str:
    """Fold stray control characters into plain spaces, keeping newlines."""
    normalized = unicodedata.normalize("NFKC", text)
    normalized = normalized.replace("\r\n", "\n")
    normalized = _CONTROL_SPACE_RE.sub(" ", normalized)
    normalized = "".join(
        ch
        for ch in normalized
        if ch == "\n" or unicodedata.category(ch) not in {"Cc", "Cf"}
    )
    return _INDENT_AFTER_NEWLINE_RE.sub("\n", normalized)


def tidy(text: str) -> str:
    """Fix punctuation spacing, collapse spaces and re-capitalize sentences."""
    tidied = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text.strip())
    tidied = _REPEATED_SPACE_RE.sub(" ", tidied)
    tidied = _SENTENCE_START_RE.sub(
        lambda m: m.group(1) + m.group(2).upper(), tidied
    )
    return tidied.strip()
