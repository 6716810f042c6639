"""
Static word tables shared by the rewriter and the scanner.

Everything here is built once at import time and exposed through read-only
containers (tuples, frozensets and mapping proxies).
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Tuple

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "if", "then", "when", "while",
        "of", "to", "in", "on", "for", "as", "by", "at", "from", "with",
        "about", "into", "over", "after", "before", "between", "through",
        "during", "above", "below", "up", "down", "out", "off", "again",
        "further", "here", "there", "all", "any", "both", "each", "few",
        "more", "most", "other", "some", "such", "no", "nor", "not", "only",
        "own", "same", "so", "than", "too", "very", "can", "will", "just",
        "should", "now", "is", "am", "are", "was", "were", "be", "been",
        "being", "it", "its", "they", "them", "their", "we", "our", "you",
        "your", "i", "he", "him", "his", "she", "her", "hers", "this", "that",
        "these", "those",
    }
)

STOCK_OPENERS: Tuple[str, ...] = (
    "in conclusion",
    "in summary",
    "in addition",
    "moreover",
    "furthermore",
    "overall",
    "to conclude",
    "to summarize",
    "additionally",
    "as a result",
    "therefore",
    "however",
)

SIMPLIFICATIONS: Mapping[str, str] = MappingProxyType(
    {
        "approximately": "about",
        "numerous": "many",
        "sufficient": "enough",
        "facilitate": "help",
        "subsequently": "later",
        "prior": "before",
        "subsequent": "after",
        "acquire": "get",
        "purchase": "buy",
        "demonstrate": "show",
        "utilize": "use",
        "commence": "begin",
        "conclude": "finish",
        "objective": "goal",
        "objectives": "goals",
        "methodology": "method",
        "methodologies": "methods",
        "endeavor": "effort",
        "attempt": "try",
        "therefore": "so",
        "however": "but",
        "moreover": "also",
        "furthermore": "also",
        "consequently": "so",
        "regarding": "about",
        "obtain": "get",
        "assist": "help",
        "maintain": "keep",
        "ensure": "make sure",
        "favorable": "good",
        "feasible": "possible",
        "leverage": "use",
        "indicates": "shows",
        "illustrate": "show",
        "aforementioned": "mentioned",
        "optimal": "best possible",
        "paramount": "most important",
        "ascertain": "find out",
        "mitigate": "reduce",
        "explicate": "explain",
        "explicates": "explains",
        "explicated": "explained",
        "comprehension": "understanding",
        "individuals": "people",
        "components": "parts",
        "implementation": "application",
        "implement": "apply",
        "prioritize": "focus on",
        "adequate": "enough",
        "insufficient": "not enough",
        "nevertheless": "even so",
        "notwithstanding": "despite",
    }
)

SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "important": ("crucial", "vital", "essential", "significant", "key"),
        "advantage": ("benefit", "upside", "plus"),
        "disadvantage": ("drawback", "downside", "limitation"),
        "impact": ("effect", "influence", "reach"),
        "improve": ("enhance", "boost", "strengthen", "refine"),
        "improvement": ("enhancement", "gain", "upgrade", "advance"),
        "show": ("reveal", "indicate", "demonstrate", "display", "exhibit"),
        "result": ("outcome", "effect", "consequence", "upshot"),
        "issue": ("problem", "challenge", "concern", "difficulty"),
        "help": ("aid", "assist", "support", "enable"),
        "build": ("create", "develop", "construct", "form"),
        "create": ("build", "produce", "craft", "form"),
        "use": ("apply", "employ"),
        "clear": ("evident", "apparent", "plain", "obvious"),
        "choose": ("select", "pick", "opt for", "decide on"),
        "complex": ("complicated", "intricate", "multi-layered"),
        "simple": ("straightforward", "basic", "plain"),
        "common": ("typical", "usual", "frequent", "widespread"),
        "rare": ("uncommon", "infrequent", "scarce"),
        "begin": ("start", "kick off"),
        "end": ("finish", "wrap up", "conclude"),
        "explain": ("clarify", "break down", "unpack"),
        "reason": ("cause", "basis", "ground"),
        "evidence": ("proof", "support", "documentation"),
        "goal": ("aim", "purpose", "target", "objective"),
        "change": ("alter", "modify", "shift", "adjust"),
        "effective": ("workable", "practical", "efficient"),
        "efficient": ("effective", "productive"),
        "analyze": ("examine", "study", "inspect", "evaluate"),
        "argue": ("contend", "maintain", "claim", "assert"),
        "because": ("since",),
    }
)


def _phrase(words: str) -> re.Pattern[str]:
    return re.compile(r"\b" + r"\s+".join(words.split()) + r"\b", re.IGNORECASE)


# Longest phrases first so shorter patterns never eat part of a longer one.
PHRASE_PATTERNS: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (_phrase("it is important to note that"), "note that"),
    (_phrase("it should be noted that"), "note that"),
    (_phrase("plays a significant role in"), "matters for"),
    (_phrase("due to the fact that"), "because"),
    (_phrase("in the context of"), "in"),
    (_phrase("a wide range of"), "many"),
    (_phrase("with respect to"), "about"),
    (_phrase("in order to"), "to"),
    (_phrase("as a result"), "so"),
    (_phrase("by means of"), "with"),
    (_phrase("in light of"), "considering"),
)

HEDGES: Mapping[str, str] = MappingProxyType(
    {
        "always": "often",
        "never": "rarely",
        "proves": "suggests",
        "perfect": "great",
        "flawless": "strong",
        "undeniable": "clear",
        "impossible": "very unlikely",
    }
)

FILLER_THAT_VERBS: Tuple[str, ...] = (
    "say", "says", "said",
    "believe", "believes", "believed",
    "think", "thinks", "thought",
    "feel", "feels", "felt",
    "argue", "argues", "argued",
    "note", "notes", "noted",
)

SPLIT_CONJUNCTIONS: Tuple[str, ...] = (
    "and", "but", "because", "which", "so", "although", "when", "if",
)

REORDER_SUBORDINATORS: Tuple[str, ...] = ("because", "when", "if", "although")

STEM_SUFFIXES: Tuple[str, ...] = ("ing", "ed", "ly", "ment", "tion", "s")


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS
