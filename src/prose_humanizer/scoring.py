from __future__ import annotations

import logging
import math
import re
import statistics
from typing import List, Sequence, Tuple

from .lexicon import STEM_SUFFIXES, STOCK_OPENERS, is_stop_word
from .models import DocumentFeatures, ScanResult, SentenceCue, SentenceMetrics
from .segmentation import split_paragraphs, split_sentences
from .tokenization import tokenize_words

logger = logging.getLogger(__name__)

STEM_RE = re.compile(r"(?:" + "|".join(STEM_SUFFIXES) + r")$")
OPENER_RES: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(r"^\s*" + r"\s+".join(opener.split()) + r"\b", re.IGNORECASE)
    for opener in STOCK_OPENERS
)

# Score weights and pivots.
COV_WEIGHT, COV_PIVOT = 45.0, 0.28
UNIQUENESS_WEIGHT, UNIQUENESS_PIVOT = 25.0, 0.58
OPENER_WEIGHT, OPENER_SCALE = 10.0, 4.0
WORD_LEN_WEIGHT, WORD_LEN_PIVOT, WORD_LEN_SPREAD = 10.0, 5.6, 2.2
COMMA_WEIGHT, COMMA_PIVOT, COMMA_SPREAD = 10.0, 0.8, 2.0

# Per-sentence cue strength.
CUE_LENGTH_SCALE = 25.0
CUE_WORD_LEN_PIVOT, CUE_WORD_LEN_WEIGHT = 5.5, 0.6
CUE_COMMA_LIMIT, CUE_COMMA_BONUS = 2, 0.8
CUE_OPENER_BONUS = 1.2
THRESHOLD_PERCENTILE = 0.6
SINGLE_SENTENCE_THRESHOLD = 0.75


def stem_token(token: str) -> str:
    """Crude stem: lower-case and strip one trailing suffix."""
    return STEM_RE.sub("", token.lower(), count=1)


def has_stock_opener(sentence: str) -> bool:
    return any(pattern.match(sentence) for pattern in OPENER_RES)


def sentence_metrics(sentence: str) -> SentenceMetrics:
    """Compute the surface statistics of one sentence."""
    tokens = [token.text for token in tokenize_words(sentence)]
    content = [token for token in tokens if not is_stop_word(token)]
    avg_word_len = sum(len(token) for token in tokens) / len(tokens) if tokens else 0.0
    return SentenceMetrics(
        length=len(tokens),
        avg_word_len=avg_word_len,
        commas=sentence.count(","),
        has_stock_opener=has_stock_opener(sentence),
        unique_stems=len({stem_token(word) for word in content}),
        content_words=len(content),
    )


def compute_document_features(metrics: Sequence[SentenceMetrics]) -> DocumentFeatures:
    """Aggregate sentence metrics across a document."""
    if not metrics:
        return DocumentFeatures(
            num_sentences=0,
            length_cov=0.0,
            mean_uniqueness=1.0,
            mean_word_len=0.0,
            mean_commas=0.0,
            opener_fraction=0.0,
        )
    lengths = [m.length for m in metrics]
    mean_length = statistics.mean(lengths)
    cov = statistics.pstdev(lengths) / mean_length if mean_length else 0.0
    return DocumentFeatures(
        num_sentences=len(metrics),
        length_cov=float(cov),
        mean_uniqueness=float(statistics.mean(m.uniqueness for m in metrics)),
        mean_word_len=float(statistics.mean(m.avg_word_len for m in metrics)),
        mean_commas=float(statistics.mean(m.commas for m in metrics)),
        opener_fraction=sum(1 for m in metrics if m.has_stock_opener) / len(metrics),
    )


def score_features(features: DocumentFeatures) -> int:
    """Combine document features into a 0-100 AI-likelihood score."""
    score = (
        COV_WEIGHT * max(0.0, COV_PIVOT - min(COV_PIVOT, features.length_cov))
        + UNIQUENESS_WEIGHT
        * max(0.0, UNIQUENESS_PIVOT - min(UNIQUENESS_PIVOT, features.mean_uniqueness))
        + OPENER_WEIGHT * min(1.0, features.opener_fraction * OPENER_SCALE)
        + WORD_LEN_WEIGHT
        * max(0.0, (features.mean_word_len - WORD_LEN_PIVOT) / WORD_LEN_SPREAD)
        + COMMA_WEIGHT * max(0.0, (features.mean_commas - COMMA_PIVOT) / COMMA_SPREAD)
    )
    # Round half up, then clamp.
    return max(0, min(100, math.floor(score + 0.5)))


def cue_strength(metrics: SentenceMetrics) -> float:
    """How strongly one sentence shows machine-like surface traits."""
    strength = max(0.0, metrics.length / CUE_LENGTH_SCALE)
    strength += (metrics.avg_word_len - CUE_WORD_LEN_PIVOT) * CUE_WORD_LEN_WEIGHT
    if metrics.commas > CUE_COMMA_LIMIT:
        strength += CUE_COMMA_BONUS
    if metrics.has_stock_opener:
        strength += CUE_OPENER_BONUS
    return strength


def cue_threshold(strengths: Sequence[float]) -> float:
    """60th-percentile cue strength; a lone sentence uses a fixed default."""
    if not strengths:
        return 0.0
    if len(strengths) == 1:
        return SINGLE_SENTENCE_THRESHOLD
    ordered = sorted(strengths)
    return ordered[math.floor(len(ordered) * THRESHOLD_PERCENTILE)]


def scan_sentences(text: str) -> List[str]:
    """All non-blank sentences of text, paragraph by paragraph."""
    return [
        sentence
        for paragraph in split_paragraphs(text)
        for sentence in split_sentences(paragraph)
        if sentence.strip()
    ]


def scan(text: str) -> ScanResult:
    """Estimate how machine-generated text sounds. Deterministic."""
    sentences = scan_sentences(text)
    if not sentences:
        return ScanResult(ai_score=0, human_score=100, per_sentence_cues=[], threshold=0.0)

    metrics = [sentence_metrics(sentence) for sentence in sentences]
    features = compute_document_features(metrics)
    ai_score = score_features(features)
    cues = [
        SentenceCue(sentence=sentence, cue_strength=cue_strength(m))
        for sentence, m in zip(sentences, metrics)
    ]
    threshold = cue_threshold([cue.cue_strength for cue in cues])
    logger.debug(
        "Scanned %d sentences: cov=%.3f uniq=%.3f ai=%d",
        features.num_sentences,
        features.length_cov,
        features.mean_uniqueness,
        ai_score,
    )
    return ScanResult(
        ai_score=ai_score,
        human_score=100 - ai_score,
        per_sentence_cues=cues,
        threshold=threshold,
    )
