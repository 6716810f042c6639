import pytest

from prose_humanizer.models import ScanResult
from prose_humanizer.scoring import (
    SINGLE_SENTENCE_THRESHOLD,
    compute_document_features,
    cue_strength,
    scan,
    score_features,
    sentence_metrics,
    stem_token,
)

VARIED_TEXT = (
    "I ran. The dog barked at the mailman for nearly ten minutes straight. "
    "Why? Nobody knows."
)
ROBOTIC_SENTENCE = (
    "Moreover, the implementation demonstrates considerable organizational effectiveness."
)


def test_scan_empty_text():
    expected = ScanResult(ai_score=0, human_score=100, per_sentence_cues=[], threshold=0.0)
    assert scan("") == expected
    assert scan("   \n\n ") == expected


def test_stem_token_strips_one_suffix():
    assert stem_token("running") == "runn"
    assert stem_token("Quickly") == "quick"
    assert stem_token("statements") == "statement"
    assert stem_token("nation") == "na"


def test_sentence_metrics():
    metrics = sentence_metrics("In conclusion, the results, which were clear, matter.")
    assert metrics.length == 8
    assert metrics.commas == 3
    assert metrics.has_stock_opener is True
    assert metrics.content_words == 5
    assert metrics.uniqueness == pytest.approx(1.0)


def test_uniqueness_defaults_to_one_without_content_words():
    assert sentence_metrics("It is the.").uniqueness == 1.0


def test_scores_are_complementary_and_deterministic():
    for text in (VARIED_TEXT, ROBOTIC_SENTENCE, VARIED_TEXT + " " + ROBOTIC_SENTENCE):
        result = scan(text)
        assert result.ai_score + result.human_score == 100
        assert 0 <= result.ai_score <= 100
        assert scan(text) == result


def test_uniform_formal_text_scores_higher_than_varied_text():
    robotic = scan(" ".join([ROBOTIC_SENTENCE] * 4))
    varied = scan(VARIED_TEXT)
    assert varied.ai_score == 0
    assert varied.human_score == 100
    assert robotic.ai_score > varied.ai_score


def test_single_sentence_threshold():
    assert scan("Just one sentence here.").threshold == SINGLE_SENTENCE_THRESHOLD


def test_flagged_sentences_exceed_percentile_threshold():
    """Only cues above the 60th-percentile strength are flagged."""
    result = scan(VARIED_TEXT + " " + ROBOTIC_SENTENCE)
    strengths = sorted(cue.cue_strength for cue in result.per_sentence_cues)

    assert len(result.per_sentence_cues) == 5
    assert result.threshold == strengths[3]
    assert result.flagged_sentences() == [ROBOTIC_SENTENCE]


def test_scan_result_to_dict():
    payload = scan(VARIED_TEXT + " " + ROBOTIC_SENTENCE).to_dict()
    assert set(payload) == {"ai_score", "human_score", "threshold", "per_sentence_cues"}
    flagged = [cue["sentence"] for cue in payload["per_sentence_cues"] if cue["ai_like"]]
    assert flagged == [ROBOTIC_SENTENCE]


def test_score_and_cues_for_small_document():
    """Hand-computed features, score and cue strengths for a two-sentence text.

    Sentence one has 4 tokens (avg length 6.5, one comma, a stock opener,
    2 stems over 4 content words). Sentence two has 6 tokens (avg length 6.0,
    one stem over 6 content words).
    """
    first = "Moreover, tests tested testing."
    second = "Tests tested testing tests tested testing."
    metrics = [sentence_metrics(first), sentence_metrics(second)]
    features = compute_document_features(metrics)

    assert features.length_cov == pytest.approx(0.2)
    assert features.mean_uniqueness == pytest.approx((0.5 + 1 / 6) / 2)
    assert features.mean_word_len == pytest.approx(6.25)
    assert features.mean_commas == pytest.approx(0.5)
    assert features.opener_fraction == pytest.approx(0.5)
    # 45 * 0.08 + 25 * (0.58 - 1/3) + 10 * 1 + 10 * (0.65 / 2.2) + 0 = 22.72
    assert score_features(features) == 23

    result = scan(first + " " + second)
    assert (result.ai_score, result.human_score) == (23, 77)
    strengths = [cue.cue_strength for cue in result.per_sentence_cues]
    assert strengths == [pytest.approx(1.96), pytest.approx(0.54)]
    assert result.threshold == pytest.approx(1.96)
    assert result.flagged_sentences() == []


def test_cue_strength_adds_comma_bonus():
    # 4 / 25 + (1.0 - 5.5) * 0.6 + 0.8
    assert cue_strength(sentence_metrics("A, b, c, d.")) == pytest.approx(-1.74)
