import pytest

from services.pronunciation.feedback import build_feedback, feedback_tier, unmatched_feedback
from services.pronunciation.models import DetailedScores, PhonemeAnnotation, VendorWordScore


@pytest.mark.parametrize(
    "accuracy,tier",
    [
        (100, "outstanding"),
        (85, "outstanding"),
        (84, "good"),
        (70, "good"),
        (69, "fair"),
        (50, "fair"),
        (49, "needs_practice"),
        (0, "needs_practice"),
    ],
)
def test_feedback_tier(accuracy, tier):
    assert feedback_tier(accuracy) == tier


def test_outstanding_feedback(small_catalog):
    feedback = build_feedback(92, small_catalog.get("tesla"))

    assert feedback.message.startswith('Outstanding pronunciation of "Tesla"! Your accuracy is 92%.')
    assert feedback.suggestions[0] == "Excellent pronunciation!"
    assert len(feedback.suggestions) == 4


def test_low_accuracy_feedback_mentions_pronunciation_guide(small_catalog):
    feedback = build_feedback(30, small_catalog.get("toyota"))

    assert 'Keep practicing "Toyota"' in feedback.message
    assert "toy-OH-tah" in feedback.message
    assert feedback.suggestions[0] == 'Practice saying "Toyota" slowly: toy-OH-tah'


def test_incorrect_sounds_are_listed(small_catalog):
    phonemes = [
        PhonemeAnnotation("t", True, "Excellent: /t/", 0.9, 20.0),
        PhonemeAnnotation("e", False, "Close, try: /e/ (said /i/)", 0.45, 40.0),
        PhonemeAnnotation("s", False, "Missing: /s/", 0.05, 60.0),
    ]

    feedback = build_feedback(60, small_catalog.get("tesla"), user_phonemes=phonemes)

    assert feedback.suggestions[-1] == "Specific sounds to improve: e, s"


def test_sub_score_tips(small_catalog):
    scores = DetailedScores(phoneme_accuracy=75, stress_pattern=70, timing=60, clarity=72)

    feedback = build_feedback(75, small_catalog.get("honda"), detailed_scores=scores)

    assert any("speaking rhythm" in s for s in feedback.suggestions)
    assert any("mouth opening" in s for s in feedback.suggestions)


def test_no_sub_score_tips_for_strong_scores(small_catalog):
    scores = DetailedScores(phoneme_accuracy=95, stress_pattern=90, timing=90, clarity=95)

    feedback = build_feedback(95, small_catalog.get("honda"), detailed_scores=scores)

    assert not any("speaking rhythm" in s for s in feedback.suggestions)
    assert not any("mouth opening" in s for s in feedback.suggestions)


def test_unmatched_feedback_suggests_candidates(small_catalog):
    feedback = unmatched_feedback("tesl", [small_catalog.get("tesla"), small_catalog.get("lexus")])

    assert 'I heard "tesl"' in feedback.message
    assert "Did you mean: Tesla, Lexus?" in feedback.message
    assert len(feedback.suggestions) == 3
    assert feedback.suggestions[2] == 'Maybe try: "Tesla"'


def test_unmatched_feedback_without_candidates():
    feedback = unmatched_feedback("qqqq", [])

    assert "Did you mean" not in feedback.message
    assert feedback.suggestions[2].startswith("Try popular brands")


def test_flagged_vendor_words_become_suggestions(small_catalog):
    words = [
        VendorWordScore(word="Lexus", accuracy_score=55.0, error_type="Mispronunciation"),
        VendorWordScore(word="please", accuracy_score=95.0),
    ]

    feedback = build_feedback(80, small_catalog.get("lexus"), flagged_words=words)

    assert feedback.suggestions[-1] == 'The speech service flagged "Lexus": Mispronunciation'
    assert not any("please" in s for s in feedback.suggestions)
