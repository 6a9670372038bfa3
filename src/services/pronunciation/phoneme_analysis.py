"""
Positional phoneme scoring.

The transcript and the brand name are normalized and compared character by
character. Each position earns credit (exact, confusable, unrelated, missing
or extra), the average is adjusted for length mismatch and runs of errors, and
each target phoneme receives an annotation for display.

Confidence values and sub-scores carry deliberate random jitter so results do
not look mechanically exact; the jitter comes from the injected ``rng``.
"""

import random
from dataclasses import replace
from typing import List, Sequence, Tuple

from constants.phonetics import CONFUSION_LABELS, PHONETIC_SIMILARITY
from services.pronunciation import config as cfg
from services.pronunciation.models import (
    Brand,
    DetailedScores,
    PhonemeAnalysis,
    PhonemeAnnotation,
    VendorAssessment,
)
from services.pronunciation.text_utils import normalize_text


def phonetic_similarity(target_char: str, user_char: str) -> float:
    if user_char in PHONETIC_SIMILARITY.get(target_char, ()):
        return cfg.CONFUSABLE_SIMILARITY
    return cfg.UNRELATED_SIMILARITY


def position_credit(target_char: str, user_char: str) -> float:
    """Credit earned by one position; empty string marks an absent character."""
    if user_char and user_char == target_char:
        return cfg.EXACT_CREDIT
    if not user_char:
        return cfg.MISSING_CREDIT
    if not target_char:
        return cfg.EXTRA_CREDIT
    return mismatch_credit(phonetic_similarity(target_char, user_char))


def mismatch_credit(sim: float) -> float:
    credit = cfg.MISMATCH_CREDIT_MIN + sim * cfg.MISMATCH_CREDIT_SCALE
    return _clamp(credit, cfg.MISMATCH_CREDIT_MIN, cfg.MISMATCH_CREDIT_MAX)


def score_accuracy(user_text: str, target_text: str) -> int:
    positions = max(len(user_text), len(target_text))
    total = sum(
        position_credit(_char_at(target_text, i), _char_at(user_text, i))
        for i in range(positions)
    )
    result = total / positions if positions else 0.0

    length_diff = abs(len(user_text) - len(target_text))
    if length_diff:
        penalty = min(cfg.LENGTH_PENALTY_CAP, length_diff * cfg.LENGTH_PENALTY_PER_CHAR)
        result = max(cfg.LENGTH_PENALTY_FLOOR, result - penalty)

    run = longest_error_run(user_text, target_text)
    if run > cfg.CONSECUTIVE_ERROR_MIN_RUN:
        result = max(cfg.CONSECUTIVE_ERROR_FLOOR, result - run * cfg.CONSECUTIVE_ERROR_PENALTY)

    return int(round(_clamp(result, cfg.MIN_ACCURACY, cfg.MAX_ACCURACY)))


def longest_error_run(user_text: str, target_text: str) -> int:
    """Longest run of mismatched positions within the overlapping prefix."""
    longest = current = 0
    for user_char, target_char in zip(user_text, target_text):
        current = current + 1 if user_char != target_char else 0
        longest = max(longest, current)
    return longest


def analyze_phonemes(transcript: str, brand: Brand, rng: random.Random) -> PhonemeAnalysis:
    user_text = normalize_text(transcript)
    target_text = normalize_text(brand.name)
    accuracy = score_accuracy(user_text, target_text)

    return PhonemeAnalysis(
        user_phonemes=annotate_user_phonemes(brand.phonemes, user_text, target_text, accuracy, rng),
        correct_phonemes=reference_phonemes(brand.phonemes),
        accuracy=accuracy,
        detailed_scores=detailed_scores(accuracy, rng),
    )


def reference_phonemes(phonemes: Sequence[str]) -> Tuple[PhonemeAnnotation, ...]:
    return tuple(
        PhonemeAnnotation(
            symbol=p,
            correct=True,
            label=f"Target: /{p}/",
            confidence=1.0,
            timing=_slot(i, len(phonemes)),
        )
        for i, p in enumerate(phonemes)
    )


def annotate_user_phonemes(
    phonemes: Sequence[str],
    user_text: str,
    target_text: str,
    accuracy: int,
    rng: random.Random,
) -> Tuple[PhonemeAnnotation, ...]:
    annotations: List[PhonemeAnnotation] = []
    for i, phoneme in enumerate(phonemes):
        correct, label, confidence = _judge_phoneme(i, phoneme, user_text, target_text, accuracy, rng)
        timing = _slot(i, len(phonemes)) + (rng.random() - 0.5) * cfg.TIMING_JITTER
        annotations.append(
            PhonemeAnnotation(
                symbol=phoneme,
                correct=correct,
                label=label,
                confidence=confidence,
                timing=_clamp(timing, 0.0, 100.0),
            )
        )
    return tuple(annotations)


def _judge_phoneme(
    index: int,
    phoneme: str,
    user_text: str,
    target_text: str,
    accuracy: int,
    rng: random.Random,
) -> Tuple[bool, str, float]:
    if index >= len(user_text):
        return False, f"Missing: /{phoneme}/", cfg.MISSING_CONFIDENCE
    if index >= len(target_text):
        return False, "Extra sound", cfg.EXTRA_CONFIDENCE

    target_char = target_text[index]
    user_char = user_text[index]
    if target_char == user_char:
        return _judge_match(index, phoneme, user_text, target_text, accuracy, rng)

    sim = phonetic_similarity(target_char, user_char)
    confidence = _clamp(
        sim * cfg.MISMATCH_CONFIDENCE_SCALE,
        cfg.MISMATCH_CONFIDENCE_MIN,
        cfg.MISMATCH_CONFIDENCE_MAX,
    )
    return False, f"{_mismatch_prefix(target_char, user_char)}: /{phoneme}/ (said /{user_char}/)", confidence


def _judge_match(
    index: int,
    phoneme: str,
    user_text: str,
    target_text: str,
    accuracy: int,
    rng: random.Random,
) -> Tuple[bool, str, float]:
    if accuracy > 80 and _context_matches(user_text, target_text, index):
        return True, f"Excellent: /{phoneme}/", 0.85 + rng.random() * 0.15
    if accuracy > 60:
        return True, f"Good: /{phoneme}/", 0.70 + rng.random() * 0.20
    confidence = 0.55 + rng.random() * 0.25
    if confidence > cfg.UNCLEAR_CONFIDENCE_CUTOFF:
        return True, f"Okay: /{phoneme}/", confidence
    return False, f"Unclear: /{phoneme}/", confidence


def _context_matches(user_text: str, target_text: str, index: int) -> bool:
    before = index == 0 or _char_at(user_text, index - 1) == _char_at(target_text, index - 1)
    after = index >= len(user_text) - 1 or _char_at(user_text, index + 1) == _char_at(target_text, index + 1)
    return before and after


def _mismatch_prefix(target_char: str, user_char: str) -> str:
    for group, prefix in CONFUSION_LABELS:
        if target_char in group and user_char in group:
            return prefix
    return "Wrong sound"


def detailed_scores(accuracy: int, rng: random.Random) -> DetailedScores:
    return DetailedScores(
        phoneme_accuracy=accuracy,
        stress_pattern=_jittered(accuracy, cfg.STRESS_PATTERN_SPREAD, cfg.STRESS_PATTERN_FLOOR, rng),
        timing=_jittered(accuracy, cfg.TIMING_SPREAD, cfg.TIMING_FLOOR, rng),
        clarity=_jittered(accuracy, cfg.CLARITY_SPREAD, cfg.CLARITY_FLOOR, rng),
    )


def _jittered(base: int, spread: float, floor: int, rng: random.Random) -> int:
    value = base + (rng.random() - 0.5) * spread
    return int(round(_clamp(value, floor, cfg.MAX_ACCURACY)))


def _slot(index: int, count: int) -> float:
    return (index + 1) * (100.0 / count) if count else 0.0


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def apply_vendor_scores(
    annotations: Sequence[PhonemeAnnotation],
    vendor: VendorAssessment,
) -> Tuple[PhonemeAnnotation, ...]:
    """Replace heuristic confidences with measured per-phoneme scores.

    Vendor phonemes are read across words in order and paired with the target
    phonemes by position; targets beyond the vendor's list keep their heuristic
    annotation.
    """
    scores = [p.accuracy_score for word in vendor.words for p in word.phonemes]
    return tuple(
        _rescored(annotation, scores[i]) if i < len(scores) else annotation
        for i, annotation in enumerate(annotations)
    )


def _rescored(annotation: PhonemeAnnotation, score: float) -> PhonemeAnnotation:
    symbol = annotation.symbol
    if score >= cfg.VENDOR_EXCELLENT_SCORE:
        correct, label = True, f"Excellent: /{symbol}/"
    elif score >= cfg.VENDOR_PASS_SCORE:
        correct, label = True, f"Good: /{symbol}/"
    elif annotation.correct:
        correct, label = False, f"Unclear: /{symbol}/"
    else:
        correct, label = False, annotation.label
    return replace(
        annotation,
        correct=correct,
        label=label,
        confidence=_clamp(score / 100.0, 0.0, 1.0),
    )
