"""
Synthetic comparison waveforms for the UI.

The envelopes are shaped by phoneme class and per-phoneme confidence only.
They are never derived from audio and carry no acoustic meaning.
"""

import math
import random
from typing import List, Sequence

from constants.phonetics import PLOSIVES, VOWELS
from services.pronunciation.config import (
    MAX_TIME_LABELS,
    MIN_WAVEFORM_SAMPLES,
    SAMPLES_PER_PHONEME,
    SECONDS_PER_PHONEME,
)
from services.pronunciation.models import PhonemeAnnotation, WaveformComparison


def build_waveform_comparison(
    target_phonemes: Sequence[str],
    user_phonemes: Sequence[PhonemeAnnotation],
    rng: random.Random,
) -> WaveformComparison:
    sample_count = max(MIN_WAVEFORM_SAMPLES, len(target_phonemes) * SAMPLES_PER_PHONEME)
    correct = [
        _reference_sample(i / sample_count, _phoneme_at(target_phonemes, i, sample_count), rng)
        for i in range(sample_count)
    ]
    user = [
        _user_sample(amplitude, _annotation_at(user_phonemes, len(target_phonemes), i, sample_count), rng)
        for i, amplitude in enumerate(correct)
    ]
    return WaveformComparison(
        user_waveform=tuple(user),
        correct_waveform=tuple(correct),
        time_labels=tuple(time_labels(len(target_phonemes), sample_count)),
    )


def _phoneme_index(count: int, sample: int, sample_count: int) -> int:
    return min(count - 1, int(sample / sample_count * count)) if count else 0


def _phoneme_at(phonemes: Sequence[str], sample: int, sample_count: int) -> str:
    if not phonemes:
        return ""
    return phonemes[_phoneme_index(len(phonemes), sample, sample_count)]


def _annotation_at(annotations: Sequence[PhonemeAnnotation], count: int, sample: int, sample_count: int):
    index = _phoneme_index(count, sample, sample_count)
    return annotations[index] if index < len(annotations) else None


def _reference_sample(position: float, phoneme: str, rng: random.Random) -> float:
    if phoneme in VOWELS:
        amplitude = 0.6 + math.sin(position * math.pi * 8) * 0.2
    elif phoneme in PLOSIVES:
        amplitude = 0.4 + math.sin(position * math.pi * 12) * 0.3
    else:
        amplitude = 0.5 + math.sin(position * math.pi * 6) * 0.15
    return _clamp(amplitude + (rng.random() - 0.5) * 0.05, 0.1, 0.9)


def _user_sample(amplitude: float, annotation, rng: random.Random) -> float:
    if annotation is None:
        return _clamp(rng.random() * 0.3, 0.05, 0.3)
    if not annotation.correct:
        wrong = amplitude * (0.3 + rng.random() * 0.4) + (rng.random() - 0.5) * 0.3
        return _clamp(wrong, 0.05, 0.95)
    variation = (1 - annotation.confidence) * (rng.random() - 0.5) * 0.4
    return _clamp(amplitude * annotation.confidence + variation, 0.1, 0.9)


def time_labels(phoneme_count: int, sample_count: int) -> List[str]:
    duration = phoneme_count * SECONDS_PER_PHONEME
    count = min(MAX_TIME_LABELS, sample_count)
    step = duration / (count - 1) if count > 1 else 0.0
    return [f"{i * step:.1f}s" for i in range(count)]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
