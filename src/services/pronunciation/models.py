"""
Data models for pronunciation scoring.

Every model is a frozen value object: results are created fresh for each
analysis and never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Brand:
    """A catalog entry offered for pronunciation practice."""
    id: str
    name: str
    phonemes: Tuple[str, ...]
    pronunciation: str
    description: str = ""
    country: str = ""
    founded: str = ""


@dataclass(frozen=True)
class MatchCandidate:
    """A brand scored against a transcript."""
    brand: Brand
    similarity: float
    adjusted_similarity: float


@dataclass(frozen=True)
class PhonemeAnnotation:
    symbol: str
    correct: bool
    label: str
    confidence: float
    timing: float


@dataclass(frozen=True)
class DetailedScores:
    phoneme_accuracy: int
    stress_pattern: int
    timing: int
    clarity: int


@dataclass(frozen=True)
class PhonemeAnalysis:
    user_phonemes: Tuple[PhonemeAnnotation, ...]
    correct_phonemes: Tuple[PhonemeAnnotation, ...]
    accuracy: int
    detailed_scores: DetailedScores


@dataclass(frozen=True)
class WaveformComparison:
    """Illustrative amplitude envelopes; synthesized, not measured from audio."""
    user_waveform: Tuple[float, ...]
    correct_waveform: Tuple[float, ...]
    time_labels: Tuple[str, ...]


@dataclass(frozen=True)
class VendorPhonemeScore:
    phoneme: str
    accuracy_score: float


@dataclass(frozen=True)
class VendorWordScore:
    word: str
    accuracy_score: float
    error_type: str = "None"
    phonemes: Tuple[VendorPhonemeScore, ...] = ()


@dataclass(frozen=True)
class VendorAssessment:
    """Scores returned by an external pronunciation-assessment service."""
    accuracy_score: float
    fluency_score: float
    completeness_score: float
    pronunciation_score: float
    words: Tuple[VendorWordScore, ...] = ()


@dataclass(frozen=True)
class AssessmentDetails:
    accuracy_score: int
    fluency_score: int
    completeness_score: int
    overall_score: int
    phoneme_accuracy: int
    stress_pattern: int


@dataclass(frozen=True)
class Feedback:
    message: str
    suggestions: Tuple[str, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """Final result of a pronunciation analysis."""
    transcript: str
    detected_brand: str
    accuracy: int
    pronunciation_feedback: str
    correct_phonemes: Tuple[PhonemeAnnotation, ...]
    user_phonemes: Tuple[PhonemeAnnotation, ...]
    suggestions: Tuple[str, ...]
    brand_found: bool
    message: str
    brand_description: Optional[str] = None
    detailed_scores: Optional[DetailedScores] = None
    assessment_details: Optional[AssessmentDetails] = None
    waveform_comparison: Optional[WaveformComparison] = None
    similar_brands: Tuple[Brand, ...] = field(default_factory=tuple)

    def incorrect_symbols(self) -> Tuple[str, ...]:
        """Symbols the user got wrong, in target order."""
        return tuple(p.symbol for p in self.user_phonemes if not p.correct)
