"""
Pronunciation scoring for car brand names.

Matches a speech-to-text transcript to a catalog brand, scores it with
heuristic letter-level phoneme comparison and synthesizes feedback for the UI.
"""

from services.pronunciation.models import (
    AnalysisResult,
    AssessmentDetails,
    Brand,
    DetailedScores,
    Feedback,
    MatchCandidate,
    PhonemeAnalysis,
    PhonemeAnnotation,
    VendorAssessment,
    VendorPhonemeScore,
    VendorWordScore,
    WaveformComparison,
)
from services.pronunciation.catalog import BrandCatalog, get_catalog, load_catalog, parse_phonemes
from services.pronunciation.text_utils import edit_distance, normalize_text, similarity
from services.pronunciation.brand_matcher import closest_brands, find_best_match, score_candidates
from services.pronunciation.phoneme_analysis import analyze_phonemes, apply_vendor_scores
from services.pronunciation.feedback import build_feedback
from services.pronunciation.similar_brands import get_similar_brands
from services.pronunciation.waveform import build_waveform_comparison
from services.pronunciation.orchestrator import analyze_brand_name, analyze_pronunciation

__all__ = [
    # Data models
    "AnalysisResult",
    "AssessmentDetails",
    "Brand",
    "DetailedScores",
    "Feedback",
    "MatchCandidate",
    "PhonemeAnalysis",
    "PhonemeAnnotation",
    "VendorAssessment",
    "VendorPhonemeScore",
    "VendorWordScore",
    "WaveformComparison",

    # Catalog
    "BrandCatalog",
    "get_catalog",
    "load_catalog",
    "parse_phonemes",

    # Text utilities
    "edit_distance",
    "normalize_text",
    "similarity",

    # Pipeline stages
    "closest_brands",
    "find_best_match",
    "score_candidates",
    "analyze_phonemes",
    "apply_vendor_scores",
    "build_feedback",
    "get_similar_brands",
    "build_waveform_comparison",

    # Main API functions
    "analyze_pronunciation",
    "analyze_brand_name",
]
