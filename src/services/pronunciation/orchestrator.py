"""
Entry points of the pronunciation scoring pipeline.

transcript -> brand match -> phoneme analysis -> feedback, similar brands and
waveforms -> AnalysisResult. No step raises for string input: an unmatched
transcript degrades to a zero-accuracy "not recognized" result.
"""

import logging
import random
from typing import Optional

from config import settings
from services.pronunciation.brand_matcher import closest_brands, find_best_match
from services.pronunciation.catalog import BrandCatalog, get_catalog
from services.pronunciation.config import MAX_SUGGESTED_BRANDS, UNKNOWN_BRAND
from services.pronunciation.feedback import build_feedback, unmatched_feedback
from services.pronunciation.models import (
    AnalysisResult,
    AssessmentDetails,
    Brand,
    DetailedScores,
    VendorAssessment,
)
from services.pronunciation.phoneme_analysis import analyze_phonemes, apply_vendor_scores
from services.pronunciation.similar_brands import get_similar_brands
from services.pronunciation.waveform import build_waveform_comparison

logger = logging.getLogger(__name__)

MATCHED_MESSAGE = "Pronunciation analysis completed successfully"
UNMATCHED_MESSAGE = "Brand not recognized"


def default_rng() -> random.Random:
    if settings.random_seed is not None:
        return random.Random(settings.random_seed)
    return random.SystemRandom()


def analyze_pronunciation(
    transcript: Optional[str],
    catalog: Optional[BrandCatalog] = None,
    rng: Optional[random.Random] = None,
    vendor: Optional[VendorAssessment] = None,
) -> AnalysisResult:
    transcript = transcript or ""
    catalog = catalog if catalog is not None else get_catalog()
    rng = rng if rng is not None else default_rng()

    brand = find_best_match(transcript, catalog)
    if brand is None:
        result = _unmatched_result(transcript, catalog)
    else:
        result = _matched_result(transcript, brand, catalog, rng, vendor)

    logger.info(
        f"Analyzed transcript {transcript!r}: brand={result.detected_brand}, "
        f"accuracy={result.accuracy}"
    )
    return result


def analyze_brand_name(
    brand_name: Optional[str],
    catalog: Optional[BrandCatalog] = None,
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """Score a typed brand name as if it were a transcript."""
    return analyze_pronunciation(brand_name, catalog=catalog, rng=rng)


def _unmatched_result(transcript: str, catalog: BrandCatalog) -> AnalysisResult:
    candidates = closest_brands(transcript, catalog)
    feedback = unmatched_feedback(transcript, candidates)
    similar = candidates or catalog.first(MAX_SUGGESTED_BRANDS)
    return AnalysisResult(
        transcript=transcript,
        detected_brand=UNKNOWN_BRAND,
        accuracy=0,
        pronunciation_feedback=feedback.message,
        correct_phonemes=(),
        user_phonemes=(),
        suggestions=feedback.suggestions,
        brand_found=False,
        message=UNMATCHED_MESSAGE,
        similar_brands=tuple(similar),
    )


def _matched_result(
    transcript: str,
    brand: Brand,
    catalog: BrandCatalog,
    rng: random.Random,
    vendor: Optional[VendorAssessment],
) -> AnalysisResult:
    analysis = analyze_phonemes(transcript, brand, rng)
    user_phonemes = analysis.user_phonemes
    if vendor is not None:
        user_phonemes = apply_vendor_scores(user_phonemes, vendor)
    feedback = build_feedback(
        analysis.accuracy,
        brand,
        user_phonemes=user_phonemes,
        detailed_scores=analysis.detailed_scores,
        flagged_words=vendor.words if vendor is not None else (),
    )
    waveform = build_waveform_comparison(brand.phonemes, user_phonemes, rng)
    return AnalysisResult(
        transcript=transcript,
        detected_brand=brand.name,
        accuracy=analysis.accuracy,
        pronunciation_feedback=feedback.message,
        correct_phonemes=analysis.correct_phonemes,
        user_phonemes=user_phonemes,
        suggestions=feedback.suggestions,
        brand_found=True,
        message=MATCHED_MESSAGE,
        brand_description=brand.description,
        detailed_scores=analysis.detailed_scores,
        assessment_details=assessment_details(analysis.accuracy, analysis.detailed_scores, vendor),
        waveform_comparison=waveform,
        similar_brands=tuple(get_similar_brands(brand, catalog)),
    )


def assessment_details(
    accuracy: int,
    scores: DetailedScores,
    vendor: Optional[VendorAssessment] = None,
) -> AssessmentDetails:
    """Vendor-style summary; vendor scores win over the heuristic ones when given."""
    if vendor is not None:
        return AssessmentDetails(
            accuracy_score=int(round(vendor.accuracy_score)),
            fluency_score=int(round(vendor.fluency_score)),
            completeness_score=int(round(vendor.completeness_score)),
            overall_score=int(round(vendor.pronunciation_score)),
            phoneme_accuracy=scores.phoneme_accuracy,
            stress_pattern=scores.stress_pattern,
        )
    return AssessmentDetails(
        accuracy_score=accuracy,
        fluency_score=scores.timing,
        completeness_score=scores.clarity,
        overall_score=int(round((accuracy + scores.timing + scores.clarity) / 3)),
        phoneme_accuracy=scores.phoneme_accuracy,
        stress_pattern=scores.stress_pattern,
    )
