from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}


class BrandResponse(BaseModel):
    id: str
    name: str
    phonemes: List[str]
    pronunciation: str
    description: str
    country: str
    founded: str

    model_config = CAMEL_CONFIG


class PhonemeAnnotationResponse(BaseModel):
    symbol: str
    correct: bool
    label: str
    confidence: float
    timing: float

    model_config = CAMEL_CONFIG


class DetailedScoresResponse(BaseModel):
    phoneme_accuracy: int
    stress_pattern: int
    timing: int
    clarity: int

    model_config = CAMEL_CONFIG


class AssessmentDetailsResponse(BaseModel):
    accuracy_score: int
    fluency_score: int
    completeness_score: int
    overall_score: int
    phoneme_accuracy: int
    stress_pattern: int

    model_config = CAMEL_CONFIG


class WaveformComparisonResponse(BaseModel):
    user_waveform: List[float]
    correct_waveform: List[float]
    time_labels: List[str]

    model_config = CAMEL_CONFIG


class AnalysisResultResponse(BaseModel):
    transcript: str
    detected_brand: str
    accuracy: int = Field(..., ge=0, le=100)
    pronunciation_feedback: str
    correct_phonemes: List[PhonemeAnnotationResponse]
    user_phonemes: List[PhonemeAnnotationResponse]
    suggestions: List[str]
    brand_found: bool
    message: str
    brand_description: Optional[str] = None
    detailed_scores: Optional[DetailedScoresResponse] = None
    assessment_details: Optional[AssessmentDetailsResponse] = None
    waveform_comparison: Optional[WaveformComparisonResponse] = None
    similar_brands: List[BrandResponse] = Field(default_factory=list)

    model_config = CAMEL_CONFIG


class PronunciationRequest(BaseModel):
    transcript: Optional[str] = None
    brand_name: Optional[str] = None

    model_config = CAMEL_CONFIG


class TranscribeRequest(BaseModel):
    audio_data: str = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1)
    mode: Optional[str] = None

    model_config = CAMEL_CONFIG


class PollRequest(BaseModel):
    job_name: str = Field(..., min_length=1)

    model_config = CAMEL_CONFIG


class PollResponse(BaseModel):
    job: Dict[str, Any]
    analysis: Optional[AnalysisResultResponse] = None
