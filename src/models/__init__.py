from models.schemas import (
    AnalysisResultResponse,
    AssessmentDetailsResponse,
    BrandResponse,
    DetailedScoresResponse,
    PhonemeAnnotationResponse,
    PollRequest,
    PollResponse,
    PronunciationRequest,
    TranscribeRequest,
    WaveformComparisonResponse,
)

__all__ = [
    "AnalysisResultResponse",
    "AssessmentDetailsResponse",
    "BrandResponse",
    "DetailedScoresResponse",
    "PhonemeAnnotationResponse",
    "PollRequest",
    "PollResponse",
    "PronunciationRequest",
    "TranscribeRequest",
    "WaveformComparisonResponse",
]
