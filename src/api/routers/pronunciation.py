"""API router for pronunciation analysis and the transcription proxy."""

import logging
import random

import httpx
from fastapi import APIRouter, Depends, HTTPException

from models.schemas import (
    AnalysisResultResponse,
    PollRequest,
    PollResponse,
    PronunciationRequest,
    TranscribeRequest,
)
from services.pronunciation import BrandCatalog, analyze_brand_name, analyze_pronunciation, get_catalog
from services.pronunciation.orchestrator import default_rng
from services.transcription_proxy import (
    BAD_GATEWAY,
    TranscriptionProxy,
    TranscriptionProxyError,
    TranscriptionServiceNotConfigured,
    completed_transcript,
    get_transcription_proxy,
    vendor_assessment,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_rng() -> random.Random:
    return default_rng()


@router.post("/analyze", response_model=AnalysisResultResponse)
async def analyze(
    request: PronunciationRequest,
    catalog: BrandCatalog = Depends(get_catalog),
    rng: random.Random = Depends(get_rng),
) -> AnalysisResultResponse:
    """
    Score a transcript (or a typed brand name) against the brand catalog.

    Args:
        request: Either ``transcript`` or ``brandName``
        catalog: Brand catalog
        rng: Random source for scoring noise

    Returns:
        Analysis result

    Raises:
        HTTPException: If neither field is provided
    """
    if request.transcript is not None:
        result = analyze_pronunciation(request.transcript, catalog=catalog, rng=rng)
    elif request.brand_name is not None:
        result = analyze_brand_name(request.brand_name, catalog=catalog, rng=rng)
    else:
        raise HTTPException(status_code=400, detail="Missing transcript or brandName in request")

    logger.info(f"Pronunciation analysis completed: {result.detected_brand} {result.accuracy}")
    return AnalysisResultResponse.model_validate(result)


@router.post("/transcribe")
async def transcribe(
    request: TranscribeRequest,
    proxy: TranscriptionProxy = Depends(get_transcription_proxy),
) -> dict:
    """Forward recorded audio to the transcription service and return its job handle."""
    return await _call_proxy(proxy.submit_audio(request.audio_data, request.content_type, request.mode))


@router.post("/poll", response_model=PollResponse)
async def poll(
    request: PollRequest,
    proxy: TranscriptionProxy = Depends(get_transcription_proxy),
    catalog: BrandCatalog = Depends(get_catalog),
    rng: random.Random = Depends(get_rng),
) -> PollResponse:
    """Poll a transcription job; a finished transcript is scored right away."""
    job = await _call_proxy(proxy.poll_job(request.job_name))
    transcript = completed_transcript(job)
    analysis = None
    if transcript is not None:
        result = analyze_pronunciation(
            transcript, catalog=catalog, rng=rng, vendor=vendor_assessment(job)
        )
        analysis = AnalysisResultResponse.model_validate(result)
    return PollResponse(job=job, analysis=analysis)


async def _call_proxy(call) -> dict:
    try:
        return await call
    except TranscriptionServiceNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except httpx.HTTPError as e:
        raise TranscriptionProxyError(BAD_GATEWAY, "Internal server error", str(e))
