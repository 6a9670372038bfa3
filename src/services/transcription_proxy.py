import logging
from typing import Any, Dict, Optional

import httpx

from config import settings
from services.pronunciation.models import VendorAssessment, VendorPhonemeScore, VendorWordScore

logger = logging.getLogger(__name__)

BAD_GATEWAY = 502
DEFAULT_MODE = "ai_feedback"
POLL_MODE = "poll"
COMPLETED_STATUS = "COMPLETED"


class TranscriptionProxyError(Exception):
    """The transcription service answered with a non-success status."""

    def __init__(self, status_code: int, error: str, details: str):
        super().__init__(f"{error} ({status_code}): {details}")
        self.status_code = status_code
        self.error = error
        self.details = details


class TranscriptionServiceNotConfigured(Exception):
    pass


class TranscriptionProxy:
    """Forwards recorded audio to the speech-to-text service and polls jobs."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url if base_url is not None else settings.transcription_service_url
        self.timeout = timeout if timeout is not None else settings.transcription_timeout
        self._transport = transport

    async def submit_audio(self, audio_data: str, content_type: str, mode: Optional[str] = None) -> Dict[str, Any]:
        payload = {
            "audioData": audio_data,
            "contentType": content_type,
            "mode": mode or DEFAULT_MODE,
        }
        return await self._post(payload, error="Transcription service error")

    async def poll_job(self, job_name: str) -> Dict[str, Any]:
        payload = {"mode": POLL_MODE, "jobName": job_name}
        return await self._post(payload, error="Polling error")

    async def _post(self, payload: Dict[str, Any], error: str) -> Dict[str, Any]:
        if not self.base_url:
            raise TranscriptionServiceNotConfigured("TRANSCRIPTION_SERVICE_URL is not set")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.base_url, json=payload)
            except httpx.HTTPError as e:
                logger.error(f"Transcription service unreachable: {e}")
                raise

        if response.is_error:
            logger.error(f"{error}: {response.status_code} {response.text}")
            raise TranscriptionProxyError(response.status_code, error, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{error}: invalid JSON from transcription service: {e}")
            raise TranscriptionProxyError(BAD_GATEWAY, error, response.text)


def completed_transcript(job: Dict[str, Any]) -> Optional[str]:
    """Transcript of a finished job, or None while it is still running."""
    if job.get("status") != COMPLETED_STATUS:
        return None
    transcript = job.get("transcript")
    return transcript if isinstance(transcript, str) else None


def vendor_assessment(job: Dict[str, Any]) -> Optional[VendorAssessment]:
    """
    Pronunciation assessment attached to a finished job, if the service sent one.

    Args:
        job: Poll payload; scores live under ``assessment`` in camelCase

    Returns:
        Parsed assessment, or None when absent or malformed
    """
    data = job.get("assessment")
    if not isinstance(data, dict):
        return None

    words = tuple(_vendor_word(w) for w in data.get("words") or () if isinstance(w, dict))
    return VendorAssessment(
        accuracy_score=_score(data, "accuracyScore"),
        fluency_score=_score(data, "fluencyScore"),
        completeness_score=_score(data, "completenessScore"),
        pronunciation_score=_score(data, "pronunciationScore"),
        words=words,
    )


def _vendor_word(data: Dict[str, Any]) -> VendorWordScore:
    phonemes = tuple(
        VendorPhonemeScore(phoneme=str(p.get("phoneme", "")), accuracy_score=_score(p, "accuracyScore"))
        for p in data.get("phonemes") or ()
        if isinstance(p, dict)
    )
    return VendorWordScore(
        word=str(data.get("word", "")),
        accuracy_score=_score(data, "accuracyScore"),
        error_type=str(data.get("errorType") or "None"),
        phonemes=phonemes,
    )


def _score(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    return float(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else 0.0


def get_transcription_proxy() -> TranscriptionProxy:
    return TranscriptionProxy()
