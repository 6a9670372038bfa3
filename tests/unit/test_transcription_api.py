"""Unit tests for the transcribe and poll endpoints."""

import httpx
import pytest
from fastapi.testclient import TestClient

from api import app
from services.transcription_proxy import TranscriptionProxy, get_transcription_proxy

AUDIO = {"audioData": "UklGRg==", "contentType": "audio/webm"}


@pytest.fixture
def use_vendor():
    def install(handler=None, base_url="https://stt.example.com/transcribe"):
        transport = httpx.MockTransport(handler) if handler else None
        proxy = TranscriptionProxy(base_url=base_url, transport=transport)
        app.dependency_overrides[get_transcription_proxy] = lambda: proxy

    return install


def test_transcribe_returns_vendor_json(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(200, json={"jobName": "job-7", "status": "IN_PROGRESS"}))

    response = client.post("/api/v1/pronunciation/transcribe", json=AUDIO)

    assert response.status_code == 200
    assert response.json() == {"jobName": "job-7", "status": "IN_PROGRESS"}


def test_transcribe_validates_body(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(200, json={}))

    response = client.post("/api/v1/pronunciation/transcribe", json={"audioData": ""})

    assert response.status_code == 422


def test_transcribe_not_configured(client: TestClient, use_vendor):
    use_vendor(base_url="")

    response = client.post("/api/v1/pronunciation/transcribe", json=AUDIO)

    assert response.status_code == 503


def test_vendor_error_keeps_status(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(500, text="upstream exploded"))

    response = client.post("/api/v1/pronunciation/transcribe", json=AUDIO)

    assert response.status_code == 500
    assert response.json() == {"error": "Transcription service error", "details": "upstream exploded"}


def test_unreachable_vendor_gives_bad_gateway(client: TestClient, use_vendor):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    use_vendor(handler)

    response = client.post("/api/v1/pronunciation/poll", json={"jobName": "job-7"})

    assert response.status_code == 502
    assert response.json() == {"error": "Internal server error", "details": "connection refused"}


def test_poll_in_progress(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(200, json={"status": "IN_PROGRESS"}))

    response = client.post("/api/v1/pronunciation/poll", json={"jobName": "job-7"})

    assert response.status_code == 200
    data = response.json()
    assert data["job"] == {"status": "IN_PROGRESS"}
    assert data["analysis"] is None


def test_poll_completed_runs_analysis(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(200, json={"status": "COMPLETED", "transcript": "Toyota"}))

    response = client.post("/api/v1/pronunciation/poll", json={"jobName": "job-7"})

    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["detectedBrand"] == "Toyota"
    assert analysis["brandFound"] is True


def test_non_json_vendor_reply_gives_bad_gateway(client: TestClient, use_vendor):
    use_vendor(lambda request: httpx.Response(200, text="<html>gateway</html>"))

    response = client.post("/api/v1/pronunciation/poll", json={"jobName": "job-7"})

    assert response.status_code == 502
    assert response.json() == {"error": "Polling error", "details": "<html>gateway</html>"}


def test_poll_completed_uses_vendor_assessment(client: TestClient, use_vendor):
    job = {
        "status": "COMPLETED",
        "transcript": "Toyota",
        "assessment": {
            "accuracyScore": 72,
            "fluencyScore": 80,
            "completenessScore": 100,
            "pronunciationScore": 78,
            "words": [
                {
                    "word": "Toyota",
                    "accuracyScore": 70,
                    "errorType": "Mispronunciation",
                    "phonemes": [
                        {"phoneme": "t", "accuracyScore": 95},
                        {"phoneme": "o", "accuracyScore": 40},
                    ],
                }
            ],
        },
    }
    use_vendor(lambda request: httpx.Response(200, json=job))

    response = client.post("/api/v1/pronunciation/poll", json={"jobName": "job-7"})

    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["assessmentDetails"]["accuracyScore"] == 72
    assert analysis["assessmentDetails"]["overallScore"] == 78
    first, second = analysis["userPhonemes"][:2]
    assert first["label"] == "Excellent: /t/"
    assert first["confidence"] == 0.95
    assert second["correct"] is False
    assert second["label"] == "Unclear: /o/"
    assert "Specific sounds to improve: o" in analysis["suggestions"]
    assert 'The speech service flagged "Toyota": Mispronunciation' in analysis["suggestions"]
