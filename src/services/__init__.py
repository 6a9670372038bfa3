from services.pronunciation import analyze_brand_name, analyze_pronunciation, get_catalog
from services.transcription_proxy import TranscriptionProxy, TranscriptionProxyError

__all__ = [
    "analyze_brand_name",
    "analyze_pronunciation",
    "get_catalog",
    "TranscriptionProxy",
    "TranscriptionProxyError",
]
