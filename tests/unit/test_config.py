"""Unit tests for configuration."""

from config import Settings


def test_default_settings(monkeypatch):
    """Test that default settings are loaded correctly."""
    monkeypatch.delenv("TRANSCRIPTION_SERVICE_URL", raising=False)
    monkeypatch.delenv("RANDOM_SEED", raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_name == "Voca"
    assert settings.debug is False
    assert settings.api_port == 8000
    assert settings.random_seed is None
    assert settings.transcription_service_url is None
    assert settings.transcription_timeout == 30.0


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("RANDOM_SEED", "7")
    monkeypatch.setenv("TRANSCRIPTION_SERVICE_URL", "https://stt.example.com/transcribe")

    settings = Settings(_env_file=None)

    assert settings.app_name == "TestApp"
    assert settings.debug is True
    assert settings.api_port == 9000
    assert settings.random_seed == 7
    assert settings.transcription_service_url == "https://stt.example.com/transcribe"
