from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Voca"
    debug: bool = False
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: List[str] = ["*"]

    # Pins the scoring noise; unset means a fresh system RNG per analysis.
    random_seed: Optional[int] = None

    transcription_service_url: Optional[str] = None
    transcription_timeout: float = 30.0


settings = Settings()
