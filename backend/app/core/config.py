# backend/app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):

    PROJECT_NAME: str = "Assessment Scoring API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # ── Logging ──────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── CORS (front d'édition des structures) ─────────────────
    CORS_ORIGINS: List[str] = ["*"]


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra='ignore'
        )

settings = Settings()
