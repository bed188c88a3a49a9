"""Sentence Remover configuration (passage set + service limits)."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (parent of backend/)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent.resolve()

# Load .env file into environment variables
env_path = PROJECT_ROOT / ".env"
load_dotenv(env_path)


class Settings(BaseSettings):
    """Service configuration with fail-loud validation."""

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    # Banned passages: JSON array of {"id": ..., "text": ...}; built-in default when unset
    passages_file: str | None = Field(default=None)

    # Input limits (HTTP boundary only; the filtering core has no cap)
    max_input_chars: int = Field(default=200_000, gt=0)
    max_body_bytes: int = Field(default=2_000_000, gt=0)

    # Rate limiting (slowapi limit string)
    filter_rate_limit: str = Field(default="60/minute")

    # CORS origins for local frontends
    allowed_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:5000",
        ]
    )


settings = Settings()
