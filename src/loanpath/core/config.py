# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; each group becomes a section future PRs extend.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD (matches inference/config.py approach)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "loanpath"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- LLM --
    LLM_API_KEY: str = Field(
        default="not-needed",
        description="API key for the OpenAI-compatible advisory endpoint.",
    )
    LLM_BASE_URL: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL for the OpenAI-compatible advisory endpoint.",
    )
    LLM_MODEL_FAST: str = Field(
        default="gpt-4o-mini",
        description="Model name for the fast_small tier (market-rate lookups).",
    )
    LLM_MODEL_CAPABLE: str = Field(
        default="gpt-4o",
        description="Model name for the capable_large tier (offers + advice).",
    )
    LLM_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout for advisory and market-rate calls.",
    )

    # -- Place search --
    PLACES_API_KEY: str | None = Field(
        default=None,
        description="Google Places API key. Vendor lookup returns nothing when unset.",
    )
    PLACES_BASE_URL: str = "https://places.googleapis.com/v1"
    PLACES_SEARCH_RADIUS_M: float = Field(default=15000.0, gt=0, le=50000)

    # -- Analysis defaults --
    ESTIMATE_RATE_PCT: float = Field(
        default=9.0,
        gt=0,
        description="Placeholder annual rate for the new EMI before lender rates exist.",
    )
    DEFAULT_LATITUDE: float = Field(default=28.6139, ge=-90, le=90)
    DEFAULT_LONGITUDE: float = Field(default=77.2090, ge=-180, le=180)

    # -- Observability (LangFuse) --
    LANGFUSE_PUBLIC_KEY: str | None = Field(
        default=None,
        description="LangFuse public key. When set (with secret key), tracing is active.",
    )
    LANGFUSE_SECRET_KEY: str | None = Field(
        default=None,
        description="LangFuse secret key.",
    )
    LANGFUSE_HOST: str | None = Field(
        default=None,
        description="LangFuse server URL (e.g. http://localhost:3001).",
    )


settings = Settings()
