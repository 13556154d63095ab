from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "AI Sense Check"
    APP_ENV: Literal["development", "production", "vercel"] = "production"
    # Public site URL, used in the LinkedIn share text
    HOST_NAME: str = "https://areyou-ai-ready.vercel.app"

    # AI
    DEFAULT_GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_API_KEY: str | None = None
    QUESTION_TEMPERATURE: float = 0.7
    QUESTION_MAX_OUTPUT_TOKENS: int = 700
    QUESTION_TIMEOUT_SECONDS: float = 30.0

    # Google Sheets webhook (Apps Script web app). Empty = persistence disabled
    GOOGLE_SHEETS_WEBHOOK_URL: str | None = None
    WEBHOOK_TIMEOUT_SECONDS: float = 10.0
    WEBHOOK_MAX_RETRIES: int = 3

    GEOLOCATION_BASE_URL: str = "https://ipapi.co"
    GEOLOCATION_TIMEOUT_SECONDS: float = 3.0
    GEOLOCATION_CACHE_TTL_SECONDS: int = 3600

    SESSION_TTL_SECONDS: int = 6 * 60 * 60
    SESSION_CACHE_MAX_SIZE: int = 10000


settings = Settings()

APP_VERSION = __version__
