"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONTENT_URL = (
    "https://raw.githubusercontent.com/actions-on-google/dialogflow-quotes-java/master/quotes.json"
)
DEFAULT_BACKGROUND_IMAGE_URL = (
    "https://lh3.googleusercontent.com/t53m5nzjMl2B_9Qhwc81tuwyA2dBEc7WqKPlzZJ9syPUkt9VR8lu4Kq8"
    "heMjJevW3GVv9ekRWntyqXIBKEhc5i7v-SRrTan_=s688"
)


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    QUOTES_CONTENT_URL: str = Field(default=DEFAULT_CONTENT_URL)
    QUOTES_BACKGROUND_IMAGE_URL: str = Field(default=DEFAULT_BACKGROUND_IMAGE_URL)
    # None disables the timeout entirely
    QUOTES_FETCH_TIMEOUT_SECONDS: float | None = Field(default=10.0)
    QUOTES_DEFAULT_LANGUAGE: str = Field(default="en")
    QUOTES_LOG_LEVEL: str = Field(default="info")
    QUOTES_LOG_DIR: Path | None = Field(default=None)

    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()


__all__ = ["Settings", "settings", "DEFAULT_CONTENT_URL", "DEFAULT_BACKGROUND_IMAGE_URL"]
