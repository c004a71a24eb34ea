"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from photobooth.domain.modes import ModeKey

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_image_model: str = "gpt-image-1"
    transform_timeout_seconds: float | None = Field(default=120.0, gt=0)
    max_concurrent_transforms: int = Field(default=4, ge=1)
    default_mode: ModeKey = ModeKey.CARTOON
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        env_parse_none_str="None",
    )

    @property
    def debug_errors(self) -> bool:
        """Expose exception details in failed photos when running locally."""
        return self.environment == "local"
