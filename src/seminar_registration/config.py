"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    registrations_table: str = "registrations"
    camera_device_index: int = 0
    camera_width: int = 640
    camera_height: int = 480
    camera_facing_mode: str = "user"
    photo_quality: float = Field(default=0.8, gt=0.0, le=1.0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
