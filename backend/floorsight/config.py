"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    floorsight_env: str = "development"
    floorsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Marker category lookups
    lookup_timeout_s: float = 5.0
    max_concurrent_lookups: int = 32

    # Which container's height the Y axis is flipped against
    flip_frame: Literal["floor", "root"] = "floor"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
