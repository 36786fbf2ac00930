"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    patternforge_env: str = "development"
    patternforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generation defaults
    default_container_size: tuple[float, float] = (800.0, 800.0)
    png_max_scale: float = 4.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
