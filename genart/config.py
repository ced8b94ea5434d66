"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    genart_env: str = "development"
    genart_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Render defaults
    default_seed: int = 42
    canvas_width: float = 1920.0
    canvas_height: float = 1080.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": ""}


settings = Settings()
