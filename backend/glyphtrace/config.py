"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    glyphtrace_env: str = "development"
    glyphtrace_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest diagram the API accepts, in characters
    max_input_chars: int = 200_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
