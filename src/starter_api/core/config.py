"""Application configuration.

Loads settings from environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        api_title: Display name for the API.
        api_version: Current API version string.
        debug: Enable debug logging.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_structured: Force JSON logs on/off; ``None`` auto-detects by TTY.
        cors_origins: Origins allowed by the CORS middleware.
        trace_header: Header carrying the per-request trace id.
        generate_trace_id: Create a trace id when the header is absent.
        astro_base_url: Base URL of the "who is in space" feed.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_title: str = "Starter API"
    api_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_structured: bool | None = None
    cors_origins: list[str] = ["http://localhost:3000"]
    trace_header: str = "X-Request-ID"
    generate_trace_id: bool = True
    astro_base_url: str = "http://api.open-notify.org"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
