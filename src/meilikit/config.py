from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from meilikit.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "Meilikit"
    env: str = "development"
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class MeilisearchConfig(BaseModel):
    """Connection settings for the Meilisearch server."""

    host: str = "http://localhost:7700"
    api_key: Optional[str] = None  # Master or API key, sent as a bearer token
    timeout: float = 30.0  # Per-request timeout in seconds
    verify_ssl: bool = True


class TaskPollingConfig(BaseModel):
    """Defaults used when waiting for asynchronous tasks."""

    interval_ms: int = Field(default=50, gt=0)
    timeout_ms: int = Field(default=5000, gt=0)


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="MEILIKIT_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = Field(default_factory=AppConfig)
    meilisearch: MeilisearchConfig = Field(default_factory=MeilisearchConfig)
    tasks: TaskPollingConfig = Field(default_factory=TaskPollingConfig)


def load_settings() -> Settings:
    """Load settings from environment variables and .env only.

    Raises ``ConfigError`` when a value fails validation.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid meilikit settings: {exc}") from exc
