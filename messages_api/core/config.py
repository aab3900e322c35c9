"""Configuration management for the Messages API client."""

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MessagesSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Log file path; unset or empty keeps output on stdout only",
    )

    api_base: AnyHttpUrl = Field(
        "https://api.anthropic.com", description="Messages API endpoint"
    )
    messages_path: str = Field("/v1/messages", description="Create-message route")
    count_tokens_path: str = Field(
        "/v1/messages/count_tokens", description="Token counting route"
    )
    request_timeout: float = Field(60.0, gt=0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="MESSAGES_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> MessagesSettings:
    """Return a cached MessagesSettings instance."""

    return MessagesSettings()

