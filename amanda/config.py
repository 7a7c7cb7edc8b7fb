"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleSearchSettings(BaseModel):
    api_key: SecretStr | None = None
    engine_id: str = Field(default="d6e5667695c10479f", min_length=1)
    base_url: AnyHttpUrl = Field(default="https://www.googleapis.com/customsearch/v1")


class RelaySettings(BaseModel):
    url: AnyHttpUrl | None = Field(
        default=None,
        description="Server-side search function that holds the Google API key.",
    )
    auth_token: SecretStr | None = None


class WidgetSettings(BaseModel):
    mount_point: str = Field(default="gcse-results", min_length=1)


class HistorySettings(BaseModel):
    limit: int = Field(default=10, ge=1, le=100)
    deduplicate: bool = False


class DispatchSettings(BaseModel):
    max_attempts: int = Field(default=1, ge=1, le=5)
    retry_base_delay: float = Field(default=0.5, ge=0)
    timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class MockSettings(BaseModel):
    latency_seconds: float = Field(default=0.0, ge=0)
    result_count: int = Field(default=3, ge=0, le=10)


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AMANDA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    provider: Literal["remote", "relay", "widget", "mock"] = "remote"
    default_language: Literal["ru", "en"] = "ru"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    google: GoogleSearchSettings = Field(default_factory=GoogleSearchSettings)
    relay: RelaySettings = Field(default_factory=RelaySettings)
    widget: WidgetSettings = Field(default_factory=WidgetSettings)
    mock: MockSettings = Field(default_factory=MockSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)


@lru_cache
def get_settings() -> SearchSettings:
    """Return cached settings instance."""

    return SearchSettings()


__all__ = [
    "DispatchSettings",
    "GoogleSearchSettings",
    "HistorySettings",
    "MockSettings",
    "RelaySettings",
    "SearchSettings",
    "WidgetSettings",
    "get_settings",
]
