"""Pydantic models shared by the dispatcher, history and presenter."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SearchMode = Literal["web", "images"]
Locale = Literal["ru", "en"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SearchQuery(BaseModel):
    """One submitted search; the text is stored trimmed."""

    model_config = ConfigDict(frozen=True)

    text: str
    mode: SearchMode = "web"
    locale: Locale = "ru"

    @field_validator("text", mode="before")
    @classmethod
    def _strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def is_blank(self) -> bool:
        return not self.text


class SearchHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    mode: SearchMode = "web"
    captured_at: datetime = Field(default_factory=_utc_now)


class WebResultEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    target_url: str
    snippet: str = ""
    display_source: str = ""
    thumbnail_url: str | None = None
    formatted_url: str | None = None


class ImageResultEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    target_url: str
    thumbnail_url: str
    source_label: str = ""
    size_label: str | None = None
    context_url: str | None = None


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    query: SearchQuery
    sequence: int


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    query: SearchQuery
    reason: str
    hint: str = ""
    diagnostic: str = ""


class Succeeded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["succeeded"] = "succeeded"
    query: SearchQuery
    mode: SearchMode
    entries: list[WebResultEntry] | list[ImageResultEntry] = Field(default_factory=list)
    total_results: int | None = None

    @model_validator(mode="after")
    def _entries_match_mode(self) -> "Succeeded":
        expected = ImageResultEntry if self.mode == "images" else WebResultEntry
        for entry in self.entries:
            if not isinstance(entry, expected):
                raise ValueError(
                    f"{type(entry).__name__} is not allowed in a {self.mode!r} result set"
                )
        return self


SearchOutcome = Annotated[
    Union[Idle, Loading, Failed, Succeeded],
    Field(discriminator="status"),
]


__all__ = [
    "Failed",
    "Idle",
    "ImageResultEntry",
    "Loading",
    "Locale",
    "SearchHistoryEntry",
    "SearchMode",
    "SearchOutcome",
    "SearchQuery",
    "Succeeded",
    "WebResultEntry",
]
