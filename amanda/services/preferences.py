"""User preferences (language, theme, incognito) and their key/value storage."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from amanda.domain.models import Locale

LANGUAGE_KEY = "amanda-language"
DARK_MODE_KEY = "amanda-dark-mode"
INCOGNITO_KEY = "amanda-incognito"

_SUPPORTED_LANGUAGES = ("ru", "en")


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    """Process-local store; values live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class UserPreferences(BaseModel):
    language: Locale = "ru"
    dark_mode: bool = False
    incognito: bool = False

    @classmethod
    def load(cls, store: PreferenceStore, *, default_language: Locale = "ru") -> "UserPreferences":
        language = store.get(LANGUAGE_KEY)
        if language not in _SUPPORTED_LANGUAGES:
            language = default_language
        return cls(
            language=language,
            dark_mode=store.get(DARK_MODE_KEY) == "true",
            incognito=store.get(INCOGNITO_KEY) == "true",
        )

    def save(self, store: PreferenceStore) -> None:
        store.set(LANGUAGE_KEY, self.language)
        store.set(DARK_MODE_KEY, _flag(self.dark_mode))
        store.set(INCOGNITO_KEY, _flag(self.incognito))


def _flag(value: bool) -> str:
    return "true" if value else "false"


__all__ = [
    "DARK_MODE_KEY",
    "INCOGNITO_KEY",
    "InMemoryPreferenceStore",
    "LANGUAGE_KEY",
    "PreferenceStore",
    "UserPreferences",
]
