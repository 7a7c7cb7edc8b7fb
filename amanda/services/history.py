"""Bounded in-memory search history, newest first."""

from __future__ import annotations

from amanda.config import HistorySettings
from amanda.domain.models import SearchHistoryEntry
from amanda.services.preferences import UserPreferences


class SearchHistory:
    """Per-session list of past queries.

    Recording is suppressed while the shared preferences have incognito on.
    Clearing always works. Nothing is persisted.
    """

    def __init__(
        self,
        preferences: UserPreferences,
        settings: HistorySettings | None = None,
    ) -> None:
        self._preferences = preferences
        self._settings = settings or HistorySettings()
        self._entries: list[SearchHistoryEntry] = []

    @property
    def limit(self) -> int:
        return self._settings.limit

    def record(self, entry: SearchHistoryEntry) -> bool:
        """Prepend ``entry``; return False when incognito suppressed it."""

        if self._preferences.incognito:
            return False
        entries = self._entries
        if (
            self._settings.deduplicate
            and entries
            and entries[0].query == entry.query
            and entries[0].mode == entry.mode
        ):
            entries = entries[1:]
        self._entries = [entry, *entries][: self.limit]
        return True

    def clear(self) -> None:
        self._entries = []

    def list(self) -> list[SearchHistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["SearchHistory"]
