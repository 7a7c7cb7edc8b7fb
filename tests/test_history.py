"""Tests for the bounded in-memory search history."""

from __future__ import annotations

from amanda.config import HistorySettings
from amanda.domain.models import SearchHistoryEntry
from amanda.services.history import SearchHistory
from amanda.services.preferences import UserPreferences


def test_record_keeps_newest_first_and_caps_at_ten(history: SearchHistory):
    for index in range(13):
        history.record(SearchHistoryEntry(query=f"q{index}"))

    entries = history.list()
    assert len(entries) == 10
    assert entries[0].query == "q12"
    assert entries[-1].query == "q3"


def test_record_below_limit_keeps_everything(history: SearchHistory):
    for index in range(4):
        history.record(SearchHistoryEntry(query=f"q{index}", mode="images"))

    assert [entry.query for entry in history.list()] == ["q3", "q2", "q1", "q0"]


def test_repeated_query_is_not_deduplicated_by_default(history: SearchHistory):
    history.record(SearchHistoryEntry(query="cats"))
    history.record(SearchHistoryEntry(query="cats"))

    assert [entry.query for entry in history.list()] == ["cats", "cats"]


def test_deduplicate_replaces_identical_head():
    history = SearchHistory(UserPreferences(), HistorySettings(deduplicate=True))
    history.record(SearchHistoryEntry(query="cats"))
    history.record(SearchHistoryEntry(query="cats", mode="images"))
    history.record(SearchHistoryEntry(query="cats", mode="images"))

    assert [(entry.query, entry.mode) for entry in history.list()] == [
        ("cats", "images"),
        ("cats", "web"),
    ]


def test_incognito_suppresses_recording(preferences: UserPreferences, history: SearchHistory):
    history.record(SearchHistoryEntry(query="before"))
    preferences.incognito = True

    assert history.record(SearchHistoryEntry(query="secret")) is False
    assert [entry.query for entry in history.list()] == ["before"]


def test_clear_works_in_incognito(preferences: UserPreferences, history: SearchHistory):
    history.record(SearchHistoryEntry(query="cats"))
    preferences.incognito = True

    history.clear()
    assert history.list() == []


def test_list_returns_a_copy(history: SearchHistory):
    history.record(SearchHistoryEntry(query="cats"))
    history.list().clear()

    assert len(history) == 1
