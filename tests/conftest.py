"""Shared fixtures for dispatcher, history and presenter tests."""

from __future__ import annotations

import pytest

from amanda.i18n import I18nService
from amanda.services.history import SearchHistory
from amanda.services.preferences import UserPreferences


@pytest.fixture
def preferences() -> UserPreferences:
    return UserPreferences(language="en")


@pytest.fixture
def history(preferences: UserPreferences) -> SearchHistory:
    return SearchHistory(preferences)


@pytest.fixture
def i18n() -> I18nService:
    return I18nService(default_locale="en")
