"""Tests for the search page facade."""

from __future__ import annotations

import pytest

from amanda.domain.models import Idle, Succeeded
from amanda.services.dispatcher import SearchDispatcher
from amanda.services.exceptions import AuthenticationRequired
from amanda.services.history import SearchHistory
from amanda.services.identity import StaticIdentity
from amanda.services.presenter import IdleView, ResultPresenter, ResultsView
from amanda.services.preferences import INCOGNITO_KEY, InMemoryPreferenceStore, UserPreferences
from amanda.services.session import SearchSession

from fakes import RecordingProvider, web_items


def _session(i18n, *, email="user@example.com", provider=None):
    store = InMemoryPreferenceStore()
    preferences = UserPreferences.load(store)
    history = SearchHistory(preferences)
    provider = provider or RecordingProvider({"items": web_items("a")})
    dispatcher = SearchDispatcher(provider, history, i18n=i18n)
    session = SearchSession(
        dispatcher=dispatcher,
        history=history,
        preferences=preferences,
        store=store,
        identity=StaticIdentity(email),
        presenter=ResultPresenter(i18n),
    )
    return session, store, provider


@pytest.mark.asyncio
async def test_submit_requires_signed_in_user(i18n):
    session, _, provider = _session(i18n, email=None)

    with pytest.raises(AuthenticationRequired):
        await session.submit("cats")
    assert provider.queries == []


@pytest.mark.asyncio
async def test_submit_uses_preferred_language(i18n):
    session, _, provider = _session(i18n)
    session.set_language("en")

    outcome = await session.submit("cats", "web")

    assert isinstance(outcome, Succeeded)
    assert provider.queries[0].locale == "en"
    assert isinstance(session.view(), ResultsView)
    assert [entry.query for entry in session.history_entries()] == ["cats"]


@pytest.mark.asyncio
async def test_incognito_toggle_persists_and_suppresses_history(i18n):
    session, store, _ = _session(i18n)

    assert session.toggle_incognito() is True
    assert store.get(INCOGNITO_KEY) == "true"

    await session.submit("dogs")
    assert session.history_entries() == []


@pytest.mark.asyncio
async def test_clear_history_and_reset(i18n):
    session, _, _ = _session(i18n)
    await session.submit("cats")

    session.clear_history()
    session.reset()

    assert session.history_entries() == []
    assert isinstance(session.dispatcher.outcome, Idle)
    assert isinstance(session.view(), IdleView)


@pytest.mark.asyncio
async def test_sign_out_drops_user_and_results(i18n):
    session, _, _ = _session(i18n)
    await session.submit("cats")

    await session.sign_out()

    assert session.user is None
    assert isinstance(session.dispatcher.outcome, Idle)


def test_toggle_theme_flips_and_saves(i18n):
    session, store, _ = _session(i18n)

    assert session.toggle_theme() is True
    assert store.get("amanda-dark-mode") == "true"
    assert session.toggle_theme() is False


@pytest.mark.asyncio
async def test_search_again_reruns_entry_with_its_mode(i18n):
    session, _, provider = _session(i18n)
    await session.submit("cats", "images")
    [entry] = session.history_entries()

    session.reset()
    outcome = await session.search_again(entry)

    assert isinstance(outcome, Succeeded)
    assert outcome.mode == "images"
    assert [(query.text, query.mode) for query in provider.queries] == [
        ("cats", "images"),
        ("cats", "images"),
    ]
    assert len(session.history_entries()) == 2


@pytest.mark.asyncio
async def test_history_view_and_clear_notice(i18n):
    session, _, _ = _session(i18n)
    session.set_language("en")
    await session.submit("cats")

    assert [entry.query for entry in session.history_view().entries] == ["cats"]

    notice = session.clear_history()

    assert notice.title == "History cleared"
    assert session.history_view().empty_message == "Search history is empty"
