"""Search page facade tying preferences, identity, dispatch and history together."""

from __future__ import annotations

from amanda.domain.models import Locale, SearchHistoryEntry, SearchMode, SearchOutcome, SearchQuery
from amanda.logging import logger
from amanda.services.dispatcher import SearchDispatcher
from amanda.services.exceptions import AuthenticationRequired
from amanda.services.history import SearchHistory
from amanda.services.identity import IdentityService
from amanda.services.presenter import HistoryView, Notice, ResultPresenter, View
from amanda.services.preferences import PreferenceStore, UserPreferences


class SearchSession:
    def __init__(
        self,
        *,
        dispatcher: SearchDispatcher,
        history: SearchHistory,
        preferences: UserPreferences,
        store: PreferenceStore,
        identity: IdentityService,
        presenter: ResultPresenter | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.history = history
        self.preferences = preferences
        self._store = store
        self._identity = identity
        self._presenter = presenter or ResultPresenter()

    @property
    def user(self) -> str | None:
        return self._identity.current_user()

    async def submit(self, text: str, mode: SearchMode = "web") -> SearchOutcome:
        if self.user is None:
            raise AuthenticationRequired("Sign in to search.")
        query = SearchQuery(text=text, mode=mode, locale=self.preferences.language)
        return await self.dispatcher.dispatch(query)

    def view(self) -> View:
        return self._presenter.present(
            self.dispatcher.outcome,
            self.preferences.language,
            incognito=self.preferences.incognito,
        )

    def reset(self) -> None:
        self.dispatcher.reset()

    async def search_again(self, entry: SearchHistoryEntry) -> SearchOutcome:
        """Re-run a past query with the mode it was recorded under."""

        return await self.submit(entry.query, entry.mode)

    def history_entries(self) -> list[SearchHistoryEntry]:
        return self.history.list()

    def history_view(self) -> HistoryView:
        return self._presenter.present_history(
            self.history.list(),
            self.preferences.language,
            incognito=self.preferences.incognito,
        )

    def clear_history(self) -> Notice:
        self.history.clear()
        logger.info("history_cleared")
        return self._presenter.history_cleared(self.preferences.language)

    def set_language(self, language: Locale) -> None:
        self.preferences.language = language
        self._persist()

    def toggle_theme(self) -> bool:
        self.preferences.dark_mode = not self.preferences.dark_mode
        self._persist()
        return self.preferences.dark_mode

    def toggle_incognito(self) -> bool:
        self.preferences.incognito = not self.preferences.incognito
        self._persist()
        logger.info("incognito_toggled", enabled=self.preferences.incognito)
        return self.preferences.incognito

    async def sign_out(self) -> None:
        await self._identity.sign_out()
        self.dispatcher.reset()

    def _persist(self) -> None:
        self.preferences.save(self._store)


__all__ = ["SearchSession"]
