"""Search dispatch: lifecycle tracking, stale-response guard, history recording."""

from __future__ import annotations

import asyncio
from typing import Any

from amanda.config import DispatchSettings
from amanda.domain.models import (
    Failed,
    Idle,
    Loading,
    SearchHistoryEntry,
    SearchOutcome,
    SearchQuery,
    Succeeded,
)
from amanda.i18n import I18nService
from amanda.logging import logger
from amanda.services.exceptions import (
    ProviderError,
    QueryValidationError,
    StaleResponse,
    TransportError,
)
from amanda.services.history import SearchHistory
from amanda.services.normalize import normalize_items, total_results
from amanda.services.providers.base import SearchProvider
from amanda.utils.retry import retry_async


class SearchDispatcher:
    """Owns the outcome of the most recently issued search.

    Every dispatch gets a sequence number. Only the response belonging to the
    latest sequence is applied; older responses are dropped so a slow request
    can never overwrite a newer one.
    """

    def __init__(
        self,
        provider: SearchProvider,
        history: SearchHistory,
        *,
        i18n: I18nService | None = None,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._provider = provider
        self._history = history
        self._i18n = i18n or I18nService()
        self._settings = settings or DispatchSettings()
        self._outcome: SearchOutcome = Idle()
        self._issued = 0

    @property
    def outcome(self) -> SearchOutcome:
        return self._outcome

    @property
    def latest_sequence(self) -> int:
        return self._issued

    def reset(self) -> None:
        """Return to Idle; any in-flight response becomes stale."""

        self._issued += 1
        self._outcome = Idle()

    async def dispatch(self, query: SearchQuery) -> SearchOutcome:
        try:
            _validate(query)
        except QueryValidationError:
            logger.debug("empty_query_ignored", mode=query.mode)
            return self._outcome

        self._issued += 1
        sequence = self._issued
        self._outcome = Loading(query=query, sequence=sequence)
        logger.info(
            "search_dispatched",
            sequence=sequence,
            provider=self._provider.name,
            query=query.text,
            mode=query.mode,
            locale=query.locale,
        )

        try:
            payload = await self._fetch(query)
            outcome: SearchOutcome = Succeeded(
                query=query,
                mode=query.mode,
                entries=normalize_items(payload, query.mode),
                total_results=total_results(payload),
            )
        except (TransportError, ProviderError) as exc:
            outcome = self._failure(query, exc)
        except BaseException as exc:
            # Configuration errors, bugs and cancellation still end this dispatch.
            if sequence == self._issued:
                self._outcome = self._failure(query, exc)
            raise

        try:
            self._apply(sequence, outcome)
        except StaleResponse:
            logger.info("stale_response", sequence=sequence, latest=self._issued)
            return self._outcome
        return outcome

    async def _fetch(self, query: SearchQuery) -> dict[str, Any]:
        timeout = self._settings.timeout_seconds

        async def _attempt() -> dict[str, Any]:
            if timeout is None:
                return await self._provider.fetch(query)
            try:
                async with asyncio.timeout(timeout):
                    return await self._provider.fetch(query)
            except TimeoutError as exc:
                raise TransportError(f"{self._provider.name} timed out after {timeout}s") from exc

        return await retry_async(
            _attempt,
            max_attempts=self._settings.max_attempts,
            base_delay=self._settings.retry_base_delay,
            retry_on=(TransportError,),
            logger=logger,
            operation_name=f"{self._provider.name}_search",
        )

    def _apply(self, sequence: int, outcome: SearchOutcome) -> None:
        if sequence != self._issued:
            raise StaleResponse(f"response #{sequence} superseded by #{self._issued}")
        self._outcome = outcome
        if isinstance(outcome, Succeeded):
            recorded = self._history.record(
                SearchHistoryEntry(query=outcome.query.text, mode=outcome.mode)
            )
            logger.info(
                "search_succeeded",
                sequence=sequence,
                results=len(outcome.entries),
                history_recorded=recorded,
            )

    def _failure(self, query: SearchQuery, exc: BaseException) -> Failed:
        logger.warning(
            "search_failed",
            provider=self._provider.name,
            query=query.text,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        return Failed(
            query=query,
            reason=self._i18n.gettext("results.error", locale=query.locale),
            hint=self._i18n.gettext("results.error_hint", locale=query.locale),
            diagnostic=str(exc),
        )


def _validate(query: SearchQuery) -> None:
    if query.is_blank:
        raise QueryValidationError("Search query must not be empty.")


__all__ = ["SearchDispatcher"]
