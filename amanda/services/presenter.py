"""Project a search outcome into a display-ready view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from amanda.domain.models import (
    Failed,
    Idle,
    ImageResultEntry,
    Loading,
    Locale,
    SearchHistoryEntry,
    SearchMode,
    SearchOutcome,
    Succeeded,
    WebResultEntry,
)
from amanda.i18n import I18nService


@dataclass(slots=True, frozen=True)
class QuickLink:
    name: str
    url: str


QUICK_LINKS: tuple[QuickLink, ...] = (
    QuickLink("YouTube", "https://youtube.com"),
    QuickLink("Wikipedia", "https://wikipedia.org"),
    QuickLink("TikTok", "https://tiktok.com"),
    QuickLink("GitHub", "https://github.com"),
    QuickLink("Twitter", "https://twitter.com"),
    QuickLink("Instagram", "https://instagram.com"),
)


@dataclass(slots=True, frozen=True)
class IdleView:
    title: str
    subtitle: str
    quick_links_title: str
    quick_links_subtitle: str = ""
    quick_links: tuple[QuickLink, ...] = QUICK_LINKS
    footer: str = ""
    incognito_notice: str | None = None
    kind: str = "idle"


@dataclass(slots=True, frozen=True)
class LoadingView:
    message: str
    query: str
    kind: str = "loading"


@dataclass(slots=True, frozen=True)
class ErrorView:
    message: str
    hint: str
    detail: str = ""
    kind: str = "error"


@dataclass(slots=True, frozen=True)
class ResultsView:
    mode: SearchMode
    heading: str
    badge: str
    entries: tuple[WebResultEntry, ...] | tuple[ImageResultEntry, ...] = field(default_factory=tuple)
    visit_label: str = ""
    empty_message: str | None = None
    kind: str = "results"


View = Union[IdleView, LoadingView, ErrorView, ResultsView]


@dataclass(slots=True, frozen=True)
class HistoryView:
    title: str
    clear_label: str
    entries: tuple[SearchHistoryEntry, ...] = ()
    empty_message: str | None = None
    visible: bool = True


@dataclass(slots=True, frozen=True)
class Notice:
    title: str
    detail: str


class ResultPresenter:
    def __init__(self, i18n: I18nService | None = None) -> None:
        self._i18n = i18n or I18nService()

    def present(self, outcome: SearchOutcome, locale: Locale, *, incognito: bool = False) -> View:
        _ = self._translator(locale)
        if isinstance(outcome, Loading):
            text = outcome.query.text
            return LoadingView(message=_("results.searching", query=text), query=text)
        if isinstance(outcome, Failed):
            # The outcome already carries text in the locale it was issued with.
            return ErrorView(
                message=outcome.reason,
                hint=outcome.hint or _("results.error_hint"),
                detail=_("results.error_detail"),
            )
        if isinstance(outcome, Succeeded):
            heading_key = "results.images" if outcome.mode == "images" else "results.web"
            return ResultsView(
                mode=outcome.mode,
                heading=_(heading_key),
                badge=outcome.query.text,
                entries=tuple(outcome.entries),
                visit_label=_("results.visit_site"),
                empty_message=None if outcome.entries else _("results.none"),
            )
        if isinstance(outcome, Idle):
            return IdleView(
                title=_("app.title"),
                subtitle=_("app.subtitle"),
                quick_links_title=_("quick_links.title"),
                quick_links_subtitle=_("quick_links.popular"),
                footer=_("app.author"),
                incognito_notice=_("app.incognito_active") if incognito else None,
            )
        raise TypeError(f"Unsupported outcome: {outcome!r}")

    def present_history(
        self, entries: Sequence[SearchHistoryEntry], locale: Locale, *, incognito: bool = False
    ) -> HistoryView:
        """History dropdown; hidden while incognito is on."""

        _ = self._translator(locale)
        return HistoryView(
            title=_("history.title"),
            clear_label=_("history.clear"),
            entries=tuple(entries),
            empty_message=None if entries else _("history.empty"),
            visible=not incognito,
        )

    def history_cleared(self, locale: Locale) -> Notice:
        _ = self._translator(locale)
        return Notice(title=_("history.cleared"), detail=_("history.cleared_detail"))

    def _translator(self, locale: Locale):
        def _(key: str, **kwargs) -> str:
            return self._i18n.gettext(key, locale=locale, **kwargs)

        return _


__all__ = [
    "ErrorView",
    "HistoryView",
    "IdleView",
    "LoadingView",
    "Notice",
    "QUICK_LINKS",
    "QuickLink",
    "ResultPresenter",
    "ResultsView",
    "View",
]
