"""Command-line entrypoint: run one search and print the rendered view."""

from __future__ import annotations

import asyncio
import sys

import httpx

from amanda.config import SearchSettings, get_settings
from amanda.domain.models import Failed
from amanda.i18n import I18nService
from amanda.logging import configure_logging, logger
from amanda.services.dispatcher import SearchDispatcher
from amanda.services.exceptions import ProviderConfigurationError
from amanda.services.history import SearchHistory
from amanda.services.identity import IdentityService, StaticIdentity
from amanda.services.presenter import ErrorView, IdleView, LoadingView, ResultPresenter, View
from amanda.services.preferences import InMemoryPreferenceStore, PreferenceStore, UserPreferences
from amanda.services.providers import build_provider
from amanda.services.session import SearchSession


def build_session(
    settings: SearchSettings,
    http_client: httpx.AsyncClient | None,
    *,
    store: PreferenceStore | None = None,
    identity: IdentityService | None = None,
) -> SearchSession:
    store = store or InMemoryPreferenceStore()
    preferences = UserPreferences.load(store, default_language=settings.default_language)
    i18n = I18nService(default_locale=settings.default_language)
    history = SearchHistory(preferences, settings.history)
    dispatcher = SearchDispatcher(
        build_provider(settings, http_client),
        history,
        i18n=i18n,
        settings=settings.dispatch,
    )
    return SearchSession(
        dispatcher=dispatcher,
        history=history,
        preferences=preferences,
        store=store,
        identity=identity or StaticIdentity("local@amanda"),
        presenter=ResultPresenter(i18n),
    )


def render_text(view: View) -> str:
    if isinstance(view, IdleView):
        links = ", ".join(link.name for link in view.quick_links)
        return f"{view.title}\n{view.subtitle}\n{view.quick_links_title}: {links}"
    if isinstance(view, LoadingView):
        return view.message
    if isinstance(view, ErrorView):
        message = f"{view.message}: {view.detail}" if view.detail else view.message
        return f"{message}\n{view.hint}"
    lines = [f"{view.heading} \"{view.badge}\""]
    if view.empty_message:
        lines.append(view.empty_message)
    for index, entry in enumerate(view.entries, start=1):
        source = getattr(entry, "display_source", None) or getattr(entry, "source_label", "")
        lines.append(f"{index}. {entry.title} [{source}]\n   {entry.target_url}")
    return "\n".join(lines)


async def main(argv: list[str]) -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.provider == "widget":
        print(
            "The widget provider needs a browser host; choose remote, relay or mock for the CLI.",
            file=sys.stderr,
        )
        return 2

    mode = "web"
    words = []
    for arg in argv:
        if arg in ("--images", "-i"):
            mode = "images"
        else:
            words.append(arg)

    async with httpx.AsyncClient() as client:
        try:
            session = build_session(settings, client)
        except ProviderConfigurationError as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            return 2
        logger.info("search_cli_starting", provider=settings.provider, environment=settings.environment)
        try:
            outcome = await session.submit(" ".join(words), mode)
        except ProviderConfigurationError as exc:
            print(render_text(session.view()), file=sys.stderr)
            print(f"Configuration error: {exc}", file=sys.stderr)
            return 2
    if isinstance(outcome, Failed):
        print(render_text(session.view()), file=sys.stderr)
        return 1
    print(render_text(session.view()))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main(sys.argv[1:])))


if __name__ == "__main__":
    run()
