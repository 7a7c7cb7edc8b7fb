"""Select the configured search provider."""

from __future__ import annotations

import httpx

from amanda.config import SearchSettings
from amanda.services.providers.base import SearchProvider
from amanda.services.providers.mock import MockProvider
from amanda.services.providers.relay import RelayProvider
from amanda.services.providers.remote import RemoteApiProvider
from amanda.services.providers.widget import EmbeddedWidgetProvider, WidgetHost


def build_provider(
    settings: SearchSettings,
    http_client: httpx.AsyncClient | None = None,
    *,
    widget_host: WidgetHost | None = None,
) -> SearchProvider:
    kind = settings.provider
    if kind == "mock":
        return MockProvider(settings.mock)
    if kind == "widget":
        return EmbeddedWidgetProvider(widget_host, settings.widget)
    if http_client is None:
        raise ValueError(f"{kind} provider requires an HTTP client")
    if kind == "relay":
        return RelayProvider(http_client, settings.relay, timeout=settings.request_timeout_seconds)
    return RemoteApiProvider(http_client, settings.google, timeout=settings.request_timeout_seconds)


__all__ = ["build_provider"]
