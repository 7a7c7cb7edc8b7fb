"""Provider backed by the hosted Custom Search element widget."""

from __future__ import annotations

from typing import Any, Protocol

from amanda.config import WidgetSettings
from amanda.domain.models import SearchQuery
from amanda.services.exceptions import (
    ProviderConfigurationError,
    SearchServiceError,
    TransportError,
)
from amanda.services.providers.base import check_payload


class WidgetHost(Protocol):
    """Host environment that runs the widget inside a named mount point.

    ``render`` executes the search in the widget and returns the raw result
    items it displayed, or a dict payload carrying ``error``.
    """

    async def render(self, mount_point: str, query: SearchQuery) -> list[dict[str, Any]] | dict[str, Any]: ...


class EmbeddedWidgetProvider:
    name = "widget"

    def __init__(self, host: WidgetHost | None, settings: WidgetSettings | None = None) -> None:
        if host is None:
            raise ProviderConfigurationError("Widget provider needs a host to mount into.")
        self._host = host
        self._settings = settings or WidgetSettings()

    @property
    def mount_point(self) -> str:
        return self._settings.mount_point

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        try:
            rendered = await self._host.render(self.mount_point, query)
        except SearchServiceError:
            raise
        except Exception as exc:
            raise TransportError(f"widget failed to load: {exc!r}") from exc
        if isinstance(rendered, list):
            return {"items": rendered}
        return check_payload(rendered, provider=self.name)


__all__ = ["EmbeddedWidgetProvider", "WidgetHost"]
