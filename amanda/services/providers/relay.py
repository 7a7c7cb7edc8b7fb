"""Search through a server-side relay function that keeps the API key private."""

from __future__ import annotations

from typing import Any

import httpx

from amanda.config import RelaySettings
from amanda.domain.models import SearchQuery
from amanda.services.exceptions import ProviderConfigurationError
from amanda.services.providers.base import _BaseHttpProvider


class RelayProvider(_BaseHttpProvider):
    """POSTs ``{query, searchType, language}`` and expects the CSE payload back.

    The relay answers failures with ``{"error": "..."}`` and a matching status.
    """

    name = "relay"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: RelaySettings | None = None,
        *,
        timeout: float = 10,
    ) -> None:
        super().__init__(http_client, timeout=timeout)
        self._settings = settings or RelaySettings()
        if not self._settings.url:
            raise ProviderConfigurationError("Relay URL is not configured.")

    def _headers(self) -> dict[str, str]:
        token = self._read_secret(self._settings.auth_token)
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        body = {
            "query": query.text,
            "searchType": query.mode,
            "language": query.locale,
        }
        return await self._send(
            lambda: self._client.post(
                str(self._settings.url),
                json=body,
                headers=self._headers(),
                timeout=self._timeout,
            )
        )


__all__ = ["RelayProvider"]
