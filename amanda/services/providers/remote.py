"""Direct Google Custom Search JSON API client."""

from __future__ import annotations

from typing import Any

import httpx

from amanda.config import GoogleSearchSettings
from amanda.domain.models import SearchQuery
from amanda.logging import logger
from amanda.services.exceptions import ProviderConfigurationError
from amanda.services.providers.base import _BaseHttpProvider


class RemoteApiProvider(_BaseHttpProvider):
    name = "remote"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: GoogleSearchSettings | None = None,
        *,
        timeout: float = 10,
    ) -> None:
        super().__init__(http_client, timeout=timeout)
        self._settings = settings or GoogleSearchSettings()

    def build_params(self, query: SearchQuery) -> dict[str, str]:
        api_key = self._read_secret(self._settings.api_key)
        if not api_key:
            raise ProviderConfigurationError("Google API key is not configured.")

        params = {
            "key": api_key,
            "cx": self._settings.engine_id,
            "q": query.text,
            "lr": f"lang_{query.locale}",
            "hl": query.locale,
        }
        if query.mode == "images":
            params["searchType"] = "image"
        return params

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        params = self.build_params(query)
        logger.info(
            "google_search_request",
            query=query.text,
            mode=query.mode,
            locale=query.locale,
        )
        data = await self._send(
            lambda: self._client.get(
                str(self._settings.base_url),
                params=params,
                timeout=self._timeout,
            )
        )
        logger.info(
            "google_search_response",
            total_results=(data.get("searchInformation") or {}).get("totalResults"),
            items_count=len(data.get("items") or []),
        )
        return data


__all__ = ["RemoteApiProvider"]
