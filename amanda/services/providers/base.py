"""Search provider capability and shared HTTP plumbing."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol

import httpx

from amanda.domain.models import SearchQuery
from amanda.logging import logger
from amanda.services.exceptions import ProviderError, TransportError


class SearchProvider(Protocol):
    """Anything that turns a query into a raw CSE-shaped payload.

    The payload is a dict holding either an ``items`` list or an ``error``.
    Implementations raise ``TransportError`` / ``ProviderError`` on failure.
    """

    name: str

    async def fetch(self, query: SearchQuery) -> dict[str, Any]: ...


class _BaseHttpProvider:
    name = "http"

    def __init__(self, http_client: httpx.AsyncClient, *, timeout: float = 10) -> None:
        self._client = http_client
        self._timeout = timeout

    @staticmethod
    def _read_secret(secret: Any) -> str | None:
        if not secret:
            return None
        try:
            return secret.get_secret_value()
        except AttributeError:
            return str(secret)

    async def _send(self, request: Callable[[], Awaitable[httpx.Response]]) -> dict[str, Any]:
        try:
            response = await request()
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise TransportError(f"{self.name} request failed ({status_code}): {detail}") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"{self.name} request failed: {exc!r}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"{self.name} response is not valid JSON.") from exc
        return check_payload(data, provider=self.name)


def check_payload(data: Any, *, provider: str) -> dict[str, Any]:
    """Reject non-object payloads and payloads that report an error."""

    if not isinstance(data, dict):
        raise ProviderError(f"{provider} response format is invalid.")
    error = data.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else error
        logger.warning("provider_error_payload", provider=provider, error=str(message))
        raise ProviderError(f"{provider} reported an error: {message or 'unknown error'}")
    return data


__all__ = ["SearchProvider", "check_payload"]
