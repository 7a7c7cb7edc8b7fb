"""Fake providers and payload builders shared by the test modules."""

from __future__ import annotations

import asyncio
from typing import Any

from amanda.domain.models import SearchQuery


class RecordingProvider:
    """Returns canned payloads and remembers what it was asked."""

    name = "recording"

    def __init__(self, payload: dict[str, Any] | None = None) -> None:
        self.payload = payload if payload is not None else {"items": []}
        self.queries: list[SearchQuery] = []

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        self.queries.append(query)
        return self.payload


class GatedProvider:
    """Blocks each query until the test releases its gate."""

    name = "gated"

    def __init__(self, *texts: str) -> None:
        self.gates = {text: asyncio.Event() for text in texts}

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        await self.gates[query.text].wait()
        return {"items": [{"title": query.text, "link": f"https://{query.text}.example"}]}


def web_items(*titles: str) -> list[dict[str, Any]]:
    return [
        {
            "title": title,
            "link": f"https://example.com/{index}",
            "snippet": f"about {title}",
            "displayLink": "example.com",
        }
        for index, title in enumerate(titles, start=1)
    ]

