"""Canned results for demos and offline development."""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import quote_plus

from amanda.config import MockSettings
from amanda.domain.models import SearchQuery


class MockProvider:
    name = "mock"

    def __init__(self, settings: MockSettings | None = None) -> None:
        self._settings = settings or MockSettings()

    async def fetch(self, query: SearchQuery) -> dict[str, Any]:
        if self._settings.latency_seconds:
            await asyncio.sleep(self._settings.latency_seconds)
        slug = quote_plus(query.text)
        count = self._settings.result_count
        if query.mode == "images":
            items = [_image_item(query.text, slug, index) for index in range(1, count + 1)]
        else:
            items = [_web_item(query.text, slug, index) for index in range(1, count + 1)]
        return {
            "searchInformation": {"totalResults": str(count)},
            "items": items,
        }


def _web_item(text: str, slug: str, index: int) -> dict[str, Any]:
    link = f"https://example.com/{slug}/{index}"
    return {
        "title": f"{text}: result {index}",
        "link": link,
        "snippet": f"Sample description number {index} for \"{text}\".",
        "displayLink": "example.com",
        "formattedUrl": link,
    }


def _image_item(text: str, slug: str, index: int) -> dict[str, Any]:
    return {
        "title": f"{text}: image {index}",
        "link": f"https://images.example.com/{slug}/{index}.jpg",
        "displayLink": "images.example.com",
        "image": {
            "contextLink": f"https://example.com/{slug}/{index}",
            "thumbnailLink": f"https://images.example.com/{slug}/{index}_thumb.jpg",
            "width": 800,
            "height": 600,
        },
    }


__all__ = ["MockProvider"]
