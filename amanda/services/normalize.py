"""Map raw Custom Search payloads onto result entries."""

from __future__ import annotations

from typing import Any

from amanda.domain.models import ImageResultEntry, SearchMode, WebResultEntry
from amanda.services.exceptions import ProviderError


def normalize_items(
    payload: dict[str, Any], mode: SearchMode
) -> list[WebResultEntry] | list[ImageResultEntry]:
    """Build entries in provider order.

    Raises ``ProviderError`` when ``items`` or an item's ``image`` block has
    the wrong shape. Non-object items are skipped.
    """

    items = payload.get("items") or []
    if not isinstance(items, list):
        raise ProviderError(f"'items' must be a list, got {type(items).__name__}")
    if mode == "images":
        return [_image_entry(item) for item in items if isinstance(item, dict)]
    return [_web_entry(item) for item in items if isinstance(item, dict)]


def total_results(payload: dict[str, Any]) -> int | None:
    info = payload.get("searchInformation")
    if not isinstance(info, dict):
        return None
    try:
        return int(info.get("totalResults"))
    except (TypeError, ValueError):
        return None


def _web_entry(item: dict[str, Any]) -> WebResultEntry:
    return WebResultEntry(
        title=_text(item.get("title")),
        target_url=_text(item.get("link")),
        snippet=_text(item.get("snippet")),
        display_source=_text(item.get("displayLink")),
        thumbnail_url=_thumbnail(item.get("pagemap")),
        formatted_url=_text(item.get("formattedUrl")) or None,
    )


def _image_entry(item: dict[str, Any]) -> ImageResultEntry:
    image = item.get("image") or {}
    if not isinstance(image, dict):
        raise ProviderError(f"image result {item.get('title')!r} has a malformed 'image' block")
    link = _text(item.get("link"))
    return ImageResultEntry(
        title=_text(item.get("title")),
        target_url=link,
        thumbnail_url=_text(image.get("thumbnailLink")) or link,
        source_label=_text(item.get("displayLink")),
        size_label=_size_label(image.get("width"), image.get("height")),
        context_url=_text(image.get("contextLink")) or None,
    )


def _thumbnail(pagemap: Any) -> str | None:
    if not isinstance(pagemap, dict):
        return None
    for key in ("cse_thumbnail", "cse_image"):
        src = _first_src(pagemap.get(key))
        if src:
            return src
    return None


def _first_src(candidates: Any) -> str | None:
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if isinstance(first, dict):
        return _text(first.get("src")) or None
    return None


def _size_label(width: Any, height: Any) -> str | None:
    if not width or not height:
        return None
    return f"{width}x{height}"


def _text(value: Any) -> str:
    if value in (None, ""):
        return ""
    return str(value)


__all__ = ["normalize_items", "total_results"]
