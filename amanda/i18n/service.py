"""JSON-backed translation tables for the search UI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class I18nService:
    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale
        self._tables: dict[str, dict[str, str]] = {}

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        loc = (locale or self.default_locale).lower()
        text = self._table(loc).get(key)
        if text is None and loc != self.default_locale:
            text = self._table(self.default_locale).get(key)
        if text is None:
            text = key
        return text.format(**kwargs) if kwargs else text

    def _table(self, locale: str) -> dict[str, str]:
        table = self._tables.get(locale)
        if table is None:
            file_path = self.locales_path / f"{locale}.json"
            if file_path.exists():
                with file_path.open("r", encoding="utf-8") as fp:
                    table = json.load(fp)
            else:
                table = {}
            self._tables[locale] = table
        return table


__all__ = ["I18nService"]
