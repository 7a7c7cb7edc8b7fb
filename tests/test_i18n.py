"""Tests for the I18nService translation lookup and fallback."""

from __future__ import annotations

from pathlib import Path

from amanda.i18n import I18nService


def test_gettext_formats_placeholders(tmp_path: Path):
    locale_dir = tmp_path / "locales"
    locale_dir.mkdir()
    (locale_dir / "en.json").write_text('{"results.searching": "Searching {query}"}', encoding="utf-8")
    service = I18nService(locales_path=locale_dir, default_locale="en")

    assert service.gettext("results.searching", query="cats") == "Searching cats"


def test_gettext_falls_back_to_default_then_key(tmp_path: Path):
    locale_dir = tmp_path / "locales"
    locale_dir.mkdir()
    (locale_dir / "en.json").write_text('{"results.error": "Search error"}', encoding="utf-8")
    service = I18nService(locales_path=locale_dir, default_locale="en")

    assert service.gettext("results.error", locale="ru") == "Search error"
    assert service.gettext("missing.key") == "missing.key"


def test_bundled_locales_share_keys():
    service = I18nService()
    en = service._table("en")
    ru = service._table("ru")

    assert en and set(en) == set(ru)
    assert service.gettext("results.error", locale="ru") == "Ошибка поиска"
