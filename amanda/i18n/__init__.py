from amanda.i18n.service import I18nService

__all__ = ["I18nService"]
