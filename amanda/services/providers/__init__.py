from amanda.services.providers.base import SearchProvider
from amanda.services.providers.factory import build_provider
from amanda.services.providers.mock import MockProvider
from amanda.services.providers.relay import RelayProvider
from amanda.services.providers.remote import RemoteApiProvider
from amanda.services.providers.widget import EmbeddedWidgetProvider, WidgetHost

__all__ = [
    "EmbeddedWidgetProvider",
    "MockProvider",
    "RelayProvider",
    "RemoteApiProvider",
    "SearchProvider",
    "WidgetHost",
    "build_provider",
]
