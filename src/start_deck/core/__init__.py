"""Core framework components."""

from .base_widget import BaseWidget, FetchingWidget
from .config import ApiKeysConfig, DeckConfig, GeolocationConfig, ThemeConfig
from .errors import ConfigError, GeolocationError, StartDeckError
from .fetch import FetchResult, FetchState, FetchTracker
from .http_client import HTTPClient
from .links import LinkRecord, LinkRegistry
from .modal import ModalController
from .preferences import DashboardPreferences
from .store import KeyValueStore

__all__ = [
    "BaseWidget",
    "FetchingWidget",
    "ApiKeysConfig",
    "DeckConfig",
    "GeolocationConfig",
    "ThemeConfig",
    "ConfigError",
    "GeolocationError",
    "StartDeckError",
    "FetchResult",
    "FetchState",
    "FetchTracker",
    "HTTPClient",
    "LinkRecord",
    "LinkRegistry",
    "ModalController",
    "DashboardPreferences",
    "KeyValueStore",
]
