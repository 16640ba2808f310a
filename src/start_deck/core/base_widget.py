"""Base classes for dashboard widgets."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from .errors import GeolocationError
from .fetch import FetchResult
from .http_client import HTTPClient

# Everything a single request/response cycle is allowed to fail with
FETCH_ERRORS = (
    requests.exceptions.RequestException,
    ValidationError,
    GeolocationError,
    KeyError,
    TypeError,
    ValueError,
)


class BaseWidget(ABC):
    """One visually distinct dashboard region.

    Subclasses turn the current dashboard state into a view description, a
    plain dict handed to the page template. `view` must not touch the store,
    the network or the clock.
    """

    kind: str = ""

    @abstractmethod
    def view(self, state: Any) -> Dict[str, Any]:
        """Build this widget's view description from dashboard state."""


class FetchingWidget(BaseWidget):
    """A widget backed by a third-party API.

    `fetch_data` does the request and parsing and may raise; `fetch` is the
    boundary that turns every failure into a FetchResult.
    """

    def __init__(self, client: HTTPClient, params: Optional[Dict[str, Any]] = None):
        self.client = client
        self.params = params or {}

    @abstractmethod
    def fetch_data(self, **kwargs) -> Any:
        """Fetch and parse the payload."""

    def fetch(self, **kwargs) -> FetchResult:
        try:
            return FetchResult.success(self.fetch_data(**kwargs))
        except FETCH_ERRORS as e:
            print(f"❌ Failed to fetch {self.kind}: {e}")
            return FetchResult.failure(str(e))
