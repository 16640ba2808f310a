"""Device location lookup used by the weather widget."""

from dataclasses import dataclass
from typing import Protocol

import requests

from .errors import GeolocationError
from .http_client import HTTPClient


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


class Geolocator(Protocol):
    """Anything that can report the device's coordinates."""

    def locate(self) -> Coordinates:
        """Return coordinates or raise GeolocationError."""
        ...


class IPGeolocator:
    """Approximate device location from the public IP address.

    Stands in for the browser's geolocation prompt. A disabled locator
    behaves like a denied permission.
    """

    def __init__(self, client: HTTPClient, provider_url: str = "http://ip-api.com/json", enabled: bool = True):
        self.client = client
        self.provider_url = provider_url
        self.enabled = enabled

    def locate(self) -> Coordinates:
        if not self.enabled:
            raise GeolocationError("User denied Geolocation")

        try:
            data = self.client.get(self.provider_url, response_type="json")
        except (requests.exceptions.RequestException, ValueError) as e:
            raise GeolocationError(f"Position unavailable: {e}") from e

        if not isinstance(data, dict):
            raise GeolocationError("Position unavailable: malformed response")

        # ip-api.com reports failures in-band with status="fail"
        if data.get("status") == "fail":
            raise GeolocationError(f"Position unavailable: {data.get('message', 'unknown error')}")

        try:
            return Coordinates(lat=float(data["lat"]), lon=float(data["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeolocationError(f"Position unavailable: malformed response ({e})") from e
