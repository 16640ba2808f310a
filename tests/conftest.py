"""Shared fixtures: fake HTTP session, payloads and a wired dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest
import requests

from start_deck.core.config import DeckConfig
from start_deck.core.errors import GeolocationError
from start_deck.core.geolocation import Coordinates
from start_deck.core.http_client import HTTPClient
from start_deck.core.store import KeyValueStore
from start_deck.dashboard import Dashboard
from start_deck.widgets.background import UNSPLASH_URL
from start_deck.widgets.joke import JOKE_URL
from start_deck.widgets.weather import FORECAST_URL, GEOCODE_URL

FIXED_NOW = datetime(2024, 3, 3, 9, 5, 42)


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    @property
    def text(self) -> str:
        return str(self.payload)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if isinstance(self.payload, str):
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Stands in for requests.Session; answers by URL and records calls."""

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.calls: list[tuple[str, dict]] = []

    def route(self, url: str, payload: Any = None, status: int = 200, error: Exception | None = None) -> None:
        self.routes[url] = (payload, status, error)

    def get(self, url, params=None, headers=None, timeout=None) -> FakeResponse:
        self.calls.append((url, dict(params or {})))
        if url not in self.routes:
            raise requests.ConnectionError(f"No route to {url}")
        payload, status, error = self.routes[url]
        if error is not None:
            raise error
        return FakeResponse(payload, status)

    def calls_to(self, url: str) -> list[dict]:
        return [params for called, params in self.calls if called == url]

    def close(self) -> None:
        pass


class FakeGeolocator:
    def __init__(self, coords: Coordinates | None = None, denied: bool = False) -> None:
        self.coords = coords or Coordinates(lat=6.45, lon=3.39)
        self.denied = denied
        self.calls = 0

    def locate(self) -> Coordinates:
        self.calls += 1
        if self.denied:
            raise GeolocationError("User denied Geolocation")
        return self.coords


def forecast_payload(*days: tuple[str, float]) -> dict:
    days = days or (("Sunny", 31.2), ("Partly cloudy", 29.0), ("Light rain", 27.5))
    return {
        "location": {"name": "Lagos"},
        "forecast": {
            "forecastday": [
                {
                    "date": f"2024-03-0{3 + i}",
                    "day": {
                        "avgtemp_c": temp,
                        "condition": {"text": text, "icon": f"//cdn.weatherapi.com/{i}.png"},
                    },
                }
                for i, (text, temp) in enumerate(days)
            ]
        },
    }


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> HTTPClient:
    return HTTPClient(session=session)


@pytest.fixture
def store(tmp_path) -> KeyValueStore:
    return KeyValueStore(tmp_path / "store.json")


@pytest.fixture
def config(tmp_path) -> DeckConfig:
    return DeckConfig(
        store_path=tmp_path / "store.json",
        output_path=tmp_path / "out" / "index.html",
    )


@pytest.fixture
def geolocator() -> FakeGeolocator:
    return FakeGeolocator()


@pytest.fixture
def online(session: FakeSession) -> FakeSession:
    """Every API answers successfully."""
    session.route(FORECAST_URL, forecast_payload())
    session.route(GEOCODE_URL, {"address": {"city": "Lagos", "country": "Nigeria"}})
    session.route(JOKE_URL, {"id": "abc", "value": "Chuck Norris can divide by zero."})
    session.route(UNSPLASH_URL, {"id": "p1", "urls": {"full": "https://images.example/p1.jpg"}})
    return session


@pytest.fixture
def dashboard(config, store, client, geolocator) -> Dashboard:
    return Dashboard(config, store, client, geolocator, now=lambda: FIXED_NOW)
