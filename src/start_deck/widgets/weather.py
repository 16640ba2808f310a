"""Weather widget using weatherapi.com, with geocode.maps.co for the city."""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ..core.base_widget import FetchingWidget
from ..core.errors import GeolocationError
from ..core.geolocation import Geolocator
from ..core.http_client import HTTPClient
from ..core.utils import forecast_day_labels

WEATHER_ERROR_MESSAGE = "Unable to fetch weather data. Please try again later."

GEOCODE_URL = "https://geocode.maps.co/reverse"
FORECAST_URL = "http://api.weatherapi.com/v1/forecast.json"


# --- Payload models (only the fields we read) ---

class _Address(BaseModel):
    city: str


class ReverseGeocodePayload(BaseModel):
    address: _Address


class _Condition(BaseModel):
    text: str
    icon: str


class _Day(BaseModel):
    avgtemp_c: float
    condition: _Condition


class _ForecastDayEntry(BaseModel):
    day: _Day


class _Forecast(BaseModel):
    forecastday: List[_ForecastDayEntry]


class ForecastPayload(BaseModel):
    forecast: _Forecast


class ForecastDay(BaseModel):
    """One rendered forecast item."""

    label: str  # "Today", "Tomorrow", weekday name
    description: str
    temperature_c: float
    icon_url: str


class WeatherWidget(FetchingWidget):
    """Displays a multi-day forecast for the stored city or the device location.

    Optional params:
        - days: Number of forecast days (default: 3)
        - weather_key: weatherapi.com key
        - geocode_key: geocode.maps.co key
    """

    kind = "weather"

    def __init__(
        self,
        client: HTTPClient,
        params: Optional[Dict[str, Any]] = None,
        geolocator: Optional[Geolocator] = None,
    ):
        super().__init__(client, params)
        self.geolocator = geolocator

    def resolve_city(self) -> str:
        """Find the city name for the current device location."""
        if self.geolocator is None:
            raise GeolocationError("Geolocation is not supported")

        coords = self.geolocator.locate()
        data = self.client.get(
            GEOCODE_URL,
            params={
                "lat": coords.lat,
                "lon": coords.lon,
                "api_key": self.params.get("geocode_key", ""),
            },
        )
        city = ReverseGeocodePayload.model_validate(data).address.city
        print(f"📍 Located device in {city}")
        return city

    def fetch_data(self, city: Optional[str] = None, today: Optional[date] = None) -> Dict[str, Any]:
        """Fetch the forecast; geolocation is only used when no city is given."""
        days = self.params.get("days", 3)
        city_name = city or self.resolve_city()

        data = self.client.get(
            FORECAST_URL,
            params={
                "key": self.params.get("weather_key", ""),
                "q": city_name,
                "days": days,
                "aqi": "no",
                "alerts": "no",
            },
        )
        payload = ForecastPayload.model_validate(data)

        entries = payload.forecast.forecastday
        if len(entries) < days:
            raise ValueError(f"Expected {days} forecast days, got {len(entries)}")

        labels = forecast_day_labels(today or date.today(), days)
        forecast = [
            ForecastDay(
                label=label,
                description=entry.day.condition.text,
                temperature_c=entry.day.avgtemp_c,
                icon_url=entry.day.condition.icon,
            )
            for label, entry in zip(labels, entries)
        ]

        print(f"✅ Fetched {len(forecast)}-day forecast for {city_name}")
        return {"city": city_name, "days": forecast}

    def view(self, state: Any) -> Dict[str, Any]:
        return {
            "items": [
                {
                    "label": day.label,
                    "description": day.description,
                    "temperature": f"{day.temperature_c + 0.0:g}°C",  # -0.0 prints as 0
                    "icon_url": day.icon_url,
                }
                for day in state.weather
            ],
            "error": state.weather_error,
        }
