"""Configuration models for StartDeck."""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class ApiKeysConfig(BaseModel):
    """Keys for the key-authenticated third-party APIs."""

    weather: str = ""  # weatherapi.com
    geocode: str = ""  # geocode.maps.co
    unsplash: str = ""  # Unsplash client_id

    class Config:
        extra = 'forbid'  # Reject unknown fields


class GeolocationConfig(BaseModel):
    """Device location lookup used when no city is stored."""

    enabled: bool = True  # False = permission denied
    provider_url: str = "http://ip-api.com/json"

    class Config:
        extra = 'forbid'


class ThemeConfig(BaseModel):
    """Visual theme configuration."""

    background: str = "#1a1a1a"
    text_color: str = "#ffffff"
    card_background: str = "rgba(0, 0, 0, 0.55)"
    border_radius: str = "8px"
    font_family: str = "system-ui, sans-serif"

    class Config:
        extra = 'allow'  # Allow custom CSS variables


class DeckConfig(BaseModel):
    """Top-level configuration for one dashboard profile."""

    store_path: Path = Path("data/startdeck.json")
    output_path: Path = Path("docs/index.html")
    api_keys: ApiKeysConfig = Field(default_factory=ApiKeysConfig)
    geolocation: GeolocationConfig = Field(default_factory=GeolocationConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    forecast_days: int = Field(3, gt=0, le=3)
    clock_period_seconds: float = Field(1.0, gt=0)
    favicon_size: int = Field(256, gt=0)
    http_timeout: Optional[float] = Field(None, gt=0)  # Seconds. None = wait forever

    class Config:
        extra = 'forbid'
