"""Dashboard session: owned state, event handlers and the page view."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from start_deck import PROJECT_NAME

from .core.config import DeckConfig
from .core.fetch import FetchResult, FetchTracker
from .core.geolocation import Geolocator, IPGeolocator
from .core.http_client import HTTPClient
from .core.links import LinkRecord, LinkRegistry
from .core.modal import CITY_FORM, LINK_FORM, ModalController
from .core.preferences import DashboardPreferences
from .core.store import KeyValueStore
from .widgets.background import BackgroundWidget
from .widgets.clock import ClockWidget, clock_strings
from .widgets.editable import NotesWidget, TitleWidget
from .widgets.joke import JokeWidget
from .widgets.links import LinksWidget
from .widgets.weather import WEATHER_ERROR_MESSAGE, ForecastDay, WeatherWidget


@dataclass
class DashboardState:
    """Everything the page shows, for one page session."""

    links: List[LinkRecord] = field(default_factory=list)
    title: Optional[str] = None
    notes: Optional[str] = None
    background_image: Optional[str] = None
    weather: List[ForecastDay] = field(default_factory=list)
    weather_error: Optional[str] = None
    joke: Optional[str] = None
    time_text: str = ""
    date_text: str = ""


class Dashboard:
    """One page session over a persisted profile.

    Mutations of links, title, notes, city and background are written to the
    store immediately. Weather, joke and clock live only in memory.
    """

    def __init__(
        self,
        config: DeckConfig,
        store: KeyValueStore,
        client: HTTPClient,
        geolocator: Optional[Geolocator] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.store = store
        self.now = now
        self.state = DashboardState()
        self.tracker = FetchTracker()

        self.registry = LinkRegistry(store)
        self.preferences = DashboardPreferences(store)
        self.modals = ModalController({
            LINK_FORM: self._submit_link_form,
            CITY_FORM: self._submit_city_form,
        })

        keys = config.api_keys
        self.weather_widget = WeatherWidget(
            client,
            params={
                "days": config.forecast_days,
                "weather_key": keys.weather,
                "geocode_key": keys.geocode,
            },
            geolocator=geolocator,
        )
        self.joke_widget = JokeWidget(client)
        self.background_widget = BackgroundWidget(client, params={"unsplash_key": keys.unsplash})
        self.links_widget = LinksWidget(favicon_size=config.favicon_size)
        self.clock_widget = ClockWidget()
        self.title_widget = TitleWidget()
        self.notes_widget = NotesWidget()

    @classmethod
    def create(cls, config: DeckConfig) -> "Dashboard":
        """Build a dashboard wired to the real store, network and locator."""
        client = HTTPClient(timeout=config.http_timeout)
        geolocator = IPGeolocator(
            client,
            provider_url=config.geolocation.provider_url,
            enabled=config.geolocation.enabled,
        )
        return cls(config, KeyValueStore(config.store_path), client, geolocator)

    # --- Startup ---

    def initialize(self):
        """Restore persisted state into every widget."""
        self.state.links = list(self.registry.records)
        self.state.title = self.preferences.title or None
        self.state.notes = self.preferences.notes or None

        saved_background = self.preferences.background_image
        if saved_background:
            self.state.background_image = saved_background
        else:
            self.request_background()

        self.tick()
        city = self.preferences.user_city
        if city:
            self.refresh_weather(city)

    # --- Fetch-driven widgets ---

    def refresh_weather(self, city: Optional[str] = None) -> FetchResult:
        """Fetch the forecast; with no city the device location is used.

        On failure the previous forecast stays and the error banner shows.
        """
        token = self.tracker.begin("weather")
        result = self.weather_widget.fetch(city=city or None, today=self.now().date())
        if self.tracker.finish("weather", token, result):
            if result.ok:
                self.state.weather = list(result.value["days"])
                self.state.weather_error = None
            else:
                self.state.weather_error = WEATHER_ERROR_MESSAGE
            self.tracker.settle("weather")
        return result

    def request_joke(self) -> FetchResult:
        """Replace the joke; a failure leaves the old one in place."""
        token = self.tracker.begin("joke")
        result = self.joke_widget.fetch()
        if self.tracker.finish("joke", token, result):
            if result.ok:
                self.state.joke = result.value
            self.tracker.settle("joke")
        return result

    def request_background(self) -> FetchResult:
        """Fetch a new background and persist it; a failure keeps the old one."""
        token = self.tracker.begin("background")
        result = self.background_widget.fetch()
        if self.tracker.finish("background", token, result):
            if result.ok:
                self.state.background_image = result.value
                self.preferences.background_image = result.value
            self.tracker.settle("background")
        return result

    # --- User edits ---

    def add_link(self, title: str, url: str) -> LinkRecord:
        record = self.registry.add(title, url)
        self.state.links.append(record)
        return record

    def delete_link(self, url: str) -> bool:
        """Delete the first link with this url.

        The rendered item only goes away when the registry removed a record,
        so the page never shows fewer links than are stored.
        """
        removed = self.registry.remove(url)
        if removed:
            for index, record in enumerate(self.state.links):
                if record.url == url:
                    del self.state.links[index]
                    break
        return removed

    def edit_title(self, text: str):
        self.preferences.title = text
        self.state.title = text

    def edit_notes(self, text: str):
        self.preferences.notes = text
        self.state.notes = text

    def set_city(self, city: str) -> FetchResult:
        self.preferences.user_city = city
        return self.refresh_weather(city)

    # --- Modals and forms ---

    def open_modal(self, modal_id: str):
        self.modals.open(modal_id)

    def close_modal(self, modal_id: str):
        self.modals.close(modal_id)

    def submit_form(self, form_id: str, values: Optional[Dict[str, str]] = None):
        self.modals.submit(form_id, values)

    def _submit_link_form(self, fields: Dict[str, str]):
        self.add_link(fields["link-title"], fields["link-url"])

    def _submit_city_form(self, fields: Dict[str, str]):
        self.set_city(fields["city-input"])

    # --- Clock ---

    def tick(self, moment: Optional[datetime] = None):
        self.state.time_text, self.state.date_text = clock_strings(moment or self.now())

    # --- View ---

    def view(self) -> Dict[str, Any]:
        """Describe the whole page from the current state."""
        state = self.state
        return {
            "project_name": PROJECT_NAME,
            "theme": self.config.theme.model_dump(),
            "title": self.title_widget.view(state),
            "clock": self.clock_widget.view(state),
            "background": self.background_widget.view(state),
            "weather": self.weather_widget.view(state),
            "joke": self.joke_widget.view(state),
            "links": self.links_widget.view(state),
            "notes": self.notes_widget.view(state),
            "modals": dict(self.modals.visible),
            "error_message": state.weather_error,
        }
