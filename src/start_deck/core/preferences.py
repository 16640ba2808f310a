"""Scalar dashboard preferences, each persisted under its own key."""

from typing import Optional

from .store import KeyValueStore

TITLE_KEY = "title"
NOTES_KEY = "notes"
BACKGROUND_KEY = "backgroundImage"
CITY_KEY = "userCity"


class DashboardPreferences:
    """Title, notes, background image url and last-known city.

    Each value is optional and independent; None means the widget shows its
    default state.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    @property
    def title(self) -> Optional[str]:
        return self.store.get_item(TITLE_KEY)

    @title.setter
    def title(self, value: str):
        self.store.set_item(TITLE_KEY, value)

    @property
    def notes(self) -> Optional[str]:
        return self.store.get_item(NOTES_KEY)

    @notes.setter
    def notes(self, value: str):
        self.store.set_item(NOTES_KEY, value)

    @property
    def background_image(self) -> Optional[str]:
        return self.store.get_item(BACKGROUND_KEY)

    @background_image.setter
    def background_image(self, value: str):
        self.store.set_item(BACKGROUND_KEY, value)

    @property
    def user_city(self) -> Optional[str]:
        return self.store.get_item(CITY_KEY)

    @user_city.setter
    def user_city(self, value: str):
        self.store.set_item(CITY_KEY, value)
