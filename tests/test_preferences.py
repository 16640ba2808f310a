"""Dashboard preference tests."""

from __future__ import annotations

from start_deck.core.preferences import DashboardPreferences
from start_deck.core.store import KeyValueStore


class TestDashboardPreferences:
    def test_absent_values_are_none(self, store: KeyValueStore) -> None:
        prefs = DashboardPreferences(store)

        assert prefs.title is None
        assert prefs.notes is None
        assert prefs.background_image is None
        assert prefs.user_city is None

    def test_each_value_uses_its_own_key(self, store: KeyValueStore) -> None:
        prefs = DashboardPreferences(store)
        prefs.title = "Home"
        prefs.notes = "buy milk"
        prefs.background_image = "https://images.example/p.jpg"
        prefs.user_city = "Lagos"

        assert store.get_item("title") == "Home"
        assert store.get_item("notes") == "buy milk"
        assert store.get_item("backgroundImage") == "https://images.example/p.jpg"
        assert store.get_item("userCity") == "Lagos"

    def test_values_are_independent(self, store: KeyValueStore) -> None:
        prefs = DashboardPreferences(store)
        prefs.user_city = "Lagos"

        assert prefs.title is None
        assert list(store.keys()) == ["userCity"]

    def test_values_survive_reload(self, tmp_path) -> None:
        path = tmp_path / "store.json"
        DashboardPreferences(KeyValueStore(path)).notes = "line one\nline two"

        assert DashboardPreferences(KeyValueStore(path)).notes == "line one\nline two"
