"""Page rendering tests."""

from __future__ import annotations

from conftest import FakeSession
from start_deck.core.modal import LINK_MODAL
from start_deck.dashboard import Dashboard
from start_deck.render import apply, render_page


class TestRenderPage:
    def test_renders_every_widget(self, dashboard: Dashboard, online: FakeSession) -> None:
        dashboard.initialize()
        dashboard.add_link("Python", "https://python.org")
        dashboard.request_joke()

        html = render_page(dashboard.view())

        assert '<h1 class="dashboard-title" contenteditable="true">My Dashboard</h1>' in html
        assert '<div class="time">09:05</div>' in html
        assert '<div class="date">03 March 2024</div>' in html
        assert 'href="https://python.org" target="_blank"' in html
        assert "https://www.google.com/s2/favicons?domain=python.org&amp;sz=256" in html
        assert 'data-url="https://python.org"' in html
        assert "<h4>Today</h4>" in html
        assert "31.2°C" in html
        assert "Chuck Norris can divide by zero." in html
        assert "background-image: url(https://images.example/p1.jpg)" in html

    def test_user_text_is_escaped(self, dashboard: Dashboard) -> None:
        dashboard.edit_notes("<script>alert(1)</script>")

        html = render_page(dashboard.view())

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_modal_and_error_visibility(self, dashboard: Dashboard) -> None:
        html = render_page(dashboard.view())
        assert 'class="modal" id="link-modal"' in html
        assert 'class="error-message"' in html

        dashboard.open_modal(LINK_MODAL)
        dashboard.refresh_weather("Lagos")  # no routes: fails
        html = render_page(dashboard.view())

        assert 'class="modal visible" id="link-modal"' in html
        assert "Unable to fetch weather data. Please try again later." in html

    def test_apply_writes_file(self, dashboard: Dashboard, tmp_path) -> None:
        output = apply(dashboard.view(), tmp_path / "site" / "index.html")

        assert output.exists()
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
