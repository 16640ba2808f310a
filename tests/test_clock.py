"""Clock ticker tests."""

from __future__ import annotations

import threading
from datetime import datetime

from start_deck.widgets.clock import ClockTicker, clock_strings


class TestClockStrings:
    def test_instant(self) -> None:
        assert clock_strings(datetime(2024, 3, 3, 9, 5, 1)) == ("09:05", "03 March 2024")


class TestClockTicker:
    def test_tick_passes_current_time(self) -> None:
        seen = []
        moment = datetime(2024, 3, 3, 9, 5)
        ticker = ClockTicker(seen.append, now=lambda: moment)

        ticker.tick()

        assert seen == [moment]

    def test_runs_until_stopped(self) -> None:
        ticks = []
        enough = threading.Event()

        def on_tick(moment: datetime) -> None:
            ticks.append(moment)
            if len(ticks) >= 3:
                enough.set()

        ticker = ClockTicker(on_tick, period=0.01)
        ticker.start()
        try:
            assert enough.wait(timeout=5)
            assert ticker.running
        finally:
            ticker.stop(timeout=5)

        assert not ticker.running
        count = len(ticks)
        enough.clear()
        assert not enough.wait(timeout=0.05)
        assert len(ticks) == count

    def test_start_twice_keeps_one_thread(self) -> None:
        ticker = ClockTicker(lambda moment: None, period=10)
        ticker.start()
        thread = ticker._thread
        try:
            ticker.start()
            assert ticker._thread is thread
        finally:
            ticker.stop(timeout=5)
