"""Clock widget and the ticker that keeps it current."""

import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.base_widget import BaseWidget
from ..core.utils import format_clock, format_long_date

TickHandler = Callable[[datetime], None]


def clock_strings(moment: datetime) -> Tuple[str, str]:
    """Return ("HH:MM", "DD MonthName YYYY") for a local time."""
    return format_clock(moment), format_long_date(moment)


class ClockWidget(BaseWidget):
    kind = "clock"

    def view(self, state: Any) -> Dict[str, Any]:
        return {"time": state.time_text, "date": state.date_text}


class ClockTicker:
    """Calls `on_tick` with the current local time once per period.

    Runs on a daemon thread until stopped. Ticks are not drift-corrected;
    a slow handler simply delays the next one.
    """

    def __init__(
        self,
        on_tick: TickHandler,
        period: float = 1.0,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.on_tick = on_tick
        self.period = period
        self.now = now
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self):
        self.on_tick(self.now())

    def start(self):
        if self.running:
            return
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name="clock-ticker", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None):
        self._stopped.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self):
        self.tick()
        while not self._stopped.wait(self.period):
            self.tick()
