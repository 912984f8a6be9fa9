"""
pomo_tui.py – interactive full-screen countdown
"""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer as Ticker
from textual.widgets import Footer, Static

from pomo_timer import Timer, render_header, render_status

BAR_PADDING = 4
BAR_RESERVED = 20  # room for the clock and the percentage
MIN_BAR_WIDTH = 20
MAX_BAR_WIDTH = 80


def bar_width_for(columns: int) -> int:
    """Return the progress bar width that fits a terminal *columns* wide."""
    width = columns - BAR_PADDING - BAR_RESERVED
    return max(MIN_BAR_WIDTH, min(MAX_BAR_WIDTH, width))


# ── Textual application ──────────────────────────────────────────────────
class PomodoroApp(App):
    """Counts *timer* down once per second; run() returns True on completion."""

    CSS = """
    Screen  { layout: vertical; padding: 1 2; }
    #header { margin-bottom: 1; text-style: bold; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("space", "toggle_pause", "Pause/Resume"),
    ]

    def __init__(self, timer: Timer, interval: float = 1.0):
        self.timer = timer
        self.bar_width = MIN_BAR_WIDTH
        self._interval = interval
        self._ticker: Ticker | None = None
        self._status: Static | None = None
        super().__init__()

    def compose(self) -> ComposeResult:
        yield Static(render_header(self.timer), id="header")
        self._status = Static(render_status(self.timer, self.bar_width), id="status")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        self._ticker = self.set_interval(self._interval, self.advance)

    def on_resize(self, event: events.Resize) -> None:
        self.bar_width = bar_width_for(event.size.width)
        self._redraw()

    def _redraw(self) -> None:
        if self._status is not None:
            self._status.update(render_status(self.timer, self.bar_width))

    def advance(self) -> None:
        """Handle one tick of the periodic interval."""
        finished = self.timer.tick()
        self._redraw()
        if finished:
            self.finish()

    def finish(self) -> None:
        self._stop_ticker()
        self.exit(True)

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def action_toggle_pause(self) -> None:
        self.timer.toggle_pause()
        self._redraw()

    async def action_quit(self) -> None:
        self._stop_ticker()
        self.exit(False)
