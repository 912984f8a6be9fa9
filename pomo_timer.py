"""
pomo_timer.py – countdown state, duration parsing and text rendering
"""

from __future__ import annotations

import re
from dataclasses import dataclass

FILLED_CELL = "█"
EMPTY_CELL = "░"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_UNITS = {"m": 60, "s": 1}


class InvalidDuration(ValueError):
    """Raised when a duration token cannot be parsed."""

    def __init__(self, token: str, reason: str = "invalid duration"):
        self.token = token
        super().__init__(f"{reason}: {token}")


# ── parsing ──────────────────────────────────────────────────────────────
def parse_duration(token: str) -> int:
    """Return the number of seconds described by *token*.

    ``30m`` and ``30`` are minutes, ``30s`` is seconds. Only one unit
    marker is stripped, so ``5ms`` is rejected. Signed values are allowed.
    """
    unit = _UNITS["m"]
    number = token
    if token[-1:] in _UNITS:
        unit = _UNITS[token[-1]]
        number = token[:-1]

    if not _INTEGER_RE.fullmatch(number):
        raise InvalidDuration(token)
    return int(number) * unit


# ── timer model ──────────────────────────────────────────────────────────
@dataclass
class Timer:
    total: int
    remaining: int
    is_rest: bool = False
    paused: bool = False

    def __post_init__(self) -> None:
        if self.remaining > self.total:
            raise ValueError(
                f"remaining ({self.remaining}) exceeds total ({self.total})"
            )

    def __setattr__(self, name: str, value) -> None:
        if name == "total" and "total" in self.__dict__:
            raise AttributeError("total is fixed once the timer is built")
        super().__setattr__(name, value)

    @classmethod
    def start(cls, total: int, is_rest: bool = False) -> Timer:
        return cls(total=total, remaining=total, is_rest=is_rest)

    @property
    def completed(self) -> bool:
        return self.remaining <= 0

    @property
    def percentage(self) -> float:
        if self.total <= 0:
            return 100.0
        return (self.total - self.remaining) / self.total * 100

    def tick(self) -> bool:
        """Advance one second; return True on the tick that reaches zero."""
        if self.paused or self.remaining <= 0:
            return False
        self.remaining -= 1
        return self.remaining <= 0

    def toggle_pause(self) -> None:
        self.paused = not self.paused


# ── rendering ────────────────────────────────────────────────────────────
def format_time(seconds: int) -> str:
    """Return *seconds* as ``MM:SS``; minutes are never folded into hours."""
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


def create_progress_bar(percentage: float, width: int) -> str:
    filled = int(percentage / 100 * width)
    filled = max(0, min(width, filled))
    return FILLED_CELL * filled + EMPTY_CELL * (width - filled)


def _title(timer: Timer) -> tuple[str, str]:
    return ("☕", "Break Timer") if timer.is_rest else ("🍅", "Pomodoro Timer")


def render_header(timer: Timer) -> str:
    emoji, title = _title(timer)
    if timer.total < 60:
        return f"{emoji} {title}: {timer.total} seconds"
    return f"{emoji} {title}: {timer.total / 60:.1f} minutes"


def render_status(timer: Timer, width: int) -> str:
    """Return the countdown line for *timer* with a bar *width* cells wide."""
    if timer.completed:
        return "🎉 Break completed!" if timer.is_rest else "🎉 Pomodoro completed!"

    percentage = timer.percentage
    bar = create_progress_bar(percentage, width)
    clock = format_time(timer.remaining)
    if timer.paused:
        return f"⏸️  {clock} {bar} {percentage:.1f}% (PAUSED)"
    return f"⏰ {clock} {bar} {percentage:.1f}%"


def completion_message(timer: Timer) -> tuple[str, str]:
    """Return the *(title, message)* pair for the completion notification."""
    emoji, title = _title(timer)
    if timer.is_rest:
        return f"{emoji} {title}", "Your break is complete!"
    return f"{emoji} {title}", "Your Pomodoro session is complete!"
