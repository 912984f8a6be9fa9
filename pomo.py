#!/usr/bin/env -S uv run
# /// script
# dependencies = ["rich", "textual"]
# ///

"""
pomo.py – Pomodoro work/break countdown for the terminal
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable

from rich.console import Console
from rich.markup import escape

from pomo_notify import Notifier, notify
from pomo_timer import (
    InvalidDuration,
    Timer,
    completion_message,
    parse_duration,
    render_header,
    render_status,
)
from pomo_tui import PomodoroApp

DEFAULT_WORK_MINUTES = 45
DEFAULT_REST_MINUTES = 15
DEFAULT_BAR_WIDTH = 30
TICK_SECONDS = 1.0

REST_KEYWORD = "rest"

EXAMPLES = """\
examples:
  pomo 30       # 30 minutes work timer
  pomo 30m      # 30 minutes work timer
  pomo 30s      # 30 seconds work timer
  pomo rest     # 15 minute break timer
  pomo rest 5m  # 5 minute break timer
"""

console = Console()


# ── plain loop ───────────────────────────────────────────────────────────
def run_plain(
    timer: Timer,
    bar_width: int,
    notifier: Notifier | None = notify,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Count *timer* down on a single redrawn line; return True if it completed."""
    print(render_header(timer))
    last_len = 0
    deadline = time.monotonic()

    def draw() -> None:
        nonlocal last_len
        line = render_status(timer, bar_width)
        print(f"\r{line}{' ' * max(0, last_len - len(line))}", end="", flush=True)
        last_len = len(line)

    try:
        draw()
        while not timer.completed:
            deadline += TICK_SECONDS
            sleep(max(0.0, deadline - time.monotonic()))
            timer.tick()
            draw()
    except KeyboardInterrupt:
        print("\nTimer cancelled.")
        return False

    print()
    if notifier is not None:
        notifier(*completion_message(timer))
    return True


# ── CLI glue ─────────────────────────────────────────────────────────────
def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomo",
        description=(
            "Pomodoro work/break timer. "
            f"Default: {DEFAULT_WORK_MINUTES} minutes work timer."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "words",
        nargs="*",
        metavar="[rest] [duration]",
        help="Optional 'rest' keyword, then a duration like 25, 25m or 90s",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Redraw a single line instead of the full-screen interface.",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        default=DEFAULT_BAR_WIDTH,
        help=f"Progress bar width in --plain mode (default: {DEFAULT_BAR_WIDTH})",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Do not send a desktop notification on completion.",
    )
    return parser


def _timer_from_words(parser: argparse.ArgumentParser, words: list[str]) -> Timer:
    is_rest = bool(words) and words[0] == REST_KEYWORD
    if is_rest:
        words = words[1:]
    if len(words) > 1:
        parser.error(f"unexpected arguments: {' '.join(words[1:])}")

    if not words:
        minutes = DEFAULT_REST_MINUTES if is_rest else DEFAULT_WORK_MINUTES
        return Timer.start(minutes * 60, is_rest=is_rest)

    token = words[0]
    total = parse_duration(token)
    if total <= 0:
        raise InvalidDuration(token, "duration must be positive")
    return Timer.start(total, is_rest=is_rest)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        timer = _timer_from_words(parser, args.words)
    except InvalidDuration as exc:
        console.print(
            f"[bold red]Error:[/bold red] {escape(str(exc))}",
            highlight=False,
            soft_wrap=True,
        )
        sys.exit(1)

    notifier = None if args.no_notify else notify
    if args.plain:
        run_plain(timer, max(1, args.width), notifier=notifier)
    else:
        completed = PomodoroApp(timer).run()
        if completed and notifier is not None:
            notifier(*completion_message(timer))


if __name__ == "__main__":
    main()
