"""
pomo_notify.py – best-effort desktop notifications via an external notifier
"""

from __future__ import annotations

import subprocess
import sys
from typing import Callable

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)

NOTIFY_TIMEOUT = 10  # seconds

Notifier = Callable[[str, str], object]


def _notifier_command(title: str, message: str) -> list[str]:
    if sys.platform == "darwin":
        return [
            "terminal-notifier",
            "-title", title,
            "-message", message,
            "-sound", "default",
        ]
    return ["notify-send", title, message]


def notify(title: str, message: str) -> bool:
    """Show a desktop notification; return False if it could not be sent."""
    cmd = _notifier_command(title, message)
    try:
        subprocess.run(cmd, capture_output=True, check=True, timeout=NOTIFY_TIMEOUT)
    except FileNotFoundError:
        hint = ""
        if cmd[0] == "terminal-notifier":
            hint = " Install it with: brew install terminal-notifier"
        err_console.print(
            f"[dim]Debug: {cmd[0]} not found.{hint}[/dim]", soft_wrap=True
        )
        return False
    except (subprocess.SubprocessError, OSError) as e:
        err_console.print(
            f"[dim]Debug: {cmd[0]} failed: {escape(str(e))}[/dim]",
            soft_wrap=True,
        )
        return False
    return True
