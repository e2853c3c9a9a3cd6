# src/local_todo/connectors/console_connector.py

from __future__ import annotations

import getpass
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TextIO

from ..cli.bootstrap import attach_presenter
from ..cli.commands import registry as command_registry
from ..core.ports import NotifyLevel
from ..core.rendering import TaskRow
from ..core.state import AppState

logger = logging.getLogger(__name__)

_LEVEL_TAGS: dict[str, str] = {
    "info": "INFO",
    "success": "OK",
    "warning": "WARN",
    "error": "ERROR",
}

_STATUS_LABELS: dict[str, str] = {
    "pending": "Pending",
    "in-progress": "In Progress",
    "completed": "Completed",
}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleTaskView:
    """TaskListView that prints to a text stream (stdout by default)."""

    def __init__(self, out: TextIO | None = None, *, title: str = "To-Do List") -> None:
        self._out = out
        self._title = title

    def _print(self, text: str = "") -> None:
        print(text, file=self._out, flush=True)

    def render(self, rows: Sequence[TaskRow], is_empty: bool) -> None:
        self._print(f"\n{self._title}:")
        if is_empty:
            self._print("  No tasks yet. Add one with /add <text>.")
            return
        if not rows:
            self._print("  (no tasks match the current filter)")
            return
        width = len(str(len(rows)))
        for r in rows:
            status = _STATUS_LABELS.get(r.task.status.value, r.task.status.value)
            self._print(f"  {r.row + 1:>{width}}. [{status:<11}] {r.date_label:<12} {r.task.text}")

    def notify(self, message: str, level: NotifyLevel = "info") -> None:
        self._print(f"[{_ts_local()}] [{_LEVEL_TAGS.get(level, level.upper())}] {message}")


def _console_ask(prompt: str) -> str:
    if "password" in prompt.lower():
        return getpass.getpass(prompt)
    return input(prompt)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    ask: Callable[[str], str] = _console_ask,
    out: TextIO | None = None,
) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "local-todo"))
    view = ConsoleTaskView(out, title=app_name)

    logger.info("Console connector started.")
    print(f"[{_ts_local()}] [CONSOLE] Use /help for commands. Use /exit to quit.", file=out, flush=True)
    attach_presenter(state, view)

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print(file=out)
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Plain text (no slash) is shorthand for /add.
        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            reply = command_registry.handle(state, line, ask=ask)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            reply = "Cancelled."
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(f"[{_ts_local()}] {reply}", file=out, flush=True)

    logger.info("Console connector finished.")
