# src/local_todo/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.presenter import STATUS_STYLE_CYCLE
from ..core.state import AppState
from ..errors import StorageWriteError
from ..tasks.task_models import TaskStatus

Ask = Callable[[str], str]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Ask | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
STATUS_CHOICES = "|".join(s.value for s in TaskStatus)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/add, /rm, /status, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, ask: Ask | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" when the view already showed everything)
        or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, ask)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_row(raw: str) -> int | None:
    """On-screen rows are 1-based; the presenter wants 0-based."""
    raw = raw.rstrip(".")
    if not raw.isdigit():
        return None
    return int(raw) - 1


def _presenter(state: AppState):
    if state.presenter is None:
        raise RuntimeError("No task list is attached to this session.")
    return state.presenter


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    _presenter(state).render()
    return ""


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text...>               -> task for today
    /add <YYYY-MM-DD> <text...>  -> task for that day
    """
    when = date.today().isoformat()
    if args and ISO_DATE_RE.match(args[0]):
        when, args = args[0], args[1:]
    _presenter(state).on_add_task(" ".join(args), when)
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <row>"
    row = _parse_row(args[0])
    if row is None:
        return "Invalid row."
    _presenter(state).on_delete_task(row)
    return ""


def cmd_status(state: AppState, args: list[str]) -> str:
    """
    /status <row> <status>  -> set status
    /status <row>           -> advance to the next status (cycle style only)
    """
    presenter = _presenter(state)
    if not args or len(args) > 2:
        return f"Usage: /status <row> [{STATUS_CHOICES}]"
    row = _parse_row(args[0])
    if row is None:
        return "Invalid row."

    if len(args) == 2:
        presenter.on_change_status(row, args[1])
        return ""

    if presenter.status_style != STATUS_STYLE_CYCLE:
        return f"Usage: /status <row> <{STATUS_CHOICES}>"
    presenter.on_change_status(row)
    return ""


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    Status mode: /filter [all|pending|in-progress|completed]
    Text mode:   /filter [words...]   (no words -> show everything)
    """
    _presenter(state).on_set_filter(" ".join(args))
    return ""


def cmd_signup(state: AppState, args: list[str], ask: Ask | None = None) -> str:
    if ask is None:
        return "Signup needs an interactive console."
    try:
        result = state.user_store.signup(
            fullname=ask("Full name: ").strip(),
            email=ask("Email: ").strip(),
            username=ask("Username: ").strip(),
            password=ask("Password: "),
            confirm_password=ask("Confirm password: "),
        )
    except StorageWriteError as e:
        logger.error("Signup failed: %s", e)
        return "Could not save the account. Storage is full or unavailable."
    if not result.ok:
        return "\n".join(f"  {msg}" for msg in result.errors.values())
    return result.message


def cmd_login(state: AppState, args: list[str], ask: Ask | None = None) -> str:
    """Mock login: any filled-in username/password is accepted."""
    if ask is None:
        return "Login needs an interactive console."
    result = state.user_store.login(ask("Username: "), ask("Password: "))
    if not result.ok:
        return "\n".join(f"  {msg}" for msg in result.errors.values())
    return result.message


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add [YYYY-MM-DD] <text>.", aliases=["a"])
registry.register("rm", cmd_rm, help_text="Delete the task at a row: /rm <row>.", aliases=["del"])
registry.register(
    "status",
    cmd_status,
    help_text=f"Change status: /status <row> [{STATUS_CHOICES}].",
    aliases=["st"],
)
registry.register("filter", cmd_filter, help_text="Filter the list: /filter [value].", aliases=["f"])
registry.register("signup", cmd_signup, help_text="Create an account (stored locally, no real auth).")
registry.register("login", cmd_login, help_text="Mock login (does not check credentials).")
