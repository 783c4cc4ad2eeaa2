# src/tasknest/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from typing import cast

from ..core.ports import ConfirmPrompt
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.messages import format_date
from ..tasks.task_models import Task
from ..tasks.validation import default_date

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], ConfirmPrompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_DATE_ARG = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        confirm: ConfirmPrompt | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
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
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, confirm)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_task(task: Task, language: str) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id}  {format_date(task.date, language)}  {task.text}"


def render_list(state: AppState) -> str:
    header = f"{state.current_filter.value.upper()} ({task_api.visible_count_label(state)})"
    if task_api.visible_is_empty(state):
        return f"{header}\n  (no tasks)"
    tasks = task_api.visible_tasks(state)
    return "\n".join([header] + [f"  {render_task(t, state.language)}" for t in tasks])


def _split_form(state: AppState, args: list[str]) -> tuple[str, str]:
    """'<YYYY-MM-DD> text...' or just 'text...' (date defaults to today)."""
    if args and _DATE_ARG.match(args[0]):
        return " ".join(args[1:]), args[0]
    return " ".join(args), default_date(state.task_store.today())


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _format_messages(messages: task_api.FieldMessages) -> str:
    lines = []
    if messages.text:
        lines.append(f"  text: {messages.text}")
    if messages.date:
        lines.append(f"  date: {messages.date}")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 2026-10-20 Buy milk   -> task due on that day
    /add Buy milk              -> task due today
    """
    if not args:
        return "Usage: /add [YYYY-MM-DD] <task text>"
    text, raw_date = _split_form(state, args)
    result = task_api.submit_task(state, text, raw_date)
    if result.task is None:
        return "Task not added:\n" + _format_messages(result.messages)
    return render_list(state)


def cmd_check(state: AppState, args: list[str]) -> str:
    text, raw_date = _split_form(state, args)
    messages = task_api.preview_form(state, text, raw_date)
    if messages.ok:
        return "Looks good."
    return _format_messages(messages) or "Type a task text."


def cmd_list(state: AppState, args: list[str]) -> str:
    if args:
        try:
            task_api.set_filter(state, args[0])
        except ValueError as e:
            return f"Usage: /list [all|today|upcoming|completed] ({e})"
    return render_list(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    task = task_api.toggle_task(state, task_id)
    if task is None:
        return f"No task with id {task_id}."
    return render_list(state)


def cmd_delete(state: AppState, args: list[str], confirm: ConfirmPrompt | None) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    if confirm is None:
        return "Deleting needs a confirmation prompt, which this connector does not provide."
    if not task_api.delete_task(state, task_id, confirm):
        return "Kept."
    return render_list(state)


def cmd_count(state: AppState, args: list[str]) -> str:
    return task_api.visible_count_label(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [YYYY-MM-DD] <text>.", aliases=["a"])
registry.register("check", cmd_check, help_text="Validate input without adding: /check [YYYY-MM-DD] <text>.")
registry.register(
    "list",
    cmd_list,
    help_text="Show tasks, optionally switching filter: /list [all|today|upcoming|completed].",
    aliases=["ls", "filter"],
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task (asks first): /delete <id>.", aliases=["rm"])
registry.register("count", cmd_count, help_text="Number of tasks in the current view.")
