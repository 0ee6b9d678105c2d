# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import SortKey, TaskError, TaskFilter
from ..views.edit_view import delete_task, render_delete_prompt, render_edit_form, save_task
from ..views.formatting import color_enabled
from ..views.list_view import render_list
from ..views.summary_view import render_summary_view

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

# key=value option names -> task field
OPTION_KEYS = {
    "description": "description",
    "desc": "description",
    "deadline": "deadline",
    "priority": "priority",
}


def _split_line(text: str) -> list[str]:
    """
    Split a command line, honouring quotes.

    Unbalanced quotes (apostrophes in free text such as "Don't") fall back to
    plain whitespace splitting.
    """
    try:
        return shlex.split(text)
    except ValueError:
        return text.split()


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = _split_line(line[1:])
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (no leading /) adds a task with default settings.")
        return "\n".join(lines)


registry = CommandRegistry()


def _use_color(state: AppState) -> bool:
    return color_enabled(state.settings)


def _list_text(state: AppState) -> str:
    return render_list(
        state.task_store, state.task_filter, state.sort_key, use_color=_use_color(state)
    )


def _with_list(state: AppState, message: str) -> str:
    return f"{message}\n\n{_list_text(state)}"


def _split_options(args: list[str]) -> tuple[list[str], dict[str, str]]:
    """
    Separate key=value options from positional words.

    Only known keys count as options, so a description may contain "=".
    """
    words: list[str] = []
    options: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        field = OPTION_KEYS.get(key.lower()) if sep else None
        if field is None:
            words.append(arg)
        else:
            options[field] = value
    return words, options


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    return (
        "Status:\n"
        f"  Tasks: {state.task_store.count_tasks()}\n"
        f"  Filter: {state.task_filter.value}\n"
        f"  Sort by: {state.sort_key.value}\n"
        f"  Colour: {'ON' if _use_color(state) else 'OFF'}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return _list_text(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter              -> show current filter
    /filter completed    -> only completed tasks
    """
    if not args:
        return f"Filter is {state.task_filter.value}. Use /filter all|completed|uncompleted."
    try:
        state.task_filter = TaskFilter(args[0].lower())
    except ValueError:
        return "Usage: /filter all|completed|uncompleted."
    return _list_text(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Sorting by {state.sort_key.value}. Use /sort priority|deadline."
    try:
        state.sort_key = SortKey(args[0].lower())
    except ValueError:
        return "Usage: /sort priority|deadline."
    return _list_text(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk
    /add "Pay rent" deadline=2024-12-01 priority=high
    """
    words, options = _split_options(args)
    if words and "description" in options:
        return "Give the description either as text or as description=..., not both."
    description = " ".join(words) or options.get("description", "")
    try:
        task = state.task_store.add(
            description,
            deadline=options.get("deadline"),
            priority=options.get("priority", "medium"),
        )
    except TaskError as e:
        return f"Error: {e}"
    return _with_list(state, f"Added task {task.id}.")


def quick_add(state: AppState, text: str) -> str:
    """Plain console text: the whole line is the description, no options."""
    try:
        task = state.task_store.add(text)
    except TaskError as e:
        return f"Error: {e}"
    return _with_list(state, f"Added task {task.id}.")


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id>                    -> show the edit form
    /edit <id> key=value ...      -> save (description, deadline, priority)
    """
    if not args:
        return "Usage: /edit <id> [description=...] [deadline=YYYY-MM-DD|none] [priority=...]"

    task_id = args[0]
    task = state.task_store.get(task_id)
    if task is None:
        return f"No task with id {task_id}."

    words, options = _split_options(args[1:])
    if words:
        return f"Unexpected arguments: {' '.join(words)}. Use key=value pairs."
    if not options:
        return render_edit_form(task, use_color=_use_color(state))

    try:
        save_task(
            state.task_store,
            task_id,
            description=options.get("description", task.description),
            deadline=options.get("deadline", task.deadline),
            priority=options.get("priority", task.priority),
        )
    except TaskError as e:
        return f"Error: {e}"
    return _with_list(state, f"Saved task {task_id}.")


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <id>"
    task = state.task_store.toggle(args[0])
    if task is None:
        return f"No task with id {args[0]}."
    status = "completed" if task.completed else "not completed"
    return _with_list(state, f"Task {task.id} marked {status}.")


def cmd_delete(state: AppState, args: list[str]) -> str:
    """
    /delete <id>       -> ask for confirmation
    /delete <id> yes   -> delete
    """
    if not args:
        return "Usage: /delete <id> [yes]"

    task_id = args[0]
    task = state.task_store.get(task_id)
    if task is None:
        return f"No task with id {task_id}."

    confirmed = len(args) > 1 and args[1].lower() in ("yes", "y")
    if not confirmed:
        return render_delete_prompt(task)

    delete_task(state.task_store, task_id)
    return _with_list(state, f"Deleted task {task_id}.")


def cmd_summary(state: AppState, args: list[str]) -> str:
    return render_summary_view(state.task_store, use_color=_use_color(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current filter, sort key and task count.")
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("filter", cmd_filter, help_text="Filter tasks: /filter all | completed | uncompleted.")
registry.register("sort", cmd_sort, help_text="Sort tasks: /sort priority | deadline.")
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add "text" [deadline=YYYY-MM-DD] [priority=low|medium|high].',
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Show or save a task: /edit <id> [description=...] [deadline=...|none] [priority=...].",
)
registry.register(
    "toggle", cmd_toggle, help_text="Mark a task completed/uncompleted: /toggle <id>.", aliases=["done"]
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id> yes.", aliases=["rm"])
registry.register("summary", cmd_summary, help_text="Show the completion summary.")
