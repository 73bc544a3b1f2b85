# src/ticklist/cli/commands.py

from __future__ import annotations

import re
from collections.abc import Callable

from ..connectors.render import render_task_list
from ..core.state import AppState
from ..tasks.task_models import Task

# (state, args, rest) -> reply. `rest` is the raw text after the command name,
# kept verbatim so task names are not re-split on whitespace.
CommandHandler = Callable[[AppState, list[str], str], str]


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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

        # Split on the first whitespace character of any kind (space, tab, ...).
        head, *tail = re.split(r"\s", line[1:], maxsplit=1)
        rest = tail[0] if tail else ""
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


class _BadPosition(ValueError):
    pass


def _positions(state: AppState, args: list[str]) -> list[int]:
    """Parse 1-based list positions into 0-based offsets."""
    total = len(state.store)
    out: list[int] = []
    for a in args:
        try:
            n = int(a)
        except ValueError as e:
            raise _BadPosition(f"Not a number: {a!r}") from e
        if not 1 <= n <= total:
            raise _BadPosition(f"No task #{n} (list has {total}).")
        out.append(n - 1)
    return out


def _task_at(state: AppState, offset: int) -> Task:
    return state.store.tasks[offset]


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    return render_task_list(
        state.store.tasks,
        dark_mode=state.view.dark_mode,
        color=bool(getattr(state.settings, "color", False)),
        editing_id=state.view.editing_id,
    )


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    state.view.new_task = rest
    if not state.add_pending():
        return "Usage: /add <text>"
    return f"Added: {state.store.tasks[-1].name}"


def cmd_toggle(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /toggle <n> [n ...]"
    try:
        offsets = _positions(state, args)
    except _BadPosition as e:
        return str(e)

    ids = [_task_at(state, i).id for i in dict.fromkeys(offsets)]
    for task_id in ids:
        state.store.toggle(task_id)
    return f"Toggled {len(ids)} task(s)."


def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /edit <n> [new text]"
    try:
        (offset,) = _positions(state, args[:1])
    except _BadPosition as e:
        return str(e)

    task = _task_at(state, offset)
    new_name = rest.lstrip()[len(args[0]) :]
    new_name = new_name[1:] if new_name[:1].isspace() else new_name

    if new_name:
        state.view.editing_id = None
        state.store.edit(task.id, new_name)
        return f"Renamed #{offset + 1}: {new_name}"

    state.begin_edit(task.id)
    return f"Editing #{offset + 1} ({task.name}). Type the new text, or /cancel."


def cmd_cancel(state: AppState, args: list[str], rest: str) -> str:
    if state.view.editing_id is None:
        return "Nothing is being edited."
    state.cancel_edit()
    return "Edit cancelled."


def cmd_delete(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /delete <n> [n ...]"
    try:
        offsets = _positions(state, args)
    except _BadPosition as e:
        return str(e)

    removed = state.store.delete_at(offsets)
    if state.view.editing_id in {t.id for t in removed}:
        state.cancel_edit()
    return f"Deleted {len(removed)} task(s)."


def cmd_dark(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        state.view.dark_mode = not state.view.dark_mode
    else:
        val = args[0].lower()
        if val in ("on", "1", "true", "yes"):
            state.view.dark_mode = True
        elif val in ("off", "0", "false", "no"):
            state.view.dark_mode = False
        else:
            return "Usage: /dark [on|off]"
    return f"Dark mode: {'ON' if state.view.dark_mode else 'OFF'}"


def cmd_status(state: AppState, args: list[str], rest: str) -> str:
    tasks = state.store.tasks
    done = sum(1 for t in tasks if t.is_done)
    editing = state.store.get(state.view.editing_id) if state.view.editing_id else None
    theme = "dark" if state.view.dark_mode else "light"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} done)\n"
        f"  Theme: {theme}\n"
        f"  Editing: {editing.name if editing else '-'}\n"
        f"  Storage: {getattr(state.settings, 'prefs_db_path', '?')}"
    )


registry.register("help", cmd_help, "Show this help message", aliases=["h", "?"])
registry.register("list", cmd_list, "Show the task list", aliases=["ls"])
registry.register("add", cmd_add, "Add a task: /add <text>", aliases=["a"])
registry.register("toggle", cmd_toggle, "Mark tasks done/undone: /toggle <n> [n ...]", aliases=["t", "done"])
registry.register("edit", cmd_edit, "Rename a task: /edit <n> [new text]", aliases=["e"])
registry.register("cancel", cmd_cancel, "Leave edit mode without changes")
registry.register("delete", cmd_delete, "Delete tasks: /delete <n> [n ...]", aliases=["del", "rm"])
registry.register("dark", cmd_dark, "Switch dark mode: /dark [on|off]", aliases=["theme"])
registry.register("status", cmd_status, "Show task counts, theme and storage path")
