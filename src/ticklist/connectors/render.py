# src/ticklist/connectors/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

RESET = "\033[0m"
STRIKE = "\033[9m"

# Foreground colours per theme: (pending, done, accent)
_PALETTES = {
    "light": ("\033[30m", "\033[90m", "\033[34m"),
    "dark": ("\033[97m", "\033[90m", "\033[96m"),
}


def render_task_list(
    tasks: Sequence[Task],
    *,
    dark_mode: bool = False,
    color: bool = False,
    editing_id: str | None = None,
    title: str = "To-Do List",
) -> str:
    """Render tasks as numbered checkbox rows (1-based, matching the commands)."""
    pending_fg, done_fg, accent = _PALETTES["dark" if dark_mode else "light"]

    def paint(text: str, *codes: str) -> str:
        if not color:
            return text
        return "".join(codes) + text + RESET

    lines = [paint(title, accent)]
    if not tasks:
        lines.append("  (no tasks yet, type something to add one)")
        return "\n".join(lines)

    width = len(str(len(tasks)))
    for i, task in enumerate(tasks, start=1):
        box = "[x]" if task.is_done else "[ ]"
        name = paint(task.name, done_fg, STRIKE) if task.is_done else paint(task.name, pending_fg)
        marker = paint("  <- editing", accent) if task.id == editing_id else ""
        lines.append(f"  {i:>{width}}. {box} {name}{marker}")
    return "\n".join(lines)
