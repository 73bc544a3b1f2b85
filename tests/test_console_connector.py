# tests/test_console_connector.py

from __future__ import annotations

from ticklist.connectors.console_connector import run_console_loop
from ticklist.connectors.render import STRIKE, render_task_list
from ticklist.core.state import AppState
from ticklist.tasks.task_models import Task

from .fakes import ScriptedInput


def _run(state: AppState, lines: list[str]) -> tuple[list[str], ScriptedInput]:
    out: list[str] = []
    feed = ScriptedInput(lines)
    run_console_loop(state, read_line=feed, write=out.append)
    return out, feed


def test_plain_lines_become_tasks(state: AppState) -> None:
    out, _ = _run(state, ["Buy milk", "   ", "Walk the dog"])

    assert [t.name for t in state.store.tasks] == ["Buy milk", "Walk the dog"]
    assert state.view.new_task == ""
    # Initial render plus one re-render per added task.
    assert sum(1 for line in out if line.startswith("To-Do List")) == 3


def test_edit_mode_commits_next_line(state: AppState) -> None:
    state.store.add("Old")

    _, feed = _run(state, ["/edit 1", "New", "Another"])

    assert [t.name for t in state.store.tasks] == ["New", "Another"]
    assert state.view.editing_id is None
    assert feed.prompts[1] == "edit [Old]> "
    assert feed.prompts[2] == "+ new task> "


def test_exit_stops_loop_and_unsubscribes(state: AppState) -> None:
    out, _ = _run(state, ["/exit", "never read"])

    assert [t.name for t in state.store.tasks] == []

    renders = len(out)
    state.store.add("after exit")
    assert len(out) == renders


def test_crashing_command_is_reported(state: AppState, monkeypatch) -> None:
    from ticklist.cli import commands

    def boom(state, args, rest):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)

    out, _ = _run(state, ["/list", "still alive"])

    assert "Internal error while handling a command." in out
    assert [t.name for t in state.store.tasks] == ["still alive"]


def test_render_plain_and_coloured() -> None:
    tasks = [Task(name="todo"), Task(name="done", is_done=True)]

    plain = render_task_list(tasks, color=False)
    assert plain.splitlines()[1:] == ["  1. [ ] todo", "  2. [x] done"]

    light = render_task_list(tasks, color=True, dark_mode=False)
    dark = render_task_list(tasks, color=True, dark_mode=True)
    assert STRIKE in light
    assert light != dark


def test_render_empty_list() -> None:
    assert "no tasks yet" in render_task_list([])
