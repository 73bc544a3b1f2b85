# tests/test_commands.py

from __future__ import annotations

from ticklist.cli.commands import CommandRegistry, registry
from ticklist.core.state import AppState


def _names(state: AppState) -> list[str]:
    return [t.name for t in state.store.tasks]


def test_command_registry_routes_and_keeps_raw_rest(state: AppState) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    def handler(state, args, rest):
        seen.append((args, rest))
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a  two  words") == "ok"
    assert reg.handle(state, "/ALPHA x") == "ok"
    assert seen == [(["two", "words"], " two  words"), (["x"], "x")]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_toggle_delete_by_position(state: AppState) -> None:
    for name in ("A", "B", "C"):
        registry.handle(state, f"/add {name}")

    assert registry.handle(state, "/toggle 2") == "Toggled 1 task(s)."
    assert [t.is_done for t in state.store.tasks] == [False, True, False]

    assert registry.handle(state, "/delete 1 3") == "Deleted 2 task(s)."
    assert _names(state) == ["B"]


def test_add_without_text_shows_usage(state: AppState) -> None:
    assert registry.handle(state, "/add") == "Usage: /add <text>"
    assert _names(state) == []


def test_add_clears_pending_input(state: AppState) -> None:
    registry.handle(state, "/add Buy milk")
    assert state.view.new_task == ""
    assert _names(state) == ["Buy milk"]


def test_bad_positions_are_reported(state: AppState) -> None:
    registry.handle(state, "/add A")

    assert registry.handle(state, "/toggle 2") == "No task #2 (list has 1)."
    assert registry.handle(state, "/delete x") == "Not a number: 'x'"
    assert _names(state) == ["A"]


def test_edit_inline_and_edit_mode(state: AppState) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")

    assert registry.handle(state, "/edit 1 Apples  and pears") == "Renamed #1: Apples  and pears"
    assert _names(state) == ["Apples  and pears", "B"]

    reply = registry.handle(state, "/edit 2")
    assert reply is not None and reply.startswith("Editing #2")
    assert state.view.editing_id == state.store.tasks[1].id

    assert registry.handle(state, "/cancel") == "Edit cancelled."
    assert state.view.editing_id is None
    assert registry.handle(state, "/cancel") == "Nothing is being edited."


def test_deleting_edited_task_leaves_edit_mode(state: AppState) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/edit 1")

    registry.handle(state, "/delete 1")

    assert state.view.editing_id is None


def test_dark_mode_switch(state: AppState) -> None:
    assert registry.handle(state, "/dark") == "Dark mode: ON"
    assert registry.handle(state, "/dark off") == "Dark mode: OFF"
    assert registry.handle(state, "/theme on") == "Dark mode: ON"
    assert registry.handle(state, "/dark maybe") == "Usage: /dark [on|off]"
    assert state.view.dark_mode is True


def test_list_and_status(state: AppState) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")
    registry.handle(state, "/toggle 1")

    listing = registry.handle(state, "/list") or ""
    assert "1. [x] A" in listing
    assert "2. [ ] B" in listing

    status = registry.handle(state, "/status") or ""
    assert "Tasks: 2 (1 done)" in status
    assert "Theme: light" in status


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/toggle", "/edit", "/delete", "/dark", "/list"):
        assert name in text


def test_tab_separates_command_from_arguments(state: AppState) -> None:
    registry.handle(state, "/add\tA")
    registry.handle(state, "/add B")

    assert registry.handle(state, "/edit\t1\tApples") == "Renamed #1: Apples"
    assert registry.handle(state, "/toggle\t2") == "Toggled 1 task(s)."
    assert _names(state) == ["Apples", "B"]
    assert [t.is_done for t in state.store.tasks] == [False, True]
