# src/ticklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task
from .render import render_task_list

logger = logging.getLogger(__name__)


def _prompt(state: AppState) -> str:
    task_id = state.view.editing_id
    task = state.store.get(task_id) if task_id else None
    if task is not None:
        return f"edit [{task.name}]> "
    return "+ new task> "


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive REPL over the task store.

    - "/command ..." lines go to the command registry
    - any other line either commits the current edit or becomes a new task
    - the list is re-rendered whenever the store reports a change
    """
    logger.info("Console connector started (dark_mode=%s).", state.view.dark_mode)
    color = bool(getattr(state.settings, "color", False))

    def show(tasks: Sequence[Task]) -> None:
        write(
            render_task_list(
                tasks,
                dark_mode=state.view.dark_mode,
                color=color,
                editing_id=state.view.editing_id,
            )
        )

    unsubscribe = state.store.subscribe(show)
    write("Type a task and press Enter to add it. Use /help for commands, /exit to quit.")
    show(state.store.tasks)

    try:
        while True:
            try:
                user_input = read_line(_prompt(state))
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input.strip():
                continue

            if user_input.strip().lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                cmd_response = command_registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is not None:
                write(cmd_response)
                continue

            if state.view.editing_id is not None:
                if not state.commit_edit(user_input):
                    write("That task no longer exists.")
                continue

            state.view.new_task = user_input
            state.add_pending()
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
