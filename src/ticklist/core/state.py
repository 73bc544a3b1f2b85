# src/ticklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.ports import PrefsRepo
from ..tasks.task_store import TaskListStore


@dataclass(slots=True)
class ViewState:
    """Presentation-only state; the task store never reads it."""

    dark_mode: bool = False
    editing_id: str | None = None
    new_task: str = ""  # pending input buffer


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    prefs: PrefsRepo
    store: TaskListStore
    view: ViewState = field(default_factory=ViewState)

    def add_pending(self) -> bool:
        """Add the pending input as a task; clears the buffer only on success."""
        task = self.store.add(self.view.new_task)
        if task is None:
            return False
        self.view.new_task = ""
        return True

    def begin_edit(self, task_id: str) -> bool:
        if self.store.get(task_id) is None:
            return False
        self.view.editing_id = task_id
        return True

    def commit_edit(self, new_name: str) -> bool:
        """Apply new_name to the task being edited and leave edit mode."""
        task_id = self.view.editing_id
        self.view.editing_id = None
        if task_id is None:
            return False
        return self.store.edit(task_id, new_name)

    def cancel_edit(self) -> None:
        self.view.editing_id = None
