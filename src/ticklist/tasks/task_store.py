# src/ticklist/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable, Iterable
from dataclasses import replace

from ..core.ports import PrefsRepo, TaskListener
from .task_codec import TaskDecodeError, decode_tasks, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


class TaskListStore:
    """
    In-memory ordered task list, mirrored to a single preferences key.

    Every mutation rewrites the whole list under TASKS_KEY (no diffs) and then
    notifies subscribers with the new snapshot. Toggle, edit and delete write
    even when nothing matched, so the stored blob always mirrors the list;
    subscribers hear only about real changes. Persistence is best-effort:
    failures are logged and never raised to the caller.

    Not thread-safe: meant to be driven from one UI loop.
    """

    def __init__(self, prefs: PrefsRepo, *, key: str = TASKS_KEY) -> None:
        self._prefs = prefs
        self._key = key
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- observation ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener crashed.")

    def _changed(self) -> None:
        self.persist()
        self._notify()

    # ---- mutations ----

    def add(self, name: str) -> Task | None:
        if not name:
            return None

        existing = {t.id for t in self._tasks}
        task = Task(name=name)
        while task.id in existing:
            task = Task(name=name)

        self._tasks.append(task)
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        self._changed()
        return task

    def toggle(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Toggle ignored, unknown id=%s", task_id)
            self.persist()
            return False

        task = self._tasks[idx]
        self._tasks[idx] = replace(task, is_done=not task.is_done)
        logger.debug("Task toggled id=%s is_done=%s", task_id, not task.is_done)
        self._changed()
        return True

    def edit(self, task_id: str, new_name: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Edit ignored, unknown id=%s", task_id)
            self.persist()
            return False

        self._tasks[idx] = replace(self._tasks[idx], name=new_name)
        logger.debug("Task renamed id=%s", task_id)
        self._changed()
        return True

    def delete_at(self, offsets: Iterable[int]) -> list[Task]:
        """
        Remove the tasks at the given positions as one batch.

        Positions refer to the list before deletion; out-of-range and negative
        positions are ignored. Returns the removed tasks in list order.
        """
        n = len(self._tasks)
        doomed = {int(i) for i in offsets if 0 <= int(i) < n}
        if not doomed:
            self.persist()
            return []

        removed = [t for i, t in enumerate(self._tasks) if i in doomed]
        self._tasks = [t for i, t in enumerate(self._tasks) if i not in doomed]
        logger.debug("Tasks deleted count=%d remaining=%d", len(removed), len(self._tasks))
        self._changed()
        return removed

    # ---- persistence ----

    def persist(self) -> bool:
        try:
            blob = encode_tasks(self._tasks)
        except (TypeError, ValueError):
            logger.warning("Failed to encode tasks; write skipped.", exc_info=True)
            return False

        try:
            self._prefs.set_data(self._key, blob)
        except (OSError, sqlite3.Error):
            logger.warning("Failed to write tasks key=%s; write skipped.", self._key, exc_info=True)
            return False
        return True

    def restore(self) -> bool:
        try:
            blob = self._prefs.get_data(self._key)
        except (OSError, sqlite3.Error):
            logger.warning("Failed to read tasks key=%s.", self._key, exc_info=True)
            return False

        if blob is None:
            logger.debug("No saved tasks under key=%s.", self._key)
            return False

        try:
            tasks = decode_tasks(blob)
        except TaskDecodeError as e:
            logger.warning("Ignoring saved tasks under key=%s: %s", self._key, e)
            return False

        self._tasks = tasks
        logger.info("Restored %d tasks.", len(tasks))
        self._notify()
        return True
