# src/ticklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the preferences store and task store into AppState,
- restores the saved task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState, ViewState
from ..storage.prefs_store import PrefsStore
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.prefs_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load saved tasks.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    prefs = PrefsStore(settings.prefs_db_path)
    store = TaskListStore(prefs)
    store.restore()

    state = AppState(
        settings=settings,
        prefs=prefs,
        store=store,
        view=ViewState(dark_mode=bool(getattr(settings, "dark_mode", False))),
    )
    logger.info("State ready: %d tasks, dark_mode=%s", len(store), state.view.dark_mode)
    return state
