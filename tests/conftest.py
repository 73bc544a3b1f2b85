# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ticklist.core.state import AppState, ViewState
from ticklist.storage.prefs_store import PrefsStore
from ticklist.tasks.task_store import TaskListStore

from .fakes import MemoryPrefs


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="ticklist-test",
        log_level="DEBUG",
        dark_mode=False,
        color=False,
        data_dir=tmp_path / "data",
        prefs_db_path=tmp_path / "data" / "prefs.sqlite3",
    )


@pytest.fixture()
def prefs() -> MemoryPrefs:
    return MemoryPrefs()


@pytest.fixture()
def store(prefs: MemoryPrefs) -> TaskListStore:
    return TaskListStore(prefs)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with a real SQLite PrefsStore: persistence through the
    actual backend is part of what we want to test.
    """
    prefs_store = PrefsStore(settings.prefs_db_path)
    return AppState(
        settings=settings,
        prefs=prefs_store,
        store=TaskListStore(prefs_store),
        view=ViewState(dark_mode=False),
    )
