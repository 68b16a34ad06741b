# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.core.state import AppState
from task_manager.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="ERROR",
        log_dir=tmp_path / "logs",
        persist=True,
        db_path=tmp_path / "tasks.db",
        alt_screen=False,
    )


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TaskStore]:
    """Real SQLite store in a temp file; its correctness is part of what we test."""
    s = TaskStore(tmp_path / "tasks.db")
    s.initialize()
    yield s
    s.close()


@pytest.fixture()
def state() -> AppState:
    """In-memory state (persistence disabled)."""
    return AppState()

