# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- opens the task store (when persistence is enabled) and loads its rows,
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.task_list import TaskList
from ..tasks.errors import StorageError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageInitError / StorageReadError when the database cannot be used;
    the store is closed again before the error propagates.
    """
    if settings is None:
        settings = get_settings()

    if not settings.persist:
        logger.info("Persistence disabled; tasks live in memory only.")
        return AppState()

    store = TaskStore(settings.db_path)
    store.initialize()
    try:
        tasks = store.load_all()
    except StorageError:
        store.close()
        raise

    logger.info("Loaded %d tasks from %s", len(tasks), settings.db_path)
    return AppState(tasks=TaskList(tasks), task_store=store)


def shutdown(state: AppState) -> None:
    """Release the store connection (no exceptions should escape)."""
    store = state.task_store
    if store is None or not hasattr(store, "close"):
        return
    try:
        store.close()
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)
