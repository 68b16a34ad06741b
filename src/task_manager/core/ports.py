# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations.
This keeps the terminal and the database swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from ..ui.keys import KeyEvent


class TaskRepo(Protocol):
    """Durable task storage (see tasks.task_store.TaskStore)."""

    def load_all(self) -> list[Task]: ...
    def insert(self, description: str) -> int: ...
    def set_done(self, task_id: int, value: bool) -> None: ...
    def delete(self, task_id: int) -> None: ...


class KeySource(Protocol):
    """Blocking source of key events; read() returns exactly one event."""

    def read(self) -> KeyEvent: ...
