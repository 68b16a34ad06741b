# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .ports import TaskRepo
from .task_list import TaskList


class Mode(StrEnum):
    """How key presses are interpreted."""

    NORMAL = "normal"
    INPUT = "input"


@dataclass
class AppState:
    """
    Everything the controller mutates and the renderer reads.

    task_store is None when persistence is disabled; tasks then carry no id.
    status_message holds a one-shot notice (failed save) shown in the footer.
    """

    tasks: TaskList = field(default_factory=TaskList)
    task_store: TaskRepo | None = None

    mode: Mode = Mode.NORMAL
    input_buffer: str = ""
    should_exit: bool = False
    status_message: str | None = None

    @property
    def persistent(self) -> bool:
        return self.task_store is not None
