# src/task_manager/core/controller.py

"""
Key dispatch for the task list.

One `match` over (mode, key) is the whole state machine:

  NORMAL  q           -> exit flag
          a           -> INPUT (buffer cleared)
          j/Down k/Up -> move selection
          g / G       -> first / last
          Space/Enter -> toggle selected
          d           -> delete selected
  INPUT   printable   -> append to buffer
          Backspace   -> drop last char
          Enter       -> add task (if any text), back to NORMAL
          Esc         -> discard buffer, back to NORMAL

Storage is written before the in-memory list changes; a failed write leaves
the list untouched and puts a notice on AppState.status_message.
"""

from __future__ import annotations

import logging

from ..tasks.errors import StorageWriteError
from ..tasks.task_models import Task
from ..ui.keys import KeyCode, KeyEvent, KeyKind
from .state import AppState, Mode

logger = logging.getLogger(__name__)


def handle_key(state: AppState, event: KeyEvent) -> None:
    if event.kind is not KeyKind.PRESS:
        return

    state.status_message = None

    match (state.mode, event.code):
        case (Mode.NORMAL, "q"):
            state.should_exit = True
        case (Mode.NORMAL, "a"):
            state.mode = Mode.INPUT
            state.input_buffer = ""
        case (Mode.NORMAL, "j" | KeyCode.DOWN):
            state.tasks.select_next()
        case (Mode.NORMAL, "k" | KeyCode.UP):
            state.tasks.select_previous()
        case (Mode.NORMAL, "g"):
            state.tasks.select_first()
        case (Mode.NORMAL, "G"):
            state.tasks.select_last()
        case (Mode.NORMAL, " " | KeyCode.ENTER):
            toggle_selected(state)
        case (Mode.NORMAL, "d"):
            delete_selected(state)

        case (Mode.INPUT, KeyCode.ENTER):
            confirm_input(state)
        case (Mode.INPUT, KeyCode.ESC):
            state.input_buffer = ""
            state.mode = Mode.NORMAL
        case (Mode.INPUT, KeyCode.BACKSPACE):
            state.input_buffer = state.input_buffer[:-1]
        case (Mode.INPUT, str() as ch) if _is_printable(ch):
            state.input_buffer += ch

        case _:
            pass


def _is_printable(code: str) -> bool:
    return len(code) == 1 and code.isprintable()


def _report_write_failure(state: AppState, action: str, exc: StorageWriteError) -> None:
    logger.warning("Could not %s: %s", action, exc, exc_info=True)
    state.status_message = f"Could not {action}: {exc}"


def toggle_selected(state: AppState) -> None:
    index = state.tasks.cursor
    task = state.tasks.selected()
    if index is None or task is None:
        return

    if state.task_store is not None and task.id is not None:
        try:
            state.task_store.set_done(task.id, not task.is_done)
        except StorageWriteError as exc:
            _report_write_failure(state, "update task", exc)
            return

    state.tasks.toggle(index)


def delete_selected(state: AppState) -> None:
    index = state.tasks.cursor
    task = state.tasks.selected()
    if index is None or task is None:
        return

    if state.task_store is not None and task.id is not None:
        try:
            state.task_store.delete(task.id)
        except StorageWriteError as exc:
            _report_write_failure(state, "delete task", exc)
            return

    state.tasks.remove(index)


def confirm_input(state: AppState) -> None:
    description = state.input_buffer
    if description:
        task_id: int | None = None
        if state.task_store is not None:
            try:
                task_id = state.task_store.insert(description)
            except StorageWriteError as exc:
                # Stay in INPUT with the text intact so it can be retried.
                _report_write_failure(state, "save task", exc)
                return
        state.tasks.append(Task(description=description, id=task_id))

    state.input_buffer = ""
    state.mode = Mode.NORMAL
