# src/task_manager/ui/render.py

"""
Pure rendering: AppState -> rich Layout.

Two stacked regions: the task list (fills the screen) and a three-row
footer showing key hints, the input line, or a pending status notice.
Nothing in here mutates the state.
"""

from __future__ import annotations

from rich.console import Group
from rich.layout import Layout
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from ..core.state import AppState, Mode
from ..tasks.task_models import Task

LIST_TITLE = "Task Manager"
INPUT_TITLE = "Input Mode"
# readkey() waits for the key after Esc and swallows it; a second Esc is the clean cancel.
INPUT_HINT = "Enter: save | Esc Esc: cancel"
HIGHLIGHT_SYMBOL = "▶ "
CARET = "▏"
FOOTER_HEIGHT = 3
NORMAL_HINT = " q: Quit | a: Add | j/k: Navigate | Enter/Space: Toggle | d: Delete | g/G: First/Last "

LIST_BORDER = Style(color="cyan")
OPEN_STYLE = Style(color="white")
DONE_STYLE = Style(color="bright_black", dim=True, strike=True)
HIGHLIGHT_STYLE = Style(color="yellow", bold=True)
HINT_STYLE = Style(color="bright_black")
INPUT_STYLE = Style(color="yellow")
ERROR_STYLE = Style(color="red", bold=True)


def checkbox(task: Task) -> str:
    return "[x]" if task.is_done else "[ ]"


def task_line(task: Task, *, selected: bool) -> Text:
    """One list row: marker, checkbox and description."""
    style = DONE_STYLE if task.is_done else OPEN_STYLE
    marker = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
    if selected:
        style = style + HIGHLIGHT_STYLE
    return Text(f"{marker}{checkbox(task)} {task.description}", style=style, no_wrap=True, overflow="ellipsis")


def visible_window(count: int, cursor: int | None, rows: int | None) -> tuple[int, int]:
    """Slice [start, end) of rows to draw so that the cursor row stays on screen."""
    if rows is None or rows >= count:
        return 0, count
    rows = max(rows, 1)
    if cursor is None or cursor < rows:
        return 0, rows
    start = cursor - rows + 1
    return start, start + rows


def render_task_list(state: AppState, rows: int | None = None) -> Panel:
    start, end = visible_window(len(state.tasks), state.tasks.cursor, rows)
    lines = [
        task_line(state.tasks[i], selected=(i == state.tasks.cursor))
        for i in range(start, end)
    ]
    return Panel(
        Group(*lines),
        title=LIST_TITLE,
        border_style=LIST_BORDER,
    )


def render_footer(state: AppState) -> Panel:
    notice = Text(state.status_message, style=ERROR_STYLE) if state.status_message else None

    if state.mode is Mode.INPUT:
        # Keep the typed text visible; a failed save is shown under it.
        body = Text(f" New task: {state.input_buffer}{CARET}", style=INPUT_STYLE, no_wrap=True, overflow="ellipsis")
        return Panel(
            body,
            title=INPUT_TITLE,
            subtitle=notice if notice is not None else Text(INPUT_HINT, style=HINT_STYLE),
            border_style=INPUT_STYLE,
            height=FOOTER_HEIGHT,
        )

    if notice is not None:
        body = Text(f" {state.status_message}", style=ERROR_STYLE, no_wrap=True, overflow="ellipsis")
        return Panel(body, border_style=ERROR_STYLE, height=FOOTER_HEIGHT)

    body = Text(NORMAL_HINT, style=HINT_STYLE, no_wrap=True, overflow="ellipsis")
    return Panel(body, border_style=HINT_STYLE, height=FOOTER_HEIGHT)


def render_app(state: AppState, height: int | None = None) -> Layout:
    """
    Build the full-screen layout.

    height is the terminal height; when given, the list shows only as many
    rows as fit between its borders.
    """
    rows = None if height is None else max(height - FOOTER_HEIGHT - 2, 1)
    layout = Layout(name="root")
    layout.split_column(
        Layout(render_task_list(state, rows), name="list"),
        Layout(render_footer(state), name="footer", size=FOOTER_HEIGHT),
    )
    return layout
