# src/task_manager/connectors/terminal_connector.py

from __future__ import annotations

import logging

from rich.console import Console
from rich.live import Live

from ..core.controller import handle_key
from ..core.ports import KeySource
from ..core.state import AppState
from ..ui.render import render_app

logger = logging.getLogger(__name__)


def run_terminal_loop(
    state: AppState,
    keys: KeySource,
    *,
    console: Console | None = None,
    screen: bool = True,
) -> None:
    """
    Draw, wait for one key, dispatch; repeat until the exit flag is set.

    The exit flag is checked before drawing, so nothing is rendered after 'q'.
    Live restores the terminal (alternate screen, cursor) on every exit path.
    """
    console = console or Console()
    logger.info(
        "Terminal loop started (tasks=%d persistent=%s screen=%s).",
        len(state.tasks),
        state.persistent,
        screen,
    )

    with Live(console=console, screen=screen, auto_refresh=False) as live:
        while not state.should_exit:
            live.update(render_app(state, console.size.height), refresh=True)
            event = keys.read()
            handle_key(state, event)

    logger.info("Terminal loop finished.")
