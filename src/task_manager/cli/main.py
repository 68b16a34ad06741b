# src/task_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (opening the task database), then runs
the full-screen task list until the user quits.

Exit status: 0 on a normal quit or Ctrl+C, 1 when the database cannot be
opened or read at startup.
"""

from __future__ import annotations

import logging

from rich.console import Console

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.terminal_connector import run_terminal_loop
from ..core.ports import KeySource
from ..logging_setup import setup_logging
from ..tasks.errors import StorageError
from ..ui.keys import ReadcharKeySource

logger = logging.getLogger(__name__)


def main(
    *,
    settings=None,
    keys: KeySource | None = None,
    console: Console | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "ERROR")).upper()
    console_level = getattr(logging, level_name, logging.ERROR)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info(
        "Starting %s (persist=%s db=%s)...",
        getattr(settings, "app_name", "task-manager"),
        settings.persist,
        settings.db_path,
    )

    # Startup failures are reported before the terminal switches screens.
    try:
        state = create_initial_state(settings=settings)
    except StorageError:
        logger.exception("Cannot open task storage at %s", settings.db_path)
        return 1

    try:
        run_terminal_loop(
            state,
            keys if keys is not None else ReadcharKeySource(),
            console=console,
            screen=settings.alt_screen,
        )
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
    finally:
        shutdown(state)
        logger.info("Bye.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
