# src/task_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Every variable is optional; defaults give the plain interactive task list
  persisted to ``tasks.db`` in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMGR"

# Real environment variables always win over .env entries.
load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Storage ----
    persist: bool
    db_path: Path

    # ---- Terminal ----
    alt_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-manager").strip() or "task-manager"
        # The TUI owns the screen, so only errors reach stderr by default.
        log_level = _env(_k("LOG_LEVEL"), "ERROR").strip().upper() or "ERROR"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/task-manager"))

        persist = _env_bool(_k("PERSIST"), True)
        db_path = _env_path(_k("DB_PATH"), Path("tasks.db"))

        alt_screen = _env_bool(_k("ALT_SCREEN"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            persist=persist,
            db_path=db_path,
            alt_screen=alt_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
