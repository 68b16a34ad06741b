# src/task_manager/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path
from types import TracebackType

from .errors import StorageError, StorageInitError, StorageReadError, StorageWriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Connection model:
    - one long-lived connection, opened by initialize() and released by close()
    - every write commits on its own; nothing spans several calls
    """

    def __init__(self, db_path: str | Path = "tasks.db") -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def __enter__(self) -> TaskStore:
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ---- lifecycle ----

    def initialize(self) -> None:
        """Open the database and make sure the tasks table exists. Safe to call twice."""
        if self._conn is None:
            try:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(str(self._db_path))
            except (OSError, sqlite3.Error) as exc:
                raise StorageInitError(f"cannot open {self._db_path}: {exc}") from exc
            conn.row_factory = sqlite3.Row
            self._configure_conn(conn)
            self._conn = conn

        try:
            self._ensure_schema(self._conn)
            total = self.count()
        except (sqlite3.Error, StorageError) as exc:
            self.close()
            raise StorageInitError(f"cannot initialize {self._db_path}: {exc}") from exc

        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.close()
        except sqlite3.Error:
            logger.debug("TaskStore close failed.", exc_info=True)
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                is_done INTEGER NOT NULL DEFAULT 0
            )
            """
        )

        # Migrations (safe): add missing columns.
        cur.execute("PRAGMA table_info(tasks)")
        cols = {row["name"] for row in cur.fetchall()}
        if "is_done" not in cols:
            cur.execute("ALTER TABLE tasks ADD COLUMN is_done INTEGER NOT NULL DEFAULT 0")
            logger.info("TaskStore migration: added column is_done")

        conn.commit()

    def _require_conn(self, error: type[Exception]) -> sqlite3.Connection:
        if self._conn is None:
            raise error(f"TaskStore for {self._db_path} is not initialized")
        return self._conn

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"]),
            is_done=bool(row["is_done"]),
        )

    def _write(self, sql: str, params: tuple[object, ...]) -> sqlite3.Cursor:
        conn = self._require_conn(StorageWriteError)
        try:
            cur = conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error as exc:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            raise StorageWriteError(f"write to {self._db_path} failed: {exc}") from exc
        return cur

    # ---- public API ----

    def count(self) -> int:
        conn = self._require_conn(StorageReadError)
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as exc:
            raise StorageReadError(f"cannot count tasks in {self._db_path}: {exc}") from exc
        return int(n)

    def load_all(self) -> list[Task]:
        """Return every task ordered by ascending id."""
        conn = self._require_conn(StorageReadError)
        try:
            rows = conn.execute(
                "SELECT id, description, is_done FROM tasks ORDER BY id ASC"
            ).fetchall()
        except sqlite3.Error as exc:
            raise StorageReadError(f"cannot load tasks from {self._db_path}: {exc}") from exc
        tasks = [self._row_to_task(r) for r in rows]
        logger.debug("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks

    def insert(self, description: str) -> int:
        """Persist a new open task and return its id."""
        if not description:
            raise ValueError("description is required")

        cur = self._write(
            "INSERT INTO tasks(description, is_done) VALUES (?, 0)",
            (description,),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise StorageWriteError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def set_done(self, task_id: int, value: bool) -> None:
        """Update the done flag; unknown ids are ignored."""
        cur = self._write(
            "UPDATE tasks SET is_done = ? WHERE id = ?",
            (1 if value else 0, int(task_id)),
        )
        logger.debug("Task id=%s is_done=%s rows=%s", task_id, value, cur.rowcount)

    def delete(self, task_id: int) -> None:
        """Remove a task; unknown ids are ignored."""
        cur = self._write("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        logger.debug("Task deleted id=%s rows=%s", task_id, cur.rowcount)
