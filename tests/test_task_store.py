# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from task_manager.tasks.errors import StorageInitError, StorageReadError, StorageWriteError
from task_manager.tasks.task_store import TaskStore


def test_insert_load_update_delete(store: TaskStore) -> None:
    first = store.insert("buy milk")
    second = store.insert("call mom")
    assert 0 < first < second

    items = store.load_all()
    assert [(t.id, t.description, t.is_done) for t in items] == [
        (first, "buy milk", False),
        (second, "call mom", False),
    ]

    store.set_done(first, True)
    assert [t.is_done for t in store.load_all()] == [True, False]
    store.set_done(first, False)
    assert [t.is_done for t in store.load_all()] == [False, False]

    store.delete(first)
    assert [t.id for t in store.load_all()] == [second]
    assert store.count() == 1


def test_unknown_ids_are_ignored(store: TaskStore) -> None:
    task_id = store.insert("only one")

    store.set_done(task_id + 100, True)
    store.delete(task_id + 100)

    items = store.load_all()
    assert len(items) == 1
    assert items[0].is_done is False


def test_insert_rejects_empty_description(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.insert("")
    assert store.count() == 0


def test_insert_keeps_description_as_typed(store: TaskStore) -> None:
    blank = store.insert("  ")
    padded = store.insert(" buy milk ")
    assert [(t.id, t.description) for t in store.load_all()] == [(blank, "  "), (padded, " buy milk ")]


def test_initialize_is_idempotent(store: TaskStore) -> None:
    store.insert("survives")
    store.initialize()
    store.initialize()
    assert [t.description for t in store.load_all()] == ["survives"]


def test_rows_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "tasks.db"
    with TaskStore(db) as s:
        a = s.insert("a")
        s.insert("b")
        s.set_done(a, True)

    with TaskStore(db) as s:
        items = s.load_all()
    assert [(t.description, t.is_done) for t in items] == [("a", True), ("b", False)]


def test_ids_are_not_reused_after_delete(store: TaskStore) -> None:
    a = store.insert("a")
    store.delete(a)
    b = store.insert("b")
    assert b > a


def test_schema_matches_expected_columns(store: TaskStore) -> None:
    conn = sqlite3.connect(str(store.db_path))
    try:
        cols = {row[1]: row for row in conn.execute("PRAGMA table_info(tasks)")}
    finally:
        conn.close()
    assert set(cols) == {"id", "description", "is_done"}
    assert cols["description"][3] == 1  # NOT NULL
    assert cols["is_done"][4] == "0"  # DEFAULT 0


def test_migration_adds_missing_is_done_column(tmp_path: Path) -> None:
    db = tmp_path / "old.db"
    conn = sqlite3.connect(str(db))
    conn.execute("CREATE TABLE tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, description TEXT NOT NULL)")
    conn.execute("INSERT INTO tasks(description) VALUES ('legacy')")
    conn.commit()
    conn.close()

    with TaskStore(db) as s:
        items = s.load_all()
        assert [(t.description, t.is_done) for t in items] == [("legacy", False)]
        s.set_done(items[0].id, True)
        assert s.load_all()[0].is_done is True


def test_corrupt_file_fails_initialize(tmp_path: Path) -> None:
    db = tmp_path / "tasks.db"
    db.write_bytes(b"this is definitely not a sqlite database file\n" * 64)

    s = TaskStore(db)
    with pytest.raises(StorageInitError):
        s.initialize()
    # close after a failed initialize is harmless
    s.close()


def test_directory_path_fails_initialize(tmp_path: Path) -> None:
    with pytest.raises(StorageInitError):
        TaskStore(tmp_path).initialize()


def test_use_before_initialize_raises() -> None:
    s = TaskStore("never-opened.db")
    with pytest.raises(StorageReadError):
        s.load_all()
    with pytest.raises(StorageWriteError):
        s.insert("x")
    with pytest.raises(StorageWriteError):
        s.set_done(1, True)
    with pytest.raises(StorageWriteError):
        s.delete(1)
    assert not Path("never-opened.db").exists()


def test_write_after_close_raises(store: TaskStore) -> None:
    store.close()
    store.close()
    with pytest.raises(StorageWriteError):
        store.insert("late")


def test_failed_write_is_wrapped(tmp_path: Path) -> None:
    db = tmp_path / "tasks.db"
    with TaskStore(db):
        pass
    conn = sqlite3.connect(str(db))
    conn.execute(
        "CREATE TRIGGER no_inserts BEFORE INSERT ON tasks "
        "BEGIN SELECT RAISE(ABORT, 'read only'); END"
    )
    conn.commit()
    conn.close()

    with TaskStore(db) as s:
        with pytest.raises(StorageWriteError) as excinfo:
            s.insert("blocked")
        assert isinstance(excinfo.value.__cause__, sqlite3.Error)
        assert s.count() == 0


def test_failed_read_is_wrapped(store: TaskStore) -> None:
    store.insert("x")
    conn = sqlite3.connect(str(store.db_path))
    conn.execute("DROP TABLE tasks")
    conn.commit()
    conn.close()

    with pytest.raises(StorageReadError):
        store.load_all()


def test_initialize_reports_failed_first_read_as_init_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_count(self):
        raise StorageReadError("disk I/O error")

    monkeypatch.setattr(TaskStore, "count", failing_count)

    s = TaskStore(tmp_path / "tasks.db")
    with pytest.raises(StorageInitError) as excinfo:
        s.initialize()
    assert isinstance(excinfo.value.__cause__, StorageReadError)

    # the connection was released, so the store behaves as never opened
    with pytest.raises(StorageWriteError, match="not initialized"):
        s.insert("x")
