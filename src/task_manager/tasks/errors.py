# src/task_manager/tasks/errors.py

from __future__ import annotations


class StorageError(Exception):
    """Base class for task storage failures."""


class StorageInitError(StorageError):
    """The database could not be opened or the schema could not be created."""


class StorageReadError(StorageError):
    """Loading tasks failed (I/O error or corrupt file)."""


class StorageWriteError(StorageError):
    """An insert, update or delete failed."""
