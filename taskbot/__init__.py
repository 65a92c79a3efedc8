"""
TASKBOT - Personal Task List
============================

Todos, deadlines and events kept in a flat text file.

Usage:
    from taskbot import StorageConfig, Task, load, save

    config = StorageConfig(directory="data", filename="tasks.txt")
    store = load(config)
    store.store(Task.deadline("submit report", "2024-05-01 2359"))
    store.mark_as_done(1)
    save(config, store)

    print(store.search_by_date("2024-05-01"))   # [1]
"""

from .schema import (
    Task,
    TaskKind,
    StorageConfig,
)

from .errors import (
    TaskbotError,
    OutOfRangeError,
    MalformedRecordError,
    StorageIOError,
    DateParseError,
)

from .store import TaskStore
from .persistence import load, save
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "Task",
    "TaskKind",
    "StorageConfig",
    "TaskStore",
    "TaskManager",
    "load",
    "save",
    "TaskbotError",
    "OutOfRangeError",
    "MalformedRecordError",
    "StorageIOError",
    "DateParseError",
]
