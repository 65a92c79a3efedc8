# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbot.schema import StorageConfig, Task
from taskbot.store import TaskStore


@pytest.fixture()
def config(tmp_path: Path) -> StorageConfig:
    """Task file inside a not-yet-created directory under tmp_path."""
    return StorageConfig(directory=str(tmp_path / "data"), filename="tasks.txt")


@pytest.fixture()
def store() -> TaskStore:
    """
    One task of each kind:
      1. todo "read book"
      2. deadline "submit report" by 2024-05-01 2359
      3. event "team dinner" at 2024-06-01 1800-2000
    """
    s = TaskStore()
    s.store(Task.todo("read book"))
    s.store(Task.deadline("submit report", "2024-05-01 2359"))
    s.store(Task.event("team dinner", "2024-06-01 1800-2000"))
    return s
