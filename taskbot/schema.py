"""
TASKBOT - Task Schema Definition
================================
Task records (todo / deadline / event) and storage configuration.

A Task is a tagged union: ``kind`` is the discriminant, ``time`` is only
meaningful for the dated variants.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TaskKind(str, Enum):
    """Task variants"""
    TODO = "todo"           # Plain item, no date
    DEADLINE = "deadline"   # Due "by" a date/time
    EVENT = "event"         # Happens "at" a date/time or range


# Kinds that must carry a time field
DATED_KINDS = (TaskKind.DEADLINE, TaskKind.EVENT)


class Task(BaseModel):
    """Individual task"""
    model_config = ConfigDict(validate_assignment=True)

    kind: TaskKind = Field(frozen=True)
    description: str = Field(frozen=True)
    done: bool = False
    time: Optional[str] = Field(default=None, frozen=True)  # raw "by"/"at" string

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        if len(value.splitlines()) > 1:
            raise ValueError("description must fit on one line")
        return value

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if len(value.splitlines()) > 1:
            raise ValueError("time must fit on one line")
        return value or None

    @model_validator(mode="after")
    def _check_time_matches_kind(self) -> "Task":
        if self.kind == TaskKind.TODO and self.time is not None:
            raise ValueError("a todo does not carry a time")
        if self.kind in DATED_KINDS and self.time is None:
            raise ValueError(f"a {self.kind.value} needs a time")
        return self

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        return cls(kind=TaskKind.DEADLINE, description=description, time=by)

    @classmethod
    def event(cls, description: str, at: str) -> "Task":
        return cls(kind=TaskKind.EVENT, description=description, time=at)

    def mark_as_done(self) -> None:
        """One-way: there is no unmark"""
        self.done = True


class StorageConfig(BaseModel):
    """Where the task file lives"""
    directory: str = "data"
    filename: str = "tasks.txt"

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.filename

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Defaults overridable through TASKBOT_DIR / TASKBOT_FILE"""
        defaults = cls()
        return cls(
            directory=os.environ.get("TASKBOT_DIR", defaults.directory),
            filename=os.environ.get("TASKBOT_FILE", defaults.filename),
        )
