"""
TASKBOT - Task Manager
======================
Command layer over the task store. Loads the task file once, applies each
command to the in-memory store and rewrites the file after every change.

Usage:
    manager = TaskManager(StorageConfig(directory="data", filename="tasks.txt"))
    manager.add_deadline("submit report", "2024-05-01 2359")
    manager.mark_done(1)
    print(manager.get_list_report())
"""

import logging
from typing import Any, Dict, List, Optional

from . import persistence
from .schema import StorageConfig, Task
from .store import TaskStore

logger = logging.getLogger("taskbot")


class TaskManager:
    """
    Owns one TaskStore for the life of the process.

    Every mutating command saves the whole store, so the file always matches
    memory once a command returns.
    """

    def __init__(self, config: Optional[StorageConfig] = None):
        self.config = config or StorageConfig()
        self.store: TaskStore = persistence.load(self.config)

    def save(self) -> None:
        persistence.save(self.config, self.store)

    # ========================================
    # MUTATING COMMANDS
    # ========================================

    def add(self, task: Task) -> int:
        """Store a parsed task; returns its index"""
        index = self.store.store(task)
        self.save()
        logger.info(f"➕ Added {task.kind.value} {index}: {task.description}")
        return index

    def add_todo(self, description: str) -> int:
        return self.add(Task.todo(description))

    def add_deadline(self, description: str, by: str) -> int:
        return self.add(Task.deadline(description, by))

    def add_event(self, description: str, at: str) -> int:
        return self.add(Task.event(description, at))

    def mark_done(self, index: int) -> Task:
        task = self.store.mark_as_done(index)
        self.save()
        logger.info(f"✅ Done: {task.description} ({index})")
        return task

    def delete(self, index: int) -> Task:
        task = self.store.delete(index)
        self.save()
        logger.info(f"🗑️ Deleted: {task.description} ({index})")
        return task

    # ========================================
    # QUERIES
    # ========================================

    def search_by_date(self, query: str) -> Optional[List[int]]:
        return self.store.search_by_date(query)

    def list_tasks(self) -> List[Dict[str, Any]]:
        """Tasks as plain dicts, each with its 1-based index"""
        return [
            {"index": i, **task.model_dump(mode="json")}
            for i, task in enumerate(self.store, start=1)
        ]

    # ========================================
    # REPORTING
    # ========================================

    def get_list_report(self) -> str:
        """Numbered task list, one line per task"""
        count = self.store.get_num_tasks()
        if not count:
            return "No tasks yet"

        lines = [f"📋 {count} task(s):"]
        for i in range(1, count + 1):
            lines.append(f"  {self.store.retrieve(i)}")
        return "\n".join(lines)

    def get_search_report(self, query: str) -> str:
        """Search results rendered like the list"""
        indexes = self.search_by_date(query)
        if not indexes:
            return f"No tasks on {query}"

        lines = [f"🔎 {len(indexes)} task(s) on {query}:"]
        for i in indexes:
            lines.append(f"  {self.store.retrieve(i)}")
        return "\n".join(lines)
