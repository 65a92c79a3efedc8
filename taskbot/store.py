"""
TASKBOT - Task Store
====================
Ordered, in-memory collection of tasks with 1-based positional access.

Tasks have no identity beyond their position: deleting task ``i`` moves
every task after it one place up, so any index above ``i`` held by a caller
is stale afterwards.
"""

import logging
from typing import Iterator, List, Optional

from .dates import parse_when, try_parse_when
from .errors import OutOfRangeError
from .schema import Task, TaskKind

logger = logging.getLogger("taskbot.store")

KIND_MARKERS = {
    TaskKind.TODO: "[T]",
    TaskKind.DEADLINE: "[D]",
    TaskKind.EVENT: "[E]",
}

TIME_LABELS = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


def describe(task: Task) -> str:
    """Display form without the index, e.g. "[D][X] report (by: 2024-05-01)" """
    done_marker = "[X]" if task.done else "[ ]"
    text = f"{KIND_MARKERS[task.kind]}{done_marker} {task.description}"
    label = TIME_LABELS.get(task.kind)
    if label:
        text += f" ({label}: {task.time})"
    return text


class TaskStore:
    """In-memory task list"""

    def __init__(self, tasks: Optional[List[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def tasks(self) -> List[Task]:
        """Shallow copy of the tasks in order"""
        return list(self._tasks)

    # ========================================
    # POSITIONAL OPERATIONS
    # ========================================

    def _check_index(self, index: int) -> int:
        """Translate a 1-based index to a list offset"""
        if index < 1 or index > len(self._tasks):
            raise OutOfRangeError(index, len(self._tasks))
        return index - 1

    def store(self, task: Task) -> int:
        """Append a task; returns its 1-based index"""
        self._tasks.append(task)
        logger.debug(f"Stored task {len(self._tasks)}: {task.description}")
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def retrieve(self, index: int) -> str:
        """Task at ``index`` rendered as "<index>. <markers> <description>" """
        return f"{index}. {describe(self.get(index))}"

    def mark_as_done(self, index: int) -> Task:
        """Mark task done. Marking a finished task again changes nothing."""
        task = self.get(index)
        if not task.done:
            task.mark_as_done()
            logger.debug(f"Marked task {index} done")
        return task

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``"""
        task = self._tasks.pop(self._check_index(index))
        logger.debug(f"Deleted task {index}: {task.description}")
        return task

    def get_num_tasks(self) -> int:
        return len(self._tasks)

    # ========================================
    # SEARCH
    # ========================================

    def search_by_date(self, query: str) -> Optional[List[int]]:
        """
        Find dated tasks falling on ``query``.

        A query with a time of day ("2024-06-01 1800") matches that exact
        instant; a bare date ("2024-06-01") matches the whole day. Todos and
        tasks whose time is not a parseable date never match.

        Returns:
            1-based indexes in store order, or None when nothing matches

        Raises:
            DateParseError: if ``query`` itself is not a date
        """
        wanted = parse_when(query)
        indexes = []

        for i, task in enumerate(self._tasks, start=1):
            if task.kind not in TIME_LABELS:
                continue
            when = try_parse_when(task.time)
            if when is not None and when.matches(wanted):
                indexes.append(i)

        logger.debug(f"Search {query!r}: {len(indexes)} match(es)")
        return indexes or None
