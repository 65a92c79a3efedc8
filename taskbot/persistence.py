"""
TASKBOT - Task File Persistence
===============================
Flat text file <-> TaskStore. Each task is exactly three lines:

    <TAG><DONE_DIGIT>       e.g. "D1"
    <description>
    <time, blank for todos>

The whole file is rewritten on every save (no append, no atomic rename: a
crash mid-write can leave a truncated file).
"""

import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from .errors import MalformedRecordError, StorageIOError
from .schema import StorageConfig, Task, TaskKind
from .store import TaskStore

logger = logging.getLogger("taskbot.persistence")

LINES_PER_RECORD = 3

KIND_TAGS = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}
TAG_KINDS = {tag: kind for kind, tag in KIND_TAGS.items()}


# ========================================
# RECORD CODEC
# ========================================

def encode_task(task: Task) -> List[str]:
    """The three lines for one task, without line endings"""
    header = KIND_TAGS[task.kind] + ("1" if task.done else "0")
    return [header, task.description, task.time or ""]


def decode_record(lines: List[str]) -> Task:
    """Build a Task from one three-line record.

    Raises:
        MalformedRecordError: unknown tag or fields that fail validation
    """
    header, description, time_field = lines
    kind = TAG_KINDS.get(header[:1])
    if kind is None:
        raise MalformedRecordError(f"Unknown task tag in header {header!r}")

    try:
        task = Task(
            kind=kind,
            description=description,
            time=time_field if kind != TaskKind.TODO else None,
        )
    except ValidationError as e:
        raise MalformedRecordError(f"Invalid {kind.value} record: {e}") from e

    # Anything but '1' right after the tag reads as not done
    if header[1:2] == "1":
        task.mark_as_done()
    return task


# ========================================
# LOAD / SAVE
# ========================================

def load(config: StorageConfig) -> TaskStore:
    """Read the task file into a new store.

    A missing file is the normal first-run state and gives an empty store.
    Unreadable records are logged and skipped; the cursor always advances
    three lines so later records stay aligned.

    Raises:
        StorageIOError: the file exists but cannot be read
    """
    path = config.path
    store = TaskStore()

    if not path.exists():
        logger.info(f"📭 No task file at {path}, starting empty")
        return store

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageIOError(f"Cannot read task file {path}: {e}") from e

    # Only "\n" ends a line: other line-break characters belong to the field
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()

    for start in range(0, len(lines), LINES_PER_RECORD):
        record = lines[start:start + LINES_PER_RECORD]
        line_no = start + 1
        if len(record) < LINES_PER_RECORD:
            # Stray blank lines at the end are not a record
            if any(line.strip() for line in record):
                logger.warning(f"⚠️ Dropping incomplete record at line {line_no} of {path}")
            break
        try:
            store.store(decode_record(record))
        except MalformedRecordError as e:
            logger.warning(f"⚠️ Skipping record at line {line_no} of {path}: {e}")

    logger.info(f"📂 Loaded {store.get_num_tasks()} task(s) from {path}")
    return store


def save(config: StorageConfig, store: TaskStore) -> None:
    """Overwrite the task file with every task in the store.

    Raises:
        StorageIOError: the directory or file cannot be created or written
    """
    path = config.path
    lines = []
    for task in store:
        lines.extend(encode_task(task))

    try:
        Path(config.directory).mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write("".join(line + "\n" for line in lines))
    except OSError as e:
        raise StorageIOError(f"Cannot write task file {path}: {e}") from e

    logger.info(f"✅ Saved {store.get_num_tasks()} task(s) to {path}")
