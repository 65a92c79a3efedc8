"""Exceptions raised by the task store, the task file codec and date parsing."""


class TaskbotError(Exception):
    """Base class for taskbot errors"""


class OutOfRangeError(TaskbotError, IndexError):
    """A 1-based task index outside [1, size]"""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if size == 0:
            message = f"Task {index} does not exist: the list is empty"
        else:
            message = f"Task {index} does not exist: pick a number from 1 to {size}"
        super().__init__(message)


class MalformedRecordError(TaskbotError, ValueError):
    """A task file record that cannot be decoded"""


class StorageIOError(TaskbotError, OSError):
    """The task file could not be read or written"""


class DateParseError(TaskbotError, ValueError):
    """A string that is not a recognised date or date/time"""
