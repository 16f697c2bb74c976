"""Exceptions raised by the task tracker."""

from .models.task import Task
from .schemas import TaskErrorKind


class TaskTrackerError(Exception):
    """Base class for task tracker errors."""
    
    kind: TaskErrorKind
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskTrackerError, ValueError):
    """A new task was rejected before anything was written."""


class EmptyFieldError(TaskValidationError):
    kind = TaskErrorKind.EMPTY_FIELD


class InvalidDateFormatError(TaskValidationError):
    kind = TaskErrorKind.INVALID_DATE_FORMAT


class InvalidPriorityError(TaskValidationError):
    kind = TaskErrorKind.INVALID_PRIORITY


class DuplicateTaskError(TaskValidationError):
    kind = TaskErrorKind.DUPLICATE_TASK


class TaskPersistenceError(TaskTrackerError):
    """The task was built but the collection could not be written."""
    
    kind = TaskErrorKind.REPOSITORY_WRITE_FAILURE
    
    def __init__(self, message: str, task: Task):
        super().__init__(message)
        self.task = task
