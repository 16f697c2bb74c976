"""Input and result schemas for the task tracker."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .models.task import Task


class TaskErrorKind(str, Enum):
    """Reasons an add-task request can fail."""
    EMPTY_FIELD = "empty_field"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_PRIORITY = "invalid_priority"
    DUPLICATE_TASK = "duplicate_task"
    REPOSITORY_WRITE_FAILURE = "repository_write_failure"


# Task-related schemas
class TaskCreate(BaseModel):
    """Schema for an add-task request.
    
    Fields are deliberately unconstrained: the service validates them in a
    fixed order so that the first problem found is the one reported.
    """
    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    due_date: Optional[str] = Field(None, description="Due date as YYYY-MM-DD")
    priority: Optional[str] = Field(None, description="Priority label")


class AddTaskResult(BaseModel):
    """Outcome of an add-task request."""
    success: bool = Field(..., description="Whether the task was added and persisted")
    task: Optional[Task] = Field(None, description="The task that was built, if any")
    error: Optional[TaskErrorKind] = Field(None, description="Failure kind when success is false")
    message: str = Field(..., description="User-facing status message")
    
    @classmethod
    def ok(cls, task: Task, message: str) -> "AddTaskResult":
        return cls(success=True, task=task, message=message)
    
    @classmethod
    def failed(
        cls,
        error: TaskErrorKind,
        message: str,
        task: Optional[Task] = None,
    ) -> "AddTaskResult":
        return cls(success=False, task=task, error=error, message=message)
