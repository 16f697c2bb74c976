"""Domain models."""

from .task import VALID_PRIORITIES, Task, TaskPriority, TaskStatus

__all__ = ["VALID_PRIORITIES", "Task", "TaskPriority", "TaskStatus"]
