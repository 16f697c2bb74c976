"""Task storage."""

from .task_repository import (
    InMemoryTaskRepository,
    JsonTaskRepository,
    TaskCollection,
    TaskRepository,
)

__all__ = ["InMemoryTaskRepository", "JsonTaskRepository", "TaskCollection", "TaskRepository"]
