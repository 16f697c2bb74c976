"""Domain models for the task tracker."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping
from uuid import uuid4

from pydantic import BaseModel, Field


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskStatus(str, Enum):
    """Task status enumeration."""
    NOT_COMPLETED = "Not completed"
    COMPLETED = "Completed"


# Closed set of accepted priority labels, compared by exact string match
VALID_PRIORITIES = frozenset(priority.value for priority in TaskPriority)


def _new_task_id() -> str:
    return str(uuid4())


class Task(BaseModel):
    """Task domain model."""
    
    id: str = Field(default_factory=_new_task_id, description="Unique task identifier")
    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field(default="", description="Task description")
    due_date: date = Field(..., description="Task due date")
    priority: TaskPriority = Field(..., description="Task priority")
    status: TaskStatus = Field(default=TaskStatus.NOT_COMPLETED, description="Task status")
    created_at: datetime = Field(default_factory=datetime.now, description="Task creation timestamp")
    last_updated_at: datetime = Field(default_factory=datetime.now, description="Task last update timestamp")
    
    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        frozen = True
    
    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        due_date: date,
        priority: TaskPriority,
    ) -> "Task":
        """Build a brand new task with both timestamps set to the same instant.
        
        Args:
            title: Task title
            description: Task description
            due_date: Task due date
            priority: Task priority
            
        Returns:
            New task in the default status
        """
        now = datetime.now()
        return cls(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            created_at=now,
            last_updated_at=now,
        )
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Task":
        """Validate a stored record back into a task."""
        return cls.model_validate(dict(record))
    
    @property
    def formatted_due_date(self) -> str:
        return self.due_date.isoformat()
    
    def to_record(self) -> Dict[str, Any]:
        """Serialize the task into its JSON-ready stored form.
        
        Every value is a string: dates as YYYY-MM-DD, timestamps as ISO 8601.
        """
        record = self.model_dump(mode="json")
        record["due_date"] = self.formatted_due_date
        record["created_at"] = self.created_at.isoformat()
        record["last_updated_at"] = self.last_updated_at.isoformat()
        return record
