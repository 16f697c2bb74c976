"""Task service: validates new tasks and appends them to the repository."""

import logging
import re
from datetime import date
from typing import Any, Optional

from ..errors import (
    DuplicateTaskError,
    EmptyFieldError,
    InvalidDateFormatError,
    InvalidPriorityError,
    TaskPersistenceError,
    TaskTrackerError,
)
from ..models.task import VALID_PRIORITIES, Task, TaskPriority
from ..repositories.task_repository import TaskCollection, TaskRepository
from ..schemas import AddTaskResult, TaskCreate

logger = logging.getLogger(__name__)

DUE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_due_date(value: str) -> date:
    """Parse a due date in strict YYYY-MM-DD form.
    
    Args:
        value: Raw due date
        
    Returns:
        Parsed calendar date
        
    Raises:
        InvalidDateFormatError: If the value is not zero-padded YYYY-MM-DD
            or does not name a real calendar day
    """
    message = "Invalid due date. Please use the YYYY-MM-DD format."
    if not isinstance(value, str) or not DUE_DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormatError(message)
    
    year, month, day = (int(part) for part in value.split("-"))
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateFormatError(message)


def validate_priority(value: Any) -> TaskPriority:
    """Check a priority label against the closed set, by exact match.
    
    Raises:
        InvalidPriorityError: If the label is not one of the known priorities
    """
    if isinstance(value, TaskPriority):
        return value

    if not isinstance(value, str) or value not in VALID_PRIORITIES:
        labels = ", ".join(priority.value for priority in TaskPriority)
        raise InvalidPriorityError(f"Invalid priority. Please choose one of: {labels}.")
    return TaskPriority(value)


def is_duplicate_task(collection: TaskCollection, title: str, due_date: date) -> bool:
    """Whether a stored task already has this title (any case) and due date."""
    wanted_title = title.strip().casefold()
    wanted_date = due_date.isoformat()
    
    for record in collection:
        if not isinstance(record, dict):
            continue
        
        stored_title = record.get("title")
        if not isinstance(stored_title, str):
            continue
        
        if stored_title.strip().casefold() == wanted_title and record.get("due_date") == wanted_date:
            return True
    
    return False


class TaskService:
    """Service adding validated tasks to a task repository."""
    
    def __init__(self, repository: TaskRepository):
        """Initialize the task service.
        
        Args:
            repository: Store holding the task collection
        """
        self.repository = repository
        logger.info(f"Task service initialized with {type(repository).__name__}")
    
    def create_task(
        self,
        title: Optional[str],
        description: Optional[str],
        due_date: Optional[str],
        priority: Optional[str],
    ) -> Task:
        """Validate, build and persist a new task.
        
        Checks run in order and stop at the first failure. Nothing is
        written unless every check passes.
        
        Args:
            title: Task title, required
            description: Optional task description
            due_date: Due date as YYYY-MM-DD, required
            priority: One of the priority labels, required
            
        Returns:
            Created task
            
        Raises:
            EmptyFieldError: If title or due date is missing or blank
            InvalidDateFormatError: If the due date is malformed
            InvalidPriorityError: If the priority is not a known label
            DuplicateTaskError: If the title and due date are already taken
            TaskPersistenceError: If the collection could not be saved
        """
        if is_blank(title):
            raise EmptyFieldError("Task title cannot be empty.")
        
        if is_blank(due_date):
            raise EmptyFieldError("Due date cannot be empty.")
        
        parsed_due_date = validate_due_date(due_date)
        task_priority = validate_priority(priority)
        
        tasks = self.repository.load_tasks_from_db()
        
        if is_duplicate_task(tasks, title, parsed_due_date):
            raise DuplicateTaskError(
                f"Task '{title.strip()}' already exists with the same due date."
            )
        
        task = Task.create(
            title=title.strip(),
            description=description.strip() if isinstance(description, str) else "",
            due_date=parsed_due_date,
            priority=task_priority,
        )
        tasks.append(task.to_record())
        
        if not self.repository.save_tasks_to_db(tasks):
            raise TaskPersistenceError(
                f"Task {task.id} was created but could not be saved.", task
            )
        
        logger.info(f"Created task {task.id}: {task.title}")
        return task
    
    def add_new_task(
        self,
        title: Optional[str],
        description: Optional[str],
        due_date: Optional[str],
        priority: Optional[str],
    ) -> AddTaskResult:
        """Add a new task, reporting the outcome as a result value.
        
        Returns:
            Successful result carrying the task, or a failed result naming
            the error kind. A failed save still carries the built task.
        """
        try:
            task = self.create_task(title, description, due_date, priority)
        except TaskPersistenceError as e:
            logger.error(e.message)
            return AddTaskResult.failed(e.kind, e.message, task=e.task)
        except TaskTrackerError as e:
            logger.warning(e.message)
            return AddTaskResult.failed(e.kind, e.message)
        
        return AddTaskResult.ok(task, f"Added new task successfully with ID: {task.id}")
    
    def add_task_from_schema(self, task_data: TaskCreate) -> AddTaskResult:
        """Add a new task from schema.
        
        Args:
            task_data: Task creation data
            
        Returns:
            Outcome of the request
        """
        return self.add_new_task(
            title=task_data.title,
            description=task_data.description,
            due_date=task_data.due_date,
            priority=task_data.priority,
        )


# Global task service instance - will be initialized during startup
_task_service: Optional[TaskService] = None


def get_task_service() -> Optional[TaskService]:
    """Get the global task service instance.
    
    Returns:
        Task service instance or None if not initialized
    """
    return _task_service


def initialize_task_service(repository: TaskRepository) -> TaskService:
    """Initialize the global task service instance.
    
    Returns:
        Initialized task service
    """
    global _task_service
    _task_service = TaskService(repository)
    return _task_service
