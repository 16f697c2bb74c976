"""Demonstration entry point: adds a few tasks to the configured task database."""

import logging
from typing import List, Optional

from .deps import get_settings, get_task_repository
from .schemas import AddTaskResult, TaskCreate
from .services.task_service import initialize_task_service
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

DEMO_TASKS = [
    TaskCreate(title="Buy book", description="Software engineering textbook", due_date="2025-07-20", priority="High"),
    TaskCreate(title="Exercise", description="Run for 30 minutes", due_date="2025-07-21", priority="Medium"),
    TaskCreate(title="", description="Task without a title", due_date="2025-07-22", priority="Low"),
]


def run(tasks: Optional[List[TaskCreate]] = None) -> List[AddTaskResult]:
    """Add each task in turn, printing one status line per task.
    
    Args:
        tasks: Add-task requests, defaults to the demonstration tasks
        
    Returns:
        Outcome of every request, in order
    """
    settings = get_settings()
    setup_logging(settings)
    
    task_service = initialize_task_service(get_task_repository(settings))
    logger.debug(f"Using task database {settings.db_file_path}")
    
    results = []
    for task_data in DEMO_TASKS if tasks is None else tasks:
        result = task_service.add_task_from_schema(task_data)
        print(result.message)
        results.append(result)
    
    return results


def main() -> int:
    run()
    return 0
