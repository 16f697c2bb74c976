"""Shared test fixtures and configuration for the test suite."""

import json
from pathlib import Path

import pytest

# Add the parent directory to the path for imports
import sys

sys.path.append(str(Path(__file__).parent.parent))

from task_tracker.config import Settings
from task_tracker.repositories.task_repository import InMemoryTaskRepository, JsonTaskRepository
from task_tracker.services.task_service import TaskService


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Location of a backing file that does not exist yet."""
    return tmp_path / "tasks_database.json"


@pytest.fixture
def json_repository(db_path) -> JsonTaskRepository:
    """Create a JSON repository on a temporary file."""
    return JsonTaskRepository(db_path)


@pytest.fixture
def task_service(json_repository) -> TaskService:
    """Create a task service storing tasks in a temporary file."""
    return TaskService(json_repository)


@pytest.fixture
def memory_service() -> TaskService:
    """Create a task service with in-memory storage."""
    return TaskService(InMemoryTaskRepository())


@pytest.fixture
def test_settings(db_path) -> Settings:
    """Create test settings pointing at a temporary database."""
    return Settings(db_file_path=db_path, log_level="DEBUG")


@pytest.fixture
def write_db(db_path):
    """Write raw JSON content to the backing file."""
    def _write(content) -> Path:
        if isinstance(content, str):
            db_path.write_text(content, encoding="utf-8")
        else:
            db_path.write_text(json.dumps(content), encoding="utf-8")
        return db_path
    
    return _write


@pytest.fixture
def read_db(db_path):
    """Read the backing file as JSON."""
    def _read():
        return json.loads(db_path.read_text(encoding="utf-8"))
    
    return _read


# Test data fixtures
@pytest.fixture
def sample_task_data():
    """Sample add-task arguments."""
    return {
        "title": "Buy book",
        "description": "Software engineering textbook",
        "due_date": "2025-07-20",
        "priority": "High",
    }


@pytest.fixture
def sample_record():
    """A task record as found in the backing file."""
    return {
        "id": "3f2b8c1e-5a4d-4e6f-9a7b-1c2d3e4f5a6b",
        "title": "Exercise",
        "description": "Run for 30 minutes",
        "due_date": "2025-07-21",
        "priority": "Medium",
        "status": "Not completed",
        "created_at": "2025-07-01T09:30:00.123456",
        "last_updated_at": "2025-07-01T09:30:00.123456",
    }
