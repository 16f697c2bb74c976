"""Tests for the demonstration entry point."""

import json
from unittest.mock import patch

import pytest

from task_tracker import main as main_module
from task_tracker.schemas import TaskCreate, TaskErrorKind


@pytest.fixture
def patched_main(test_settings):
    """Point the entry point at temporary settings without touching logging."""
    with (
        patch.object(main_module, "get_settings", return_value=test_settings),
        patch.object(main_module, "setup_logging") as mock_setup_logging,
    ):
        yield mock_setup_logging


class TestMain:
    """Test the entry point."""
    
    def test_run_demo_tasks(self, patched_main, test_settings, db_path, capsys):
        results = main_module.run()
        
        lines = capsys.readouterr().out.splitlines()
        assert [result.success for result in results] == [True, True, False]
        assert lines[0] == f"Added new task successfully with ID: {results[0].task.id}"
        assert lines[1] == f"Added new task successfully with ID: {results[1].task.id}"
        assert lines[2] == "Task title cannot be empty."
        assert results[2].error == TaskErrorKind.EMPTY_FIELD
        
        stored = json.loads(db_path.read_text(encoding="utf-8"))
        assert [record["title"] for record in stored] == ["Buy book", "Exercise"]
        patched_main.assert_called_once_with(test_settings)
    
    def test_run_twice_reports_duplicates(self, patched_main, capsys):
        main_module.run()
        results = main_module.run()
        
        assert [result.error for result in results] == [
            TaskErrorKind.DUPLICATE_TASK,
            TaskErrorKind.DUPLICATE_TASK,
            TaskErrorKind.EMPTY_FIELD,
        ]
    
    def test_run_custom_tasks(self, patched_main, capsys):
        results = main_module.run([
            TaskCreate(title="Buy book", due_date="2025-07-20", priority="High"),
            TaskCreate(title="buy book", due_date="2025-07-20", priority="Low"),
        ])
        
        assert results[0].success is True
        assert results[1].error == TaskErrorKind.DUPLICATE_TASK
    
    def test_main_exit_code(self, patched_main):
        assert main_module.main() == 0
