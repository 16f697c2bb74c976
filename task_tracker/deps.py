"""Dependency helpers wiring settings, repository and service together."""

from functools import lru_cache

from .config import Settings, settings
from .repositories.task_repository import JsonTaskRepository, TaskRepository


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return settings


def get_task_repository(settings: Settings) -> TaskRepository:
    """Get the JSON file repository configured by the settings."""
    return JsonTaskRepository(settings.db_file_path)
