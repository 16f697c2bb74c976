"""Task repositories: whole-collection load and save."""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

# Ordered sequence of raw task records, exactly as stored
TaskCollection = List[Dict[str, Any]]


class TaskRepository(ABC):
    """Storage contract for the task collection.
    
    Implementations load and save the whole collection at once. Loading never
    raises: any problem degrades to an empty collection.
    """
    
    @abstractmethod
    def load_tasks_from_db(self) -> TaskCollection:
        """Return every stored task record."""
    
    @abstractmethod
    def save_tasks_to_db(self, collection: TaskCollection) -> bool:
        """Replace the stored collection, returning whether the write succeeded."""


class JsonTaskRepository(TaskRepository):
    """Repository backed by a single JSON array file.
    
    Each save rewrites the whole file. There is no locking, so two processes
    saving at the same time can lose one of the updates.
    """
    
    def __init__(self, path: Union[str, Path]):
        """Initialize the repository.
        
        Args:
            path: Backing file location
        """
        self.path = Path(path)
        logger.debug(f"JSON task repository using {self.path}")
    
    def load_tasks_from_db(self) -> TaskCollection:
        """Load the task collection from the backing file.
        
        Returns:
            Stored records, or an empty list when the file is missing,
            unreadable, not valid JSON or not a JSON array
        """
        try:
            with self.path.open("r", encoding="utf-8") as db_file:
                data = json.load(db_file)
        except FileNotFoundError:
            logger.warning(f"Task database {self.path} not found, starting with no tasks")
            return []
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Error reading task database {self.path}: {str(e)}")
            return []
        
        if not isinstance(data, list):
            logger.warning(
                f"Task database {self.path} does not contain a JSON array "
                f"(found {type(data).__name__}), ignoring its content"
            )
            return []
        
        logger.debug(f"Loaded {len(data)} tasks from {self.path}")
        return data
    
    def save_tasks_to_db(self, collection: TaskCollection) -> bool:
        """Overwrite the backing file with the full collection.
        
        Write errors are logged, not raised.
        
        Args:
            collection: Every task record to store
            
        Returns:
            True if the file was written, False otherwise
        """
        try:
            content = json.dumps(collection, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            logger.error(f"Error serializing task collection: {str(e)}")
            return False
        
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing task database {self.path}: {str(e)}")
            return False
        
        logger.debug(f"Saved {len(collection)} tasks to {self.path}")
        return True


class InMemoryTaskRepository(TaskRepository):
    """Repository keeping the collection in memory."""
    
    def __init__(self, collection: Optional[TaskCollection] = None):
        self._collection: TaskCollection = copy.deepcopy(collection or [])
    
    def load_tasks_from_db(self) -> TaskCollection:
        return copy.deepcopy(self._collection)
    
    def save_tasks_to_db(self, collection: TaskCollection) -> bool:
        self._collection = copy.deepcopy(collection)
        return True
