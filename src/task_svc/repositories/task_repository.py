"""Task repository protocol and its SQLAlchemy implementation."""

import logging
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    """Create and read access to stored tasks.

    Implementations raise on storage failure and return ``None`` from
    ``get_task_by_id`` when no task has the given identifier.
    """

    def create_task(self, task: Task) -> int: ...

    def get_task_by_id(self, task_id: int) -> Optional[Task]: ...


class SqlAlchemyTaskRepository:
    """TaskRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def create_task(self, task: Task) -> int:
        """Insert ``task`` and return the identifier assigned by the database.

        Args:
            task: Unsaved Task instance carrying title and description

        Returns:
            The new task's integer ID

        Raises:
            Exception: Re-raises any database errors after logging and rollback
        """
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
            logger.info(f"Inserted task with ID: {task.id}")
            return task.id

        except Exception as e:
            logger.error(e, exc_info=True)
            self.db.rollback()
            raise

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        """Retrieve a task by its ID, or None if it does not exist."""
        try:
            task = self.db.get(Task, task_id)
            if task is None:
                logger.info(f"Task with ID {task_id} not found")
            return task

        except Exception as e:
            logger.error(e, exc_info=True)
            raise
