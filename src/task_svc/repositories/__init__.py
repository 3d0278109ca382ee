"""Persistence layer for tasks.

Handlers depend on the ``TaskRepository`` protocol; ``SqlAlchemyTaskRepository``
is the concrete backend used by the running service.
"""

from .task_repository import SqlAlchemyTaskRepository, TaskRepository

__all__ = ["TaskRepository", "SqlAlchemyTaskRepository"]
