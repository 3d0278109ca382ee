"""Service layer for the task_svc application.

This package contains the request-handling logic for task operations.
"""

from .task_service import (
    TaskService,
    TaskServiceError,
    BadFormatError,
    IncorrectError,
    InternalError,
)

__all__ = [
    "TaskService",
    "TaskServiceError",
    "BadFormatError",
    "IncorrectError",
    "InternalError",
]
