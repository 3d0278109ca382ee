"""task_svc: a small HTTP service for creating and retrieving tasks."""

__version__ = "1.0.0"
