"""API routes for the task_svc application."""

from .task_routes import task_router

__all__ = ["task_router"]
