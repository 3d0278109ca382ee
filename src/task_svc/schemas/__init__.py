"""Pydantic schemas for the task_svc application.

This package contains the request/payload models and the response envelope.
"""

from .response import (
    ErrorDetail,
    ErrorField,
    Response,
    bad_response_error,
    internal_server_error,
    success_response,
)
from .task import TaskCreatedResponse, TaskRequest, TaskResponse

__all__ = [
    "TaskRequest",
    "TaskResponse",
    "TaskCreatedResponse",
    "ErrorField",
    "ErrorDetail",
    "Response",
    "success_response",
    "bad_response_error",
    "internal_server_error",
]
