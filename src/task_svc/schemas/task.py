"""Pydantic schemas for task requests and payloads.

This module defines the input schema a client sends to create a task and the
payload shapes returned inside the response envelope.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TaskRequest(BaseModel):
    """Input schema for creating a new task.

    ``title`` is required and must contain non-whitespace characters; it is
    stored exactly as sent. ``description`` may be omitted, empty or null.
    """
    title: str = Field(..., description="Task title (required)")
    description: Optional[str] = Field("", description="Detailed task description")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate that title is non-empty after stripping whitespace."""
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v

    @field_validator('description', mode="before")
    @classmethod
    def null_description_to_empty(cls, v):
        """Store a null description as an empty string."""
        return "" if v is None else v


class TaskResponse(BaseModel):
    """A stored task as returned to clients."""
    id: int = Field(..., ge=0, description="Storage-assigned task identifier")
    title: str = Field(..., description="Task title")
    description: str = Field("", description="Detailed task description")

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "title": "Buy milk",
                "description": "2%"
            }
        }
    }


class TaskCreatedResponse(BaseModel):
    """Payload returned after a task has been created."""
    task_id: int = Field(..., description="Identifier of the created task")
