"""Uniform response envelope.

Every endpoint answers with ``{"status": ..., "data": ...}`` on success or
``{"status": "error", "error": {"field": ..., "message": ...}}`` on failure.
The builders here return ready-to-send ``JSONResponse`` objects.
"""

from enum import Enum
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorField(str, Enum):
    """Kind of failure reported in an error envelope."""
    BAD_FORMAT = "BadFormat"
    INCORRECT = "Incorrect"
    INTERNAL = "Internal"


class ErrorDetail(BaseModel):
    """Error descriptor carried by a failed response."""
    field: ErrorField = Field(..., description="Kind of failure")
    message: str = Field(..., description="Human readable reason")


class Response(BaseModel):
    """Envelope wrapping every API response."""
    status: str = Field(..., description="'success' or 'error'")
    data: Optional[Any] = Field(None, description="Payload on success")
    error: Optional[ErrorDetail] = Field(None, description="Error descriptor on failure")


def _envelope_response(envelope: Response, status_code: int) -> JSONResponse:
    content = jsonable_encoder(envelope, exclude_none=True)
    return JSONResponse(status_code=status_code, content=content)


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap ``data`` in a success envelope."""
    return _envelope_response(Response(status=STATUS_SUCCESS, data=data), status_code)


def bad_response_error(field: ErrorField, message: str) -> JSONResponse:
    """Build a 400 error envelope for a client mistake."""
    envelope = Response(
        status=STATUS_ERROR,
        error=ErrorDetail(field=field, message=message),
    )
    return _envelope_response(envelope, status.HTTP_400_BAD_REQUEST)


def internal_server_error() -> JSONResponse:
    """Build a 500 error envelope that discloses nothing about the cause."""
    envelope = Response(
        status=STATUS_ERROR,
        error=ErrorDetail(field=ErrorField.INTERNAL, message=INTERNAL_ERROR_MESSAGE),
    )
    return _envelope_response(envelope, status.HTTP_500_INTERNAL_SERVER_ERROR)
