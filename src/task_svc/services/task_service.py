"""Task service layer: request handling for task creation and lookup.

``TaskService`` decodes and validates client input, delegates to a
``TaskRepository`` and reports failures as ``TaskServiceError`` subclasses
that the routes translate into response envelopes.
"""

import logging
import re
from typing import Dict, Any, Optional

from pydantic import ValidationError

from ..models.task import Task
from ..repositories.task_repository import TaskRepository
from ..schemas.response import ErrorField
from ..schemas.task import TaskCreatedResponse, TaskRequest, TaskResponse

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"
INVALID_TASK_ID_MESSAGE = "Invalid task ID"
TASK_NOT_FOUND_MESSAGE = "Task not found"

# pydantic error types that mean "well-formed but semantically wrong"
INCORRECT_ERROR_TYPES = {"missing", "value_error", "string_too_short"}

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_TASK_ID = -2 ** 63
MAX_TASK_ID = 2 ** 63 - 1


class TaskServiceError(Exception):
    """Base class for failures reported to the client through an envelope."""
    field = ErrorField.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadFormatError(TaskServiceError):
    """Exception raised when the request payload cannot be decoded."""
    field = ErrorField.BAD_FORMAT


class IncorrectError(TaskServiceError):
    """Exception raised when a decoded value is invalid or refers to nothing."""
    field = ErrorField.INCORRECT


class InternalError(TaskServiceError):
    """Exception raised when storage fails; the cause is logged, not returned."""
    field = ErrorField.INTERNAL


def _is_incorrect(error: Dict[str, Any]) -> bool:
    # An explicit null is treated like an absent value
    if error["type"] == "string_type" and error.get("input") is None:
        return True
    return error["type"] in INCORRECT_ERROR_TYPES


def _format_validation_error(exc: ValidationError) -> str:
    """Render pydantic errors as ``field: reason`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{location}: {message}")
    return "; ".join(parts)


def decode_task_request(body: bytes) -> TaskRequest:
    """Decode and validate a raw JSON request body.

    Args:
        body: Raw request body

    Returns:
        The validated TaskRequest

    Raises:
        BadFormatError: When the body is not a JSON object of the expected types
        IncorrectError: When a required field is missing or a value is rejected
    """
    try:
        return TaskRequest.model_validate_json(body)
    except ValidationError as e:
        if all(_is_incorrect(error) for error in e.errors()):
            raise IncorrectError(_format_validation_error(e)) from e
        raise BadFormatError(INVALID_BODY_MESSAGE) from e


def parse_task_id(raw_id: str) -> int:
    """Parse a path parameter as a task ID.

    Only an optional sign followed by ASCII digits within the signed 64-bit
    range is accepted.

    Raises:
        IncorrectError: When ``raw_id`` is not a representable integer
    """
    if raw_id is None or not TASK_ID_PATTERN.fullmatch(raw_id):
        raise IncorrectError(INVALID_TASK_ID_MESSAGE)
    task_id = int(raw_id)
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise IncorrectError(INVALID_TASK_ID_MESSAGE)
    return task_id


class TaskService:
    """Handles task creation and lookup against a repository.

    Args:
        repository: Storage backend implementing TaskRepository
        log: Logger used for request failures; defaults to this module's logger
    """

    def __init__(self, repository: TaskRepository, log: Optional[logging.Logger] = None):
        self.repository = repository
        self.log = log or logger

    def create_task(self, body: bytes) -> Dict[str, Any]:
        """Create a task from a raw JSON body.

        Returns:
            ``{"task_id": <id>}`` for the stored task

        Raises:
            BadFormatError: When the body cannot be decoded
            IncorrectError: When validation fails
            InternalError: When the repository fails
        """
        try:
            request = decode_task_request(body)
        except BadFormatError as e:
            self.log.error(f"Invalid request body: {e.__cause__}")
            raise
        except IncorrectError as e:
            self.log.warning(f"Task request rejected: {e.message}")
            raise

        task = Task(title=request.title, description=request.description)
        try:
            task_id = self.repository.create_task(task)
        except Exception as e:
            self.log.error(f"Failed to insert task: {e}", exc_info=True)
            raise InternalError("Failed to insert task") from e

        self.log.info(f"Created task with ID: {task_id}")
        return TaskCreatedResponse(task_id=task_id).model_dump()

    def get_task_by_id(self, raw_id: str) -> Dict[str, Any]:
        """Fetch a task by the ID given in the request path.

        A missing task is reported as ``IncorrectError``, not as a storage failure.

        Returns:
            The task as ``{"id", "title", "description"}``

        Raises:
            IncorrectError: When the ID is malformed or no task has it
            InternalError: When the repository fails
        """
        try:
            task_id = parse_task_id(raw_id)
        except IncorrectError:
            self.log.error(f"Invalid task ID: {raw_id!r}")
            raise

        try:
            task = self.repository.get_task_by_id(task_id)
        except Exception as e:
            self.log.error(f"Failed to get task by ID {task_id}: {e}", exc_info=True)
            raise InternalError("Failed to get task") from e

        if task is None:
            raise IncorrectError(TASK_NOT_FOUND_MESSAGE)

        return TaskResponse.model_validate(task).model_dump()
