"""FastAPI routes for task creation and retrieval.

Each endpoint runs one ``TaskService`` operation and turns its outcome into a
response envelope: 200 on success, 400 for client errors, 500 for storage
failures.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from ..database import get_db
from ..repositories.task_repository import SqlAlchemyTaskRepository
from ..schemas.response import (
    ErrorField,
    Response,
    bad_response_error,
    internal_server_error,
    success_response,
)
from ..services.task_service import TaskService, TaskServiceError

logger = logging.getLogger(__name__)

task_router = APIRouter(tags=["tasks"])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Build a TaskService bound to the request's database session."""
    return TaskService(SqlAlchemyTaskRepository(db), logger)


def _error_response(error: TaskServiceError) -> JSONResponse:
    if error.field is ErrorField.INTERNAL:
        return internal_server_error()
    return bad_response_error(error.field, error.message)


@task_router.post("/tasks", response_model=Response)
async def create_task_endpoint(
    request: Request,
    service: TaskService = Depends(get_task_service)
) -> JSONResponse:
    """Create a task from a JSON body ``{"title": ..., "description": ...}``.

    The body is read raw so that decoding failures are reported through the
    envelope instead of FastAPI's default validation response.
    """
    body = await request.body()
    logger.info("POST /tasks request")

    try:
        data = await run_in_threadpool(service.create_task, body)
    except TaskServiceError as e:
        return _error_response(e)

    return success_response(data)


@task_router.get("/tasks/{task_id}", response_model=Response)
def get_task_endpoint(
    task_id: str,
    service: TaskService = Depends(get_task_service)
) -> JSONResponse:
    """Fetch a task by ID."""
    logger.info(f"GET /tasks/{task_id} request")

    try:
        data = service.get_task_by_id(task_id)
    except TaskServiceError as e:
        return _error_response(e)

    return success_response(data)
