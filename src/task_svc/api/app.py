"""FastAPI application for the task_svc API.

This module creates the FastAPI application instance, wires the task routes
and exposes ``main`` to serve it with uvicorn.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .. import config
from ..database import check_db_connection, get_db, init_db
from ..logging_setup import configure_logging
from ..routes.task_routes import task_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database schema on startup."""
    init_db()
    yield


app = FastAPI(
    title="Task Service API",
    description="REST API for creating and retrieving tasks",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(task_router)


@app.get("/health")
def health_check(db: Session = Depends(get_db)) -> JSONResponse:
    """Report whether the service can reach its database."""
    if not check_db_connection(db):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy"},
        )
    return JSONResponse(content={"status": "healthy"})


def main():
    """Run the application with uvicorn."""
    import uvicorn

    configure_logging(config.LOG_LEVEL)
    logger.info(f"Starting task service on {config.SERVICE_HOST}:{config.SERVICE_PORT}")

    uvicorn.run(
        app,
        host=config.SERVICE_HOST,
        port=config.SERVICE_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
