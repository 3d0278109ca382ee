"""Database connection and session management using SQLAlchemy.

This module owns the engine and session factory used by the task repository.
PostgreSQL and SQLite URLs are both supported; the schema is created from the
ORM metadata by ``init_db``.
"""

import logging
import os
from typing import Generator, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Import config to ensure dotenv is loaded
from . import config
from .models.base import Base

logger = logging.getLogger(__name__)

# Module-level engine and session factory - initialized lazily
ENGINE: Engine | None = None
SESSION_FACTORY: sessionmaker | None = None


def get_db_url() -> str:
    """Get database URL from environment variables.

    Returns:
        Database URL string. Defaults to SQLite in-memory if DATABASE_URL is not set.
    """
    return os.getenv("DATABASE_URL", "sqlite:///:memory:")


def create_engine_and_session_factory(db_url: str | None = None) -> Tuple[Engine, sessionmaker]:
    """Create SQLAlchemy engine and session factory.

    Args:
        db_url: Database URL. If None, uses get_db_url().

    Returns:
        Tuple of (engine, sessionmaker)

    Raises:
        Exception: If engine creation fails.
    """
    if db_url is None:
        db_url = get_db_url()

    try:
        if db_url.startswith("postgresql"):
            engine = create_engine(
                db_url,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_pre_ping=True
            )
        else:
            connect_args = {"check_same_thread": False}
            if db_url == "sqlite:///:memory:":
                # In-memory SQLite lives only as long as its single connection
                logger.warning(
                    "Using in-memory SQLite: all requests share one connection, "
                    "suitable for development and tests only"
                )
                engine = create_engine(
                    db_url,
                    connect_args=connect_args,
                    poolclass=StaticPool
                )
            else:
                engine = create_engine(db_url, connect_args=connect_args)

        session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False
        )

        return engine, session_factory

    except Exception as e:
        logger.error(f"Failed to create database engine: {e}", exc_info=True)
        raise


def _ensure_initialized() -> None:
    """Ensure the module-level ENGINE and SESSION_FACTORY are initialized."""
    global ENGINE, SESSION_FACTORY

    if SESSION_FACTORY is None:
        ENGINE, SESSION_FACTORY = create_engine_and_session_factory()


def _reset_db_state() -> None:
    """Dispose the current engine and force re-initialization on next use.

    Primarily used by tests.
    """
    global ENGINE, SESSION_FACTORY

    if ENGINE is not None:
        try:
            ENGINE.dispose()
        except Exception as e:
            logger.error(f"Error disposing database engine: {e}", exc_info=True)

    ENGINE = None
    SESSION_FACTORY = None


def init_db() -> None:
    """Create all tables known to the ORM metadata if they do not exist yet."""
    _ensure_initialized()
    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema initialized")


def get_db() -> Generator[Session, None, None]:
    """Get database session generator.

    Yields:
        SQLAlchemy Session instance.

    The session is closed even if the request handler raises.
    """
    _ensure_initialized()

    db = SESSION_FACTORY()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}", exc_info=True)
        raise
    finally:
        db.close()


def check_db_connection(db: Session) -> bool:
    """Run a trivial query on ``db`` to confirm the database answers.

    Returns:
        True if the query succeeds, False otherwise.
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}", exc_info=True)
        return False
