from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from fastapi import HTTPException
from loguru import logger
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings
from app.domains.plan_generator.errors import PlanGeneratorError


def _validate_postgresql_driver() -> None:
    """Validate PostgreSQL driver is installed when using PostgreSQL.

    Imports psycopg2 rather than probing for it because SQLAlchemy
    will try to import it when creating the engine.
    """
    try:
        import psycopg2  # noqa: F401
    except ImportError as e:
        logger.error("PostgreSQL driver (psycopg2) is not installed. Install the 'postgres' extra.")
        raise ImportError("PostgreSQL driver required. Install with: pip install psycopg2-binary") from e
    logger.info("PostgreSQL driver (psycopg2) is available")


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # Plan activities and sets rely on ON DELETE CASCADE
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def check_database_connection() -> None:
    """Run a trivial query so a bad DATABASE_URL fails at startup."""
    try:
        with _get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection test failed: {e}")
        raise
    logger.info("Database connection test successful")


# Created on first use so importing the app never opens a connection
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is not None:
        return _engine

    url = settings.database_url
    is_sqlite = url.lower().startswith("sqlite")
    logger.info("Initializing database engine", dialect="sqlite" if is_sqlite else "postgresql")

    if is_sqlite:
        _engine = create_engine(url, connect_args={"check_same_thread": False}, echo=False)
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        _validate_postgresql_driver()
        _engine = create_engine(
            url,
            connect_args={"connect_timeout": 10, "application_name": "gym-tracker"},
            echo=False,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    logger.info("Database engine initialized")
    return _engine


def get_engine() -> Engine:
    """Get or create the database engine (public API)."""
    return _get_engine()


def _get_session_local() -> sessionmaker:
    """Get or create the session factory (lazy initialization)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal


def _handle_session_commit(session: Session) -> None:
    """Commit the session.

    Always commits: rows written with flush() no longer show up in
    session.new or session.dirty but still belong to the open transaction.
    """
    logger.debug(
        "Committing session",
        dirty=len(session.dirty),
        new=len(session.new),
        deleted=len(session.deleted),
    )
    session.commit()


def get_db() -> Generator[Session, None, None]:
    """Get database session for FastAPI dependencies.

    This is a plain generator function (NOT a context manager) that FastAPI
    can use directly with Depends(). Routes commit explicitly.

    For non-FastAPI code that needs a context manager, use get_session() instead.

    Yields:
        Session: SQLAlchemy database session
    """
    session = _get_session_local()()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get database session context manager that commits on success.

    Expected errors are rolled back and re-raised without logging:
    - HTTPException (API responses)
    - PlanGeneratorError (invalid generation inputs, not a DB failure)
    Anything else is logged as a database error, rolled back and re-raised.

    For FastAPI route dependencies, use get_db() instead.
    """
    session = _get_session_local()()
    try:
        yield session
        _handle_session_commit(session)
    except (HTTPException, PlanGeneratorError):
        session.rollback()
        raise
    except Exception as e:
        logger.error(
            "Database session error, rolling back",
            error=str(e),
            error_type=type(e).__name__,
        )
        session.rollback()
        raise
    finally:
        session.close()
