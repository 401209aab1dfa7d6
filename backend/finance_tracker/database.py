"""
Finance Tracker Backend — Database Session Management
=======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   The engine is created once at startup (connect_to_database), shared by
       every request, and disposed on shutdown. Each request gets its own
       AsyncSession through the get_db_session dependency.
Who:   The lifespan in main.py owns the engine; routes receive sessions via
       FastAPI's dependency injection.

Connection Pooling Strategy:
    pool_size / max_overflow come from settings (ignored for SQLite, whose
    dialect manages its own pool), pool_pre_ping validates connections before
    use and pool_recycle=3600 retires long-lived connections.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from finance_tracker.config import settings
from finance_tracker.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Process-wide engine and session factory, populated by init_engine()
engine: Optional[AsyncEngine] = None
async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


def init_engine(database_url: str) -> AsyncEngine:
    """
    Create the process-wide async engine and session factory.

    Args:
        database_url: SQLAlchemy async URL (postgresql+asyncpg://, sqlite+aiosqlite://, ...)

    Returns:
        The newly created engine (also stored in the module-level `engine`).
    """
    global engine, async_session_factory

    engine_options = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": 3600,
        # SQL echo is only useful while debugging
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        engine_options["pool_size"] = settings.db_pool_size
        engine_options["max_overflow"] = settings.db_max_overflow

    engine = create_async_engine(database_url, **engine_options)

    # expire_on_commit=False: records stay readable after commit, so the
    # service can serialize them once the session has been committed
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return engine


async def connect_to_database(database_url: str) -> None:
    """
    Create the engine and verify the store is reachable.

    What:  Builds the engine, then runs SELECT 1 over a fresh connection.
    When:  Once, during application startup.

    Raises:
        DatabaseError: The URL is invalid, the driver is missing, or the
                       initial round-trip failed. No engine is left behind.
    """
    try:
        init_engine(database_url)
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Error connecting to the database: %s", str(e))
        await dispose_engine()
        raise DatabaseError(
            message="Could not connect to the database",
            detail=type(e).__name__,
            context={"error": str(e)},
        ) from e

    logger.info("Connected to the database (%s)", engine.url.get_backend_name())


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits any pending work
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Raises:
        DatabaseError: The engine has not been initialized (startup skipped).
    """
    if async_session_factory is None:
        raise DatabaseError(
            message="A database error occurred. Please try again later.",
            context={"reason": "engine not initialized"},
        )

    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    global engine, async_session_factory
    if engine is not None:
        await engine.dispose()
    engine = None
    async_session_factory = None
