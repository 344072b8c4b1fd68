"""Async engine, session factory and schema management."""

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Import models to register with Base.metadata
import tasker.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import tasker_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from tasker.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async database engine for a URL.

    SQLite gets foreign key enforcement on every connection. In-memory SQLite
    shares a single connection so every session sees the same database. For
    file-based SQLite the parent directory is created if missing.

    Parameters
    ----------
    database_url
        SQLAlchemy URL (``postgresql+asyncpg://...`` or ``sqlite+aiosqlite://...``)
    echo
        Log emitted SQL

    Returns
    -------
    AsyncEngine instance
    """
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before use
        )

    in_memory = url.database in (None, "", ":memory:")
    if in_memory:
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(database_url, echo=echo)

    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_schema(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_schema(engine: AsyncEngine) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")
