"""
Database connection management with SQLAlchemy async support.

Works with any async SQLAlchemy URL; SQLite (aiosqlite) is the default.

The Database object is created explicitly at process start (FastAPI lifespan
or CLI command) and disposed at shutdown - there is no module-level engine.
"""
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from fastapi import Request
from app.db.models import Base
from app.config import settings
import logging

logger = logging.getLogger(__name__)

# Seconds a writer waits for another connection's lock before failing
SQLITE_BUSY_TIMEOUT = 15


def is_memory_sqlite(database_url: str) -> bool:
    """True for SQLite URLs without a backing file (sqlite:// or :memory:)"""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Database:
    """Owns the async engine and session factory for one process"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url

        # Create async engine with appropriate settings based on database type
        if is_memory_sqlite(database_url):
            # An in-memory database lives and dies with its one connection
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif database_url.startswith("sqlite"):
            # File-backed SQLite: pooled connections, one transaction per session
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT},
            )
        else:
            # MySQL/PostgreSQL configuration
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                pool_pre_ping=True,  # Verify connections before using
                pool_recycle=3600,   # Recycle connections after 1 hour
            )

        # Create session factory
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def init_db(database_url: Optional[str] = None) -> Database:
    """
    Initialize database connection and create tables.

    Args:
        database_url: Optional database URL override (defaults to settings)

    Returns:
        Ready-to-use Database
    """
    database_url = database_url or settings.database_url
    logger.info(f"Initializing database: {database_url.split('://')[0]}")

    database = Database(database_url)
    await database.create_tables()

    logger.info("✅ Database initialized successfully")
    return database


async def close_db(database: Database) -> None:
    """Close database connection."""
    await database.dispose()
    logger.info("Database connection closed")


def get_database(request: Request) -> Database:
    """
    Get the process Database for dependency injection.

    Usage in FastAPI:
        @router.get("/endpoint")
        async def endpoint(database: Database = Depends(get_database)):
            ...
    """
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return database
