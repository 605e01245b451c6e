"""
Database connection management with SQLAlchemy async support.

Supports SQLite (development/tests) and MySQL/PostgreSQL (production) via DATABASE_URL.
"""
from typing import AsyncIterator, Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from task_distribution.db.models import Base
from task_distribution.config import settings
import logging

logger = logging.getLogger(__name__)

# Database engine (will be initialized in init_db)
engine = None
async_session_maker = None


async def init_db(database_url: Optional[str] = None):
    """
    Initialize database connection and create tables.

    Args:
        database_url: Optional database URL override (defaults to settings.database_url)
    """
    global engine, async_session_maker

    if database_url is None:
        database_url = settings.database_url
    logger.info(f"Initializing database: {database_url.split('://')[0]}")

    # Create async engine with appropriate settings based on database type
    if database_url.startswith("sqlite"):
        # SQLite-specific configuration
        engine = create_async_engine(
            database_url,
            echo=settings.sql_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        # MySQL/PostgreSQL configuration
        engine = create_async_engine(
            database_url,
            echo=settings.sql_echo,
            pool_pre_ping=True,  # Verify connections before using
            pool_recycle=3600,   # Recycle connections after 1 hour
        )

    # Create session factory
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


def new_session() -> AsyncSession:
    """Open a new session from the configured factory."""
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return async_session_maker()


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """
    Yield one session outside the service layer (CLI, repository tests).

    Usage:
        async for session in get_db_session():
            employees = await EmployeeRepository(session).list_all()

    Commits when the loop body finishes, rolls back if an exception is
    thrown into the generator. The session is closed by `async with`.
    """
    async with new_session() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        else:
            await session.commit()


async def close_db():
    """Close database connection."""
    global engine, async_session_maker
    if engine:
        await engine.dispose()
        logger.info("Database connection closed")
    engine = None
    async_session_maker = None
