"""Database session configuration with async SQLAlchemy."""

import logging
from typing import Any, AsyncGenerator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from mortgage_market.config import settings
from mortgage_market.db.base import Base

logger = logging.getLogger(__name__)


def resolve_database_url(url: str) -> str:
    """Point bare postgresql:// URLs at the asyncpg driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def engine_options(url: str) -> dict[str, Any]:
    """
    Engine keyword arguments for the configured backend.

    SQLite (aiosqlite) is used for local runs and has no server connection to
    ping; PostgreSQL gets pre-ping and, under test, no pooling.
    """
    options: dict[str, Any] = {"echo": settings.ENVIRONMENT == "development"}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
        if settings.ENVIRONMENT == "test":
            options["poolclass"] = NullPool
    return options


database_url = resolve_database_url(settings.DATABASE_URL)

engine = create_async_engine(database_url, **engine_options(database_url))

# Create session factory
SessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_models() -> None:
    """Create any missing tables for the mortgage marketplace models."""
    # Import models so they register on the metadata
    import mortgage_market.models.domain  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")


async def seed_platform_stats(
    session_factory: async_sessionmaker[AsyncSession] = SessionLocal,
) -> None:
    """
    Seed the single PlatformStats row with the configured default thresholds.

    Safe to run from several workers at once: a worker that loses the insert
    race rolls back and leaves the winner's row in place.
    """
    from mortgage_market.repositories.platform_repository import PlatformRepository

    async with session_factory() as session:
        try:
            await PlatformRepository(session).ensure_stats()
            await session.commit()
        except IntegrityError:
            await session.rollback()
            logger.info("Platform statistics already seeded by another worker")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database sessions.

    Commits when the request finishes and rolls back if it raised, including
    ServiceError responses, so failed operations leave no partial writes.

    Yields:
        AsyncSession: Database session
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
