"""Dependency injection for FastAPI endpoints."""

from typing import Annotated, AsyncGenerator

from fastapi import Header
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.db.session import get_db

__all__ = ["get_db", "get_session", "get_actor"]


# Re-export get_db for convenience
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


async def get_actor(
    x_actor_id: Annotated[str, Header(min_length=1, description="Calling principal")],
) -> str:
    """Identity of the calling actor, taken from the X-Actor-Id header."""
    return x_actor_id
