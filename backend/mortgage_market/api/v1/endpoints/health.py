"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.deps import get_db
from mortgage_market.models.domain.match import PlatformStats
from mortgage_market.repositories.platform_repository import PLATFORM_STATS_ID

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)) -> dict:
    """
    Report API, database and marketplace status.

    The marketplace is "paused" while the emergency pause is on; reads keep
    working, so the API itself stays healthy.
    """
    marketplace = "unknown"
    try:
        await db.execute(text("SELECT 1"))
        stats = await db.get(PlatformStats, PLATFORM_STATS_ID)
        marketplace = "paused" if stats is not None and stats.is_paused else "open"
        db_status = "healthy"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "api": "healthy",
        "database": db_status,
        "marketplace": marketplace,
    }
