"""Repository for the single-row platform statistics aggregate."""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.config import settings
from mortgage_market.models.domain.match import PlatformStats

PLATFORM_STATS_ID = 1

COUNTERS = ("total_lenders", "total_offers", "total_applications")


class PlatformRepository:
    """Loads, seeds and updates the PlatformStats row."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def ensure_stats(self) -> PlatformStats:
        """
        Insert the PlatformStats row with default thresholds if it is missing.

        Run once at startup; request handling only reads and updates the row.

        Returns:
            The existing or newly seeded row
        """
        stats = await self.db.get(PlatformStats, PLATFORM_STATS_ID)
        if stats is None:
            stats = PlatformStats(
                id=PLATFORM_STATS_ID,
                total_lenders=0,
                total_offers=0,
                total_applications=0,
                min_credit_score=settings.DEFAULT_MIN_CREDIT_SCORE,
                max_loan_to_value=settings.DEFAULT_MAX_LTV_RATIO,
                platform_fee_rate=settings.DEFAULT_PLATFORM_FEE_RATE,
                is_paused=False,
            )
            self.db.add(stats)
            await self.db.flush()
        return stats

    async def get_stats(self) -> PlatformStats:
        """
        Retrieve platform statistics.

        Raises:
            LookupError: If the row was never seeded
        """
        stats = await self.db.get(PlatformStats, PLATFORM_STATS_ID)
        if stats is None:
            raise LookupError("Platform statistics are not seeded")
        return stats

    async def increment(self, counter: str) -> PlatformStats:
        """
        Increment one counter by exactly one.

        The addition happens in the UPDATE statement itself, so overlapping
        transactions never write back a stale value.

        Args:
            counter: One of total_lenders, total_offers, total_applications

        Raises:
            ValueError: If counter is not a platform counter
        """
        if counter not in COUNTERS:
            raise ValueError(f"Unknown platform counter: {counter}")

        await self.db.flush()
        stmt = (
            update(PlatformStats)
            .where(PlatformStats.id == PLATFORM_STATS_ID)
            .values({counter: getattr(PlatformStats, counter) + 1})
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            raise LookupError("Platform statistics are not seeded")

        # Reload so a row already in this session reflects the new value
        return await self.db.get(
            PlatformStats, PLATFORM_STATS_ID, populate_existing=True
        )
