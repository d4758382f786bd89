"""Platform service for statistics, parameters, ownership and pause state."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.config import settings
from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.match import PlatformStats
from mortgage_market.repositories.platform_repository import PlatformRepository
from mortgage_market.services.engine.base import BASIS_POINTS, PlatformConfig

logger = logging.getLogger(__name__)


class PlatformService:
    """
    Platform service for the PlatformStats aggregate.

    Provides:
    - Read access to counters and thresholds
    - The PlatformConfig handed to the engine
    - Owner-only parameter changes and emergency pause
    - Capability checks shared by the other services
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the platform service.

        Args:
            db: Async database session
        """
        self.db = db
        self.repo = PlatformRepository(db)

    @staticmethod
    def is_owner(actor: str) -> bool:
        """Whether the actor is the platform owner."""
        return actor == settings.PLATFORM_OWNER

    async def get_stats(self) -> PlatformStats:
        """Retrieve platform counters and parameters."""
        return await self.repo.get_stats()

    async def get_config(self) -> PlatformConfig:
        """Build the engine's view of the platform thresholds."""
        stats = await self.repo.get_stats()
        return PlatformConfig(
            min_credit_score=stats.min_credit_score,
            max_ltv_ratio=stats.max_loan_to_value,
            platform_fee_rate=stats.platform_fee_rate,
            credit_score_floor=settings.CREDIT_SCORE_FLOOR,
            credit_score_ceiling=settings.CREDIT_SCORE_CEILING,
        )

    async def ensure_not_paused(self) -> Result[None]:
        """Fail with PLATFORM_PAUSED while the emergency pause is on."""
        stats = await self.repo.get_stats()
        if stats.is_paused:
            return Result.fail("Platform is paused", ErrorKind.PLATFORM_PAUSED)
        return Result.ok()

    async def increment(self, counter: str) -> None:
        """Bump a creation counter; callers commit with the created record."""
        await self.repo.increment(counter)

    async def set_parameters(
        self,
        actor: str,
        min_credit_score: int,
        max_loan_to_value: int,
        platform_fee_rate: int,
    ) -> Result[PlatformStats]:
        """
        Set platform thresholds.

        Args:
            actor: Calling principal (must be the owner)
            min_credit_score: New platform minimum credit score
            max_loan_to_value: New platform maximum LTV (bps)
            platform_fee_rate: New platform fee rate (bps)

        Returns:
            Result with the updated PlatformStats
        """
        if not self.is_owner(actor):
            return Result.fail("Only the platform owner can set parameters", ErrorKind.OWNER_ONLY)

        if not settings.CREDIT_SCORE_FLOOR <= min_credit_score <= settings.CREDIT_SCORE_CEILING:
            return Result.fail(
                f"Minimum credit score {min_credit_score} outside valid band",
                ErrorKind.INVALID_CREDIT_SCORE,
            )
        if not 0 < max_loan_to_value <= BASIS_POINTS:
            return Result.fail(
                f"Maximum LTV must be in (0, {BASIS_POINTS}] bps", ErrorKind.INVALID_AMOUNT
            )
        if not 0 <= platform_fee_rate <= BASIS_POINTS:
            return Result.fail(
                f"Platform fee rate must be in [0, {BASIS_POINTS}] bps", ErrorKind.INVALID_RATE
            )

        stats = await self.repo.get_stats()
        stats.min_credit_score = min_credit_score
        stats.max_loan_to_value = max_loan_to_value
        stats.platform_fee_rate = platform_fee_rate
        await self.db.commit()

        logger.info(
            f"Platform parameters updated: min_credit_score={min_credit_score}, "
            f"max_ltv={max_loan_to_value}, fee_rate={platform_fee_rate}"
        )
        return Result.ok(stats)

    async def set_paused(self, actor: str, paused: bool) -> Result[PlatformStats]:
        """
        Turn the emergency pause on or off.

        Args:
            actor: Calling principal (must be the owner)
            paused: Desired pause state

        Returns:
            Result with the updated PlatformStats
        """
        if not self.is_owner(actor):
            return Result.fail("Only the platform owner can pause the platform", ErrorKind.OWNER_ONLY)

        stats = await self.repo.get_stats()
        stats.is_paused = paused
        await self.db.commit()

        logger.warning(f"Platform {'paused' if paused else 'resumed'} by {actor}")
        return Result.ok(stats)
