"""Platform statistics, parameters and emergency pause endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.api.errors import unwrap_or_raise
from mortgage_market.deps import get_actor, get_session
from mortgage_market.models.schemas.match import (
    PauseUpdate,
    PlatformParametersUpdate,
    PlatformStatsResponse,
)
from mortgage_market.services.platform_service import PlatformService

router = APIRouter()


@router.get(
    "/stats",
    response_model=PlatformStatsResponse,
    summary="Platform statistics",
)
async def get_stats(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> PlatformStatsResponse:
    """Return platform counters and current thresholds."""
    service = PlatformService(db)
    return PlatformStatsResponse.model_validate(await service.get_stats())


@router.put(
    "/parameters",
    response_model=PlatformStatsResponse,
    summary="Set platform parameters",
    description="Owner-only: minimum credit score, maximum LTV and fee rate",
)
async def set_parameters(
    update: PlatformParametersUpdate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> PlatformStatsResponse:
    """
    Set platform thresholds.

    New thresholds apply to applications submitted afterwards; existing
    applications and matches are left as they are.
    """
    service = PlatformService(db)
    stats = unwrap_or_raise(
        await service.set_parameters(
            actor,
            min_credit_score=update.min_credit_score,
            max_loan_to_value=update.max_loan_to_value,
            platform_fee_rate=update.platform_fee_rate,
        )
    )
    return PlatformStatsResponse.model_validate(stats)


@router.put(
    "/pause",
    response_model=PlatformStatsResponse,
    summary="Pause or resume the platform",
    description="Owner-only emergency pause",
)
async def set_paused(
    update: PauseUpdate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> PlatformStatsResponse:
    service = PlatformService(db)
    stats = unwrap_or_raise(await service.set_paused(actor, update.paused))
    return PlatformStatsResponse.model_validate(stats)
