"""Lender registration, approval and statistics endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.api.errors import unwrap_or_raise
from mortgage_market.deps import get_actor, get_session
from mortgage_market.models.schemas.lender import (
    CompletedLoanCreate,
    LenderCreate,
    LenderResponse,
    ReputationUpdate,
)
from mortgage_market.services.lender_service import LenderService

router = APIRouter()


@router.post(
    "/",
    response_model=LenderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register as a lender",
    description="Register the calling actor as an unapproved lender",
)
async def register_lender(
    lender_data: LenderCreate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LenderResponse:
    """
    Register the calling actor as a lender.

    The lender starts unapproved with a reputation score of 100 and cannot
    publish offers until the platform owner approves it.
    """
    service = LenderService(db)
    lender = unwrap_or_raise(await service.register_lender(actor, lender_data))
    return LenderResponse.model_validate(lender)


@router.get(
    "/",
    response_model=list[LenderResponse],
    summary="List lenders",
)
async def list_lenders(
    db: Annotated[AsyncSession, Depends(get_session)],
    approved_only: Annotated[
        bool, Query(description="Filter for approved lenders only")
    ] = False,
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=100, description="Number of items per page")
    ] = 100,
) -> list[LenderResponse]:
    """List registered lenders."""
    service = LenderService(db)
    lenders = await service.list_lenders(
        approved_only=approved_only, skip=(page - 1) * page_size, limit=page_size
    )
    return [LenderResponse.model_validate(lender) for lender in lenders]


@router.get(
    "/{principal}",
    response_model=LenderResponse,
    summary="Get lender by principal",
)
async def get_lender(
    principal: str,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LenderResponse:
    """Retrieve a lender by its principal."""
    service = LenderService(db)
    lender = unwrap_or_raise(await service.get_lender(principal))
    return LenderResponse.model_validate(lender)


@router.post(
    "/{principal}/approve",
    response_model=LenderResponse,
    summary="Approve a lender",
    description="Owner-only: allow a lender to publish offers",
)
async def approve_lender(
    principal: str,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LenderResponse:
    """Approve a registered lender."""
    service = LenderService(db)
    lender = unwrap_or_raise(await service.approve_lender(actor, principal))
    return LenderResponse.model_validate(lender)


@router.put(
    "/{principal}/reputation",
    response_model=LenderResponse,
    summary="Set lender reputation",
    description="Owner-only: set a lender's reputation score (0-100)",
)
async def set_reputation(
    principal: str,
    update: ReputationUpdate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LenderResponse:
    """Set a lender's reputation score."""
    service = LenderService(db)
    lender = unwrap_or_raise(
        await service.set_reputation(actor, principal, update.reputation_score)
    )
    return LenderResponse.model_validate(lender)


@router.post(
    "/{principal}/completed-loans",
    response_model=LenderResponse,
    summary="Record a completed loan",
    description="Owner-only: fold a completed loan into the lender's statistics",
)
async def record_completed_loan(
    principal: str,
    loan: CompletedLoanCreate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LenderResponse:
    """
    Record a completed loan.

    Increments the lender's total loans issued and updates its running
    average rate.
    """
    service = LenderService(db)
    lender = unwrap_or_raise(
        await service.record_completed_loan(actor, principal, loan.interest_rate)
    )
    return LenderResponse.model_validate(lender)
