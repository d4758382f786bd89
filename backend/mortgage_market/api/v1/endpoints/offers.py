"""Mortgage offer endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.api.errors import unwrap_or_raise
from mortgage_market.deps import get_actor, get_session
from mortgage_market.models.schemas.lender import (
    MortgageOfferCreate,
    MortgageOfferResponse,
    OfferStatusUpdate,
)
from mortgage_market.models.schemas.match import (
    OfferComparisonRequest,
    OfferComparisonResponse,
)
from mortgage_market.services.lender_service import LenderService
from mortgage_market.services.matching_service import MatchingService

router = APIRouter()


@router.post(
    "/",
    response_model=MortgageOfferResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a mortgage offer",
    description="Publish an offer for the calling (approved) lender",
)
async def create_offer(
    offer_data: MortgageOfferCreate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MortgageOfferResponse:
    """
    Create a mortgage offer.

    Validates:
    - The lender is registered and approved
    - Loan amount range, rate, term and LTV
    - Minimum credit score within the valid band
    """
    service = LenderService(db)
    offer = unwrap_or_raise(await service.create_offer(actor, offer_data))
    return MortgageOfferResponse.model_validate(offer)


@router.get(
    "/",
    response_model=list[MortgageOfferResponse],
    summary="List mortgage offers",
)
async def list_offers(
    db: Annotated[AsyncSession, Depends(get_session)],
    active_only: Annotated[
        bool, Query(description="Filter for active offers only")
    ] = True,
) -> list[MortgageOfferResponse]:
    """List offers, active ones only by default."""
    service = LenderService(db)
    offers = await service.list_offers(active_only=active_only)
    return [MortgageOfferResponse.model_validate(offer) for offer in offers]


@router.post(
    "/compare",
    response_model=OfferComparisonResponse,
    summary="Compare two offers",
    description="Price two offers side by side for one application's loan amount",
)
async def compare_offers(
    request: OfferComparisonRequest,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> OfferComparisonResponse:
    """
    Compare two offers.

    Differences are reported as offer 2 minus offer 1.
    """
    service = MatchingService(db)
    comparison = unwrap_or_raise(
        await service.compare_offers(
            request.offer1_id, request.offer2_id, request.application_id
        )
    )
    return OfferComparisonResponse.model_validate(comparison)


@router.get(
    "/{offer_id}",
    response_model=MortgageOfferResponse,
    summary="Get offer by ID",
)
async def get_offer(
    offer_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MortgageOfferResponse:
    """Retrieve an offer by ID."""
    service = LenderService(db)
    offer = unwrap_or_raise(await service.get_offer(offer_id))
    return MortgageOfferResponse.model_validate(offer)


@router.patch(
    "/{offer_id}/status",
    response_model=MortgageOfferResponse,
    summary="Activate or deactivate an offer",
)
async def update_offer_status(
    offer_id: UUID,
    update: OfferStatusUpdate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MortgageOfferResponse:
    """
    Change an offer's active flag.

    Only the offering lender may do this. Existing matches keep the figures
    they were created with.
    """
    service = LenderService(db)
    offer = unwrap_or_raise(
        await service.update_offer_status(actor, offer_id, update.is_active)
    )
    return MortgageOfferResponse.model_validate(offer)
