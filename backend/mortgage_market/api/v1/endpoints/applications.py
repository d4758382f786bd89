"""Mortgage application, eligibility and matching endpoints."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.api.errors import unwrap_or_raise
from mortgage_market.deps import get_actor, get_session
from mortgage_market.models.schemas.application import (
    MortgageApplicationCreate,
    MortgageApplicationResponse,
)
from mortgage_market.models.schemas.match import (
    ApplicationMatchResponse,
    EligibilityResponse,
    FactorResultResponse,
    LenderResponseUpdate,
    MatchingRunResponse,
)
from mortgage_market.services.application_service import ApplicationService
from mortgage_market.services.matching_service import MatchingService

router = APIRouter()


@router.post(
    "/",
    response_model=MortgageApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a mortgage application",
    description="Submit an application for the calling borrower",
)
async def submit_application(
    application_data: MortgageApplicationCreate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MortgageApplicationResponse:
    """
    Submit a mortgage application.

    The application is checked against the platform's current minimum
    credit score and maximum loan-to-value. Debt-to-income may be passed
    directly or derived from monthly debt payments.
    """
    service = ApplicationService(db)
    application = unwrap_or_raise(
        await service.submit_application(actor, application_data)
    )
    return MortgageApplicationResponse.model_validate(application)


@router.get(
    "/{application_id}",
    response_model=MortgageApplicationResponse,
    summary="Get application by ID",
)
async def get_application(
    application_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MortgageApplicationResponse:
    """Retrieve an application by ID."""
    service = ApplicationService(db)
    application = unwrap_or_raise(await service.get_application(application_id))
    return MortgageApplicationResponse.model_validate(application)


@router.get(
    "/{application_id}/eligibility/{offer_id}",
    response_model=EligibilityResponse,
    summary="Check eligibility against an offer",
    description="Evaluate every eligibility factor and price the offer, without persisting",
)
async def check_eligibility(
    application_id: UUID,
    offer_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
    as_of: Annotated[
        Optional[datetime], Query(description="Evaluation time (defaults to now)")
    ] = None,
) -> EligibilityResponse:
    """
    Check an application against one offer.

    An ineligible application is not an error: the response lists the
    failed factors alongside the estimated costs.
    """
    service = MatchingService(db)
    eligibility = unwrap_or_raise(
        await service.evaluate_eligibility(application_id, offer_id, as_of)
    )
    result = eligibility.result
    return EligibilityResponse(
        application_id=eligibility.application_id,
        offer_id=eligibility.offer_id,
        eligible=result.eligible,
        match_score=eligibility.match_score,
        estimated_payment=result.estimated_payment,
        total_interest=result.total_interest,
        total_closing_costs=result.total_closing_costs,
        platform_fee=result.platform_fee,
        loan_to_value=result.loan_to_value,
        failed_factors=result.failed_factors,
        factor_results=[
            FactorResultResponse.model_validate(factor) for factor in result.factor_results
        ],
    )


@router.post(
    "/{application_id}/matches",
    response_model=MatchingRunResponse,
    summary="Run matching",
    description="Borrower-only: match the application against every active offer",
)
async def run_matching(
    application_id: UUID,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> MatchingRunResponse:
    """
    Run matching for an application.

    Process:
    1. Evaluate the application against every active offer
    2. Skip offers that are expired or already matched
    3. Store a match with the score and costs frozen at creation
    4. Mark the application matched if any match was created
    """
    service = MatchingService(db)
    run = unwrap_or_raise(await service.run_matching(actor, application_id))
    return MatchingRunResponse(
        application_id=run.application_id,
        offers_evaluated=run.offers_evaluated,
        matches_created=run.matches_created,
        skipped_existing=run.skipped_existing,
        matches=[ApplicationMatchResponse.model_validate(m) for m in run.matches],
    )


@router.get(
    "/{application_id}/matches",
    response_model=list[ApplicationMatchResponse],
    summary="List matches",
    description="The borrower sees every match; a lender sees matches on its own offers",
)
async def list_matches(
    application_id: UUID,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> list[ApplicationMatchResponse]:
    service = MatchingService(db)
    matches = unwrap_or_raise(await service.list_matches(actor, application_id))
    return [ApplicationMatchResponse.model_validate(m) for m in matches]


@router.put(
    "/{application_id}/matches/{offer_id}/response",
    response_model=ApplicationMatchResponse,
    summary="Respond to a match",
    description="Offer owner only: mark a match as interested or declined",
)
async def respond_to_match(
    application_id: UUID,
    offer_id: UUID,
    update: LenderResponseUpdate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> ApplicationMatchResponse:
    """Record the offering lender's response to a match."""
    service = MatchingService(db)
    match = unwrap_or_raise(
        await service.respond_to_match(actor, application_id, offer_id, update.response)
    )
    return ApplicationMatchResponse.model_validate(match)
