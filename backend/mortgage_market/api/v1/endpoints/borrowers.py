"""Borrower profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.api.errors import unwrap_or_raise
from mortgage_market.deps import get_actor, get_session
from mortgage_market.models.schemas.application import (
    BorrowerCreate,
    BorrowerResponse,
    MortgageApplicationResponse,
)
from mortgage_market.services.application_service import ApplicationService

router = APIRouter()


@router.post(
    "/",
    response_model=BorrowerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a borrower profile",
)
async def register_borrower(
    borrower_data: BorrowerCreate,
    actor: Annotated[str, Depends(get_actor)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> BorrowerResponse:
    """Register the calling actor's borrower profile."""
    service = ApplicationService(db)
    borrower = unwrap_or_raise(await service.register_borrower(actor, borrower_data))
    return BorrowerResponse.model_validate(borrower)


@router.get(
    "/{principal}",
    response_model=BorrowerResponse,
    summary="Get borrower by principal",
)
async def get_borrower(
    principal: str,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> BorrowerResponse:
    service = ApplicationService(db)
    borrower = unwrap_or_raise(await service.get_borrower(principal))
    return BorrowerResponse.model_validate(borrower)


@router.get(
    "/{principal}/applications",
    response_model=list[MortgageApplicationResponse],
    summary="List a borrower's applications",
)
async def list_borrower_applications(
    principal: str,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> list[MortgageApplicationResponse]:
    service = ApplicationService(db)
    applications = unwrap_or_raise(await service.list_borrower_applications(principal))
    return [MortgageApplicationResponse.model_validate(app) for app in applications]
