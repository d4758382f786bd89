"""Pydantic schemas for API validation and serialization."""

from mortgage_market.models.schemas.application import (
    BorrowerCreate,
    BorrowerResponse,
    MortgageApplicationCreate,
    MortgageApplicationResponse,
)
from mortgage_market.models.schemas.lender import (
    CompletedLoanCreate,
    LenderCreate,
    LenderResponse,
    MortgageOfferCreate,
    MortgageOfferResponse,
    OfferStatusUpdate,
    ReputationUpdate,
)
from mortgage_market.models.schemas.match import (
    ApplicationMatchResponse,
    EligibilityResponse,
    ErrorResponse,
    FactorResultResponse,
    LenderResponseUpdate,
    MatchingRunResponse,
    OfferComparisonRequest,
    OfferComparisonResponse,
    PauseUpdate,
    PlatformParametersUpdate,
    PlatformStatsResponse,
)

__all__ = [
    # Borrower / application schemas
    "BorrowerCreate",
    "BorrowerResponse",
    "MortgageApplicationCreate",
    "MortgageApplicationResponse",
    # Lender / offer schemas
    "LenderCreate",
    "LenderResponse",
    "ReputationUpdate",
    "CompletedLoanCreate",
    "MortgageOfferCreate",
    "MortgageOfferResponse",
    "OfferStatusUpdate",
    # Match / platform schemas
    "EligibilityResponse",
    "FactorResultResponse",
    "OfferComparisonRequest",
    "OfferComparisonResponse",
    "ApplicationMatchResponse",
    "MatchingRunResponse",
    "LenderResponseUpdate",
    "PlatformStatsResponse",
    "PlatformParametersUpdate",
    "PauseUpdate",
    "ErrorResponse",
]
