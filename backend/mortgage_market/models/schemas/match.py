"""Pydantic schemas for eligibility, comparison, match and platform responses."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mortgage_market.core.enums import EligibilityFactor, LenderResponse


# ==================== Eligibility Schemas ====================


class FactorResultResponse(BaseModel):
    """Outcome of one eligibility factor."""

    factor: EligibilityFactor
    passed: bool
    reason: Optional[str] = None
    evidence: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


class EligibilityResponse(BaseModel):
    """Eligibility of one application against one offer."""

    application_id: UUID
    offer_id: UUID
    eligible: bool
    match_score: int
    estimated_payment: int
    total_interest: int
    total_closing_costs: int
    platform_fee: int
    loan_to_value: int
    failed_factors: list[EligibilityFactor]
    factor_results: list[FactorResultResponse]


# ==================== Comparison Schemas ====================


class OfferComparisonRequest(BaseModel):
    """Two offers compared for one application."""

    offer1_id: UUID
    offer2_id: UUID
    application_id: UUID


class OfferComparisonResponse(BaseModel):
    """Side-by-side cost figures for two offers."""

    offer1_payment: int
    offer2_payment: int
    offer1_total_interest: int
    offer2_total_interest: int
    offer1_closing_costs: int
    offer2_closing_costs: int
    payment_difference: int
    interest_difference: int
    closing_cost_difference: int

    model_config = ConfigDict(from_attributes=True)


# ==================== Match Schemas ====================


class ApplicationMatchResponse(BaseModel):
    """Schema for application match response."""

    id: UUID
    application_id: UUID
    offer_id: UUID
    match_score: int
    estimated_payment: int
    total_interest: int
    total_closing_costs: int
    lender_response: LenderResponse
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MatchingRunResponse(BaseModel):
    """Summary of a matching run over all active offers."""

    application_id: UUID
    offers_evaluated: int
    matches_created: int
    skipped_existing: int
    matches: list[ApplicationMatchResponse]


class LenderResponseUpdate(BaseModel):
    """Schema for a lender responding to a match."""

    response: LenderResponse


# ==================== Platform Schemas ====================


class PlatformStatsResponse(BaseModel):
    """Platform counters and parameters."""

    total_lenders: int
    total_offers: int
    total_applications: int
    min_credit_score: int
    max_loan_to_value: int
    platform_fee_rate: int
    is_paused: bool

    model_config = ConfigDict(from_attributes=True)


class PlatformParametersUpdate(BaseModel):
    """Owner-set platform thresholds."""

    min_credit_score: int
    max_loan_to_value: int
    platform_fee_rate: int


class PauseUpdate(BaseModel):
    """Emergency pause toggle."""

    paused: bool


class ErrorResponse(BaseModel):
    """Error body returned for failed operations."""

    code: int
    error: str
    message: str
