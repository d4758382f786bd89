"""Pydantic schemas for lender and offer entities."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mortgage_market.core.enums import LoanType


# ==================== Lender Schemas ====================


class LenderCreate(BaseModel):
    """Schema for registering the calling actor as a lender."""

    name: str = Field(..., min_length=1, max_length=255)
    license_number: str = Field(..., min_length=1, max_length=64)
    contact_info: Optional[str] = Field(None, max_length=1000)


class LenderResponse(BaseModel):
    """Schema for lender response."""

    id: UUID
    principal: str
    name: str
    license_number: str
    contact_info: Optional[str] = None
    is_approved: bool
    reputation_score: int
    total_loans_issued: int
    average_rate: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReputationUpdate(BaseModel):
    """Schema for setting a lender's reputation score."""

    reputation_score: int


class CompletedLoanCreate(BaseModel):
    """Schema for recording a completed loan against a lender's statistics."""

    interest_rate: int = Field(..., description="Rate of the completed loan in basis points")


# ==================== Offer Schemas ====================


class MortgageOfferCreate(BaseModel):
    """
    Schema for creating a mortgage offer.

    Range rules (rate > 0, max > min, LTV <= 10000 bps, ...) are enforced by
    the validation rules so callers get stable error codes, not 422s.
    """

    loan_type: LoanType = LoanType.FIXED
    interest_rate: int = Field(..., description="Annual nominal rate in basis points")
    loan_term: int = Field(..., description="Term in months")
    min_loan_amount: int
    max_loan_amount: int
    max_ltv_ratio: int = Field(..., description="Maximum loan-to-value in basis points")
    min_credit_score: int
    min_income: int = 0
    points: int = Field(0, description="Discount points in basis points of the loan")
    origination_fee: int = Field(0, description="Origination fee in basis points of the loan")
    closing_cost_estimate: int = 0
    apr: int = Field(0, description="APR in basis points")
    valid_until: datetime


class OfferStatusUpdate(BaseModel):
    """Schema for activating or deactivating an offer."""

    is_active: bool


class MortgageOfferResponse(BaseModel):
    """Schema for mortgage offer response."""

    id: UUID
    lender_id: UUID
    loan_type: LoanType
    interest_rate: int
    loan_term: int
    min_loan_amount: int
    max_loan_amount: int
    max_ltv_ratio: int
    min_credit_score: int
    min_income: int
    points: int
    origination_fee: int
    closing_cost_estimate: int
    apr: int
    valid_until: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
