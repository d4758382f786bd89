"""Pydantic schemas for borrower and application entities."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mortgage_market.core.enums import (
    ApplicationStatus,
    LoanPurpose,
    OccupancyType,
    PropertyType,
)


# ==================== Borrower Schemas ====================


class BorrowerCreate(BaseModel):
    """Schema for registering the calling actor's borrower profile."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class BorrowerResponse(BaseModel):
    """Schema for borrower profile response."""

    id: UUID
    principal: str
    first_name: str
    last_name: str
    applications_count: int
    verified: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== Application Schemas ====================


class MortgageApplicationCreate(BaseModel):
    """
    Schema for submitting a mortgage application.

    Either pass debt_to_income directly (bps) or monthly_debt_payments, from
    which the ratio is derived against annual_income.
    """

    loan_amount: int
    property_value: int
    credit_score: int
    annual_income: int
    debt_to_income: Optional[int] = Field(None, description="Debt-to-income in basis points")
    monthly_debt_payments: Optional[int] = None
    loan_purpose: LoanPurpose = LoanPurpose.PURCHASE
    property_type: PropertyType = PropertyType.SINGLE_FAMILY
    occupancy_type: OccupancyType = OccupancyType.PRIMARY
    down_payment: int = 0
    preferred_term: Optional[int] = Field(None, description="Preferred term in months")


class MortgageApplicationResponse(BaseModel):
    """Schema for mortgage application response."""

    id: UUID
    borrower_id: UUID
    loan_amount: int
    property_value: int
    credit_score: int
    annual_income: int
    debt_to_income: int
    loan_purpose: LoanPurpose
    property_type: PropertyType
    occupancy_type: OccupancyType
    down_payment: int
    preferred_term: Optional[int] = None
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
