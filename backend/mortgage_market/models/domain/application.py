"""Borrower and mortgage application domain models."""

import uuid
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from mortgage_market.core.enums import (
    ApplicationStatus,
    LoanPurpose,
    OccupancyType,
    PropertyType,
)
from mortgage_market.db.base import BaseModel


class Borrower(BaseModel):
    """Borrower profile, keyed by the actor principal that owns it."""

    __tablename__ = "borrowers"

    principal: Mapped[str] = mapped_column(
        String(128), nullable=False, unique=True, index=True
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    applications_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Borrower(id={self.id}, principal={self.principal!r})>"


class MortgageApplication(BaseModel):
    """Mortgage application submitted by a borrower."""

    __tablename__ = "mortgage_applications"

    # Foreign Key
    borrower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("borrowers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Loan request
    loan_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    property_value: Mapped[int] = mapped_column(BigInteger, nullable=False)
    down_payment: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    preferred_term: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True
    )  # months; falls back to the offer term when unset

    # Borrower financials
    credit_score: Mapped[int] = mapped_column(Integer, nullable=False)
    annual_income: Mapped[int] = mapped_column(BigInteger, nullable=False)
    debt_to_income: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )  # bps

    # Property & purpose
    loan_purpose: Mapped[LoanPurpose] = mapped_column(
        SQLEnum(LoanPurpose, name="loan_purpose"), nullable=False
    )
    property_type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType, name="property_type"), nullable=False
    )
    occupancy_type: Mapped[OccupancyType] = mapped_column(
        SQLEnum(OccupancyType, name="occupancy_type"), nullable=False
    )

    # Workflow
    status: Mapped[ApplicationStatus] = mapped_column(
        SQLEnum(ApplicationStatus, name="application_status"),
        default=ApplicationStatus.SUBMITTED,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<MortgageApplication(id={self.id}, amount={self.loan_amount}, "
            f"status={self.status.value})>"
        )
