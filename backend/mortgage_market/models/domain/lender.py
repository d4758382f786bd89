"""Lender and mortgage offer domain models."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from mortgage_market.core.enums import LoanType
from mortgage_market.db.base import BaseModel


class Lender(BaseModel):
    """Registered lender, keyed by the actor principal that registered it."""

    __tablename__ = "lenders"

    # Identity
    principal: Mapped[str] = mapped_column(
        String(128), nullable=False, unique=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    license_number: Mapped[str] = mapped_column(String(64), nullable=False)
    contact_info: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Platform standing
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    reputation_score: Mapped[int] = mapped_column(
        Integer, default=100, nullable=False
    )  # 0-100

    # Completed-loan statistics
    total_loans_issued: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    average_rate: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )  # basis points

    def __repr__(self) -> str:
        return (
            f"<Lender(id={self.id}, principal={self.principal!r}, "
            f"approved={self.is_approved})>"
        )


class MortgageOffer(BaseModel):
    """Loan offer published by a lender."""

    __tablename__ = "mortgage_offers"

    # Foreign Key
    lender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("lenders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Pricing
    loan_type: Mapped[LoanType] = mapped_column(
        SQLEnum(LoanType, name="loan_type"), nullable=False
    )
    interest_rate: Mapped[int] = mapped_column(Integer, nullable=False)  # bps
    loan_term: Mapped[int] = mapped_column(Integer, nullable=False)  # months
    apr: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # bps

    # Amount constraints
    min_loan_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    max_loan_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    max_ltv_ratio: Mapped[int] = mapped_column(Integer, nullable=False)  # bps

    # Borrower requirements
    min_credit_score: Mapped[int] = mapped_column(Integer, nullable=False)
    min_income: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    # Fees
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # bps
    origination_fee: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )  # bps
    closing_cost_estimate: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )

    # Availability
    valid_until: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, index=True
    )

    def __repr__(self) -> str:
        return (
            f"<MortgageOffer(id={self.id}, lender_id={self.lender_id}, "
            f"rate={self.interest_rate}, term={self.loan_term}, active={self.is_active})>"
        )
