"""Application match and platform statistics domain models."""

import uuid

from sqlalchemy import (
    BigInteger,
    Boolean,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from mortgage_market.core.enums import LenderResponse
from mortgage_market.db.base import Base, BaseModel


class ApplicationMatch(BaseModel):
    """
    Snapshot pairing one application with one offer.

    Score and cost figures are fixed when the match is created; later changes
    to the offer or application do not touch them.
    """

    __tablename__ = "application_matches"
    __table_args__ = (
        UniqueConstraint("application_id", "offer_id", name="uq_match_application_offer"),
    )

    # Foreign Keys
    application_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("mortgage_applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    offer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("mortgage_offers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Snapshot figures
    match_score: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-100
    estimated_payment: Mapped[int] = mapped_column(BigInteger, nullable=False)
    total_interest: Mapped[int] = mapped_column(BigInteger, nullable=False)
    total_closing_costs: Mapped[int] = mapped_column(BigInteger, nullable=False)

    # Lender side
    lender_response: Mapped[LenderResponse] = mapped_column(
        SQLEnum(LenderResponse, name="lender_response"),
        default=LenderResponse.PENDING,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<ApplicationMatch(id={self.id}, application_id={self.application_id}, "
            f"offer_id={self.offer_id}, score={self.match_score})>"
        )


class PlatformStats(Base):
    """Single-row platform counters and configurable thresholds."""

    __tablename__ = "platform_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)

    # Counters
    total_lenders: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_offers: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_applications: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Parameters
    min_credit_score: Mapped[int] = mapped_column(Integer, nullable=False)
    max_loan_to_value: Mapped[int] = mapped_column(Integer, nullable=False)  # bps
    platform_fee_rate: Mapped[int] = mapped_column(Integer, nullable=False)  # bps
    is_paused: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<PlatformStats(lenders={self.total_lenders}, offers={self.total_offers}, "
            f"applications={self.total_applications}, paused={self.is_paused})>"
        )
