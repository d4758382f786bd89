"""Builders for offers and applications used across the test suite."""

import uuid
from datetime import datetime, timezone

from mortgage_market.config import settings
from mortgage_market.core.enums import (
    ApplicationStatus,
    LoanPurpose,
    LoanType,
    OccupancyType,
    PropertyType,
)
from mortgage_market.models.domain.application import MortgageApplication
from mortgage_market.models.domain.lender import MortgageOffer

AS_OF = datetime(2030, 1, 1, tzinfo=timezone.utc)
VALID_UNTIL = datetime(2099, 1, 1, tzinfo=timezone.utc)


def build_offer(**overrides) -> MortgageOffer:
    """
    Transient offer: 4.00% over 360 months, 50k-1M, 90% LTV, 620 score.

    Every column is set so the object is usable without a flush.
    """
    fields = dict(
        id=uuid.uuid4(),
        lender_id=uuid.uuid4(),
        loan_type=LoanType.FIXED,
        interest_rate=400,
        loan_term=360,
        apr=420,
        min_loan_amount=50_000,
        max_loan_amount=1_000_000,
        max_ltv_ratio=9_000,
        min_credit_score=620,
        min_income=50_000,
        points=100,
        origination_fee=50,
        closing_cost_estimate=3_000,
        valid_until=VALID_UNTIL,
        is_active=True,
    )
    fields.update(overrides)
    return MortgageOffer(**fields)


def build_application(**overrides) -> MortgageApplication:
    """Transient application: 300k on a 400k property (75% LTV), score 720."""
    fields = dict(
        id=uuid.uuid4(),
        borrower_id=uuid.uuid4(),
        loan_amount=300_000,
        property_value=400_000,
        down_payment=100_000,
        preferred_term=None,
        credit_score=720,
        annual_income=120_000,
        debt_to_income=3_000,
        loan_purpose=LoanPurpose.PURCHASE,
        property_type=PropertyType.SINGLE_FAMILY,
        occupancy_type=OccupancyType.PRIMARY,
        status=ApplicationStatus.SUBMITTED,
    )
    fields.update(overrides)
    return MortgageApplication(**fields)


def offer_payload(**overrides) -> dict:
    """JSON body for creating the default offer."""
    payload = {
        "loan_type": "fixed",
        "interest_rate": 400,
        "loan_term": 360,
        "apr": 420,
        "min_loan_amount": 50_000,
        "max_loan_amount": 1_000_000,
        "max_ltv_ratio": 9_000,
        "min_credit_score": 620,
        "min_income": 50_000,
        "points": 100,
        "origination_fee": 50,
        "closing_cost_estimate": 3_000,
        "valid_until": VALID_UNTIL.isoformat(),
    }
    payload.update(overrides)
    return payload


def application_payload(**overrides) -> dict:
    """JSON body for submitting the default application."""
    payload = {
        "loan_amount": 300_000,
        "property_value": 400_000,
        "down_payment": 100_000,
        "credit_score": 720,
        "annual_income": 120_000,
        "debt_to_income": 3_000,
        "loan_purpose": "purchase",
        "property_type": "single-family",
        "occupancy_type": "primary",
    }
    payload.update(overrides)
    return payload


OWNER = settings.PLATFORM_OWNER
LENDER = "lender-alpha"
OTHER_LENDER = "lender-beta"
BORROWER = "borrower-one"
OTHER_BORROWER = "borrower-two"


def actor(principal: str) -> dict:
    """Request headers identifying the calling actor."""
    return {"X-Actor-Id": principal}
