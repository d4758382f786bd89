"""Core enums for type safety across the application."""

from enum import Enum


class LoanType(str, Enum):
    """Mortgage rate structure."""

    FIXED = "fixed"
    ADJUSTABLE = "adjustable"


class LoanPurpose(str, Enum):
    """Why the borrower wants the loan."""

    PURCHASE = "purchase"
    REFINANCE = "refinance"
    CASH_OUT_REFINANCE = "cash-out-refinance"
    CONSTRUCTION = "construction"


class PropertyType(str, Enum):
    """Type of property securing the mortgage."""

    SINGLE_FAMILY = "single-family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi-family"
    MANUFACTURED = "manufactured"


class OccupancyType(str, Enum):
    """How the borrower will occupy the property."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    INVESTMENT = "investment"


class ApplicationStatus(str, Enum):
    """Mortgage application workflow states."""

    SUBMITTED = "submitted"
    MATCHED = "matched"


class LenderResponse(str, Enum):
    """Lender's answer to an application match."""

    PENDING = "pending"
    INTERESTED = "interested"
    DECLINED = "declined"


class EligibilityFactor(str, Enum):
    """Factors checked when evaluating an application against an offer."""

    # Hard gate, never weighted
    OFFER_AVAILABILITY = "offer_availability"

    # Weighted criteria
    LOAN_AMOUNT = "loan_amount"
    CREDIT_SCORE = "credit_score"
    INCOME = "income"
    LOAN_TO_VALUE = "loan_to_value"
