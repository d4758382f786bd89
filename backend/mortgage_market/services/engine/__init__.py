"""Eligibility, scoring and amortization engine for mortgage matching."""

from .amortization import PaymentEstimate, closing_costs, compute_payment, platform_fee
from .base import (
    EligibilityResult,
    EvaluationContext,
    FactorEvaluator,
    FactorResult,
    PlatformConfig,
)
from .comparator import OfferComparison, compare_offers
from .eligibility import EligibilityEvaluator
from .scoring import MatchScorer
from .validation import (
    debt_to_income_bps,
    exceeds_max_ltv,
    loan_to_value_bps,
    resolve_debt_to_income,
    validate_application,
    validate_offer,
)

__all__ = [
    "EligibilityEvaluator",
    "EligibilityResult",
    "EvaluationContext",
    "FactorEvaluator",
    "FactorResult",
    "MatchScorer",
    "OfferComparison",
    "PaymentEstimate",
    "PlatformConfig",
    "closing_costs",
    "compare_offers",
    "compute_payment",
    "debt_to_income_bps",
    "exceeds_max_ltv",
    "loan_to_value_bps",
    "platform_fee",
    "resolve_debt_to_income",
    "validate_application",
    "validate_offer",
]
