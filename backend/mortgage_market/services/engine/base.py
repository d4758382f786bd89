"""Engine foundation: platform config, evaluation context, results and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.models.domain.application import MortgageApplication
from mortgage_market.models.domain.lender import MortgageOffer

BASIS_POINTS = 10000
CREDIT_SCORE_FLOOR = 300
CREDIT_SCORE_CEILING = 850


@dataclass(frozen=True)
class PlatformConfig:
    """
    Platform-wide thresholds the engine validates against.

    Supplied by the caller (read from PlatformStats); the engine never owns
    or mutates them.

    Attributes:
        min_credit_score: Lowest credit score an application may carry
        max_ltv_ratio: Highest loan-to-value an application may request (bps)
        platform_fee_rate: Platform fee charged on the loan amount (bps)
        credit_score_floor: Bottom of the valid credit score band
        credit_score_ceiling: Top of the valid credit score band
    """

    min_credit_score: int = 580
    max_ltv_ratio: int = 9500
    platform_fee_rate: int = 100
    credit_score_floor: int = CREDIT_SCORE_FLOOR
    credit_score_ceiling: int = CREDIT_SCORE_CEILING

    def credit_score_in_band(self, score: int) -> bool:
        return self.credit_score_floor <= score <= self.credit_score_ceiling


@dataclass
class EvaluationContext:
    """
    Everything a factor evaluator needs to judge one application/offer pair.

    Attributes:
        application: The mortgage application being evaluated
        offer: The offer it is evaluated against
        config: Platform thresholds
        as_of: Point in time the offer's validity is checked at
    """

    application: MortgageApplication
    offer: MortgageOffer
    config: PlatformConfig
    as_of: datetime


@dataclass
class FactorResult:
    """
    Outcome of evaluating a single eligibility factor.

    Attributes:
        factor: Which factor was evaluated
        passed: Whether the application satisfied it
        reason: Human-readable explanation
        evidence: Actual vs. required values
    """

    factor: EligibilityFactor
    passed: bool
    reason: Optional[str] = None
    evidence: dict[str, Any] = field(default_factory=dict)


@dataclass
class EligibilityResult:
    """
    Eligibility of one application against one offer.

    Cost figures are always populated, even when the application is not
    eligible, so callers can show what the offer would cost.
    """

    eligible: bool
    estimated_payment: int
    total_interest: int
    total_closing_costs: int
    platform_fee: int
    loan_to_value: int
    failed_factors: list[EligibilityFactor]
    factor_results: list[FactorResult]

    def factor(self, factor: EligibilityFactor) -> Optional[FactorResult]:
        """Look up the result for a single factor."""
        for result in self.factor_results:
            if result.factor == factor:
                return result
        return None


class FactorEvaluator(ABC):
    """
    Abstract base class for eligibility factor evaluators.

    Each concrete evaluator decides the factors it is registered for. An
    evaluator never raises for a failing application; failure is reported in
    the returned FactorResult.
    """

    @abstractmethod
    def evaluate(
        self, factor: EligibilityFactor, context: EvaluationContext
    ) -> FactorResult:
        """
        Evaluate one factor against the provided context.

        Args:
            factor: The factor to evaluate
            context: EvaluationContext containing the application and offer

        Returns:
            FactorResult with pass/fail, reason and evidence

        Raises:
            ValueError: If the evaluator is not responsible for the factor
        """
