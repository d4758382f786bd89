"""Eligibility evaluator coordinating the factor evaluators."""

from datetime import datetime, timezone
from typing import Dict, Optional

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.application import MortgageApplication
from mortgage_market.models.domain.lender import MortgageOffer
from mortgage_market.services.engine.amortization import (
    closing_costs,
    compute_payment,
    platform_fee,
)
from mortgage_market.services.engine.base import (
    EligibilityResult,
    EvaluationContext,
    FactorEvaluator,
    FactorResult,
    PlatformConfig,
)
from mortgage_market.services.engine.evaluators import (
    AvailabilityEvaluator,
    BorrowerEvaluator,
    LoanEvaluator,
)
from mortgage_market.services.engine.validation import loan_to_value_bps


class EligibilityEvaluator:
    """
    Decides whether an application qualifies for an offer.

    This class:
    - Maintains a registry of factor evaluators
    - Evaluates every factor independently, never short-circuiting
    - Collects the failing factors rather than aborting on the first one
    - Always prices the offer for the application, eligible or not
    """

    def __init__(self):
        """Initialize the evaluator with the default factor registry."""
        self._evaluators: Dict[EligibilityFactor, FactorEvaluator] = {}
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators for all factors."""
        self._evaluators[EligibilityFactor.OFFER_AVAILABILITY] = AvailabilityEvaluator()

        loan_evaluator = LoanEvaluator()
        self._evaluators[EligibilityFactor.LOAN_AMOUNT] = loan_evaluator
        self._evaluators[EligibilityFactor.LOAN_TO_VALUE] = loan_evaluator

        borrower_evaluator = BorrowerEvaluator()
        self._evaluators[EligibilityFactor.CREDIT_SCORE] = borrower_evaluator
        self._evaluators[EligibilityFactor.INCOME] = borrower_evaluator

    def register_evaluator(
        self, factor: EligibilityFactor, evaluator: FactorEvaluator
    ) -> None:
        """
        Register a custom evaluator for a factor.

        Args:
            factor: The factor to handle
            evaluator: The evaluator instance
        """
        self._evaluators[factor] = evaluator

    def evaluate(
        self,
        application: Optional[MortgageApplication],
        offer: Optional[MortgageOffer],
        config: PlatformConfig,
        as_of: Optional[datetime] = None,
    ) -> Result[EligibilityResult]:
        """
        Evaluate an application against one offer.

        Args:
            application: The application, or None if the lookup found nothing
            offer: The offer, or None if the lookup found nothing
            config: Platform thresholds (fee rate)
            as_of: Time the offer's validity is checked at (defaults to now)

        Returns:
            Result with an EligibilityResult; NOT_FOUND when a record is missing.
            An ineligible application is a successful result with
            eligible=False.
        """
        if application is None:
            return Result.fail("Application not found", ErrorKind.NOT_FOUND)
        if offer is None:
            return Result.fail("Offer not found", ErrorKind.NOT_FOUND)

        context = EvaluationContext(
            application=application,
            offer=offer,
            config=config,
            as_of=as_of or datetime.now(timezone.utc),
        )

        factor_results: list[FactorResult] = [
            self._evaluators[factor].evaluate(factor, context)
            for factor in EligibilityFactor
        ]
        failed_factors = [result.factor for result in factor_results if not result.passed]

        term = application.preferred_term or offer.loan_term
        estimate = compute_payment(application.loan_amount, offer.interest_rate, term)
        if not estimate:
            return Result.fail(estimate.error, estimate.error_kind)

        return Result.ok(
            EligibilityResult(
                eligible=not failed_factors,
                estimated_payment=estimate.value.monthly_payment,
                total_interest=estimate.value.total_interest,
                total_closing_costs=closing_costs(application.loan_amount, offer),
                platform_fee=platform_fee(application.loan_amount, config.platform_fee_rate),
                loan_to_value=loan_to_value_bps(
                    application.loan_amount, application.property_value
                ),
                failed_factors=failed_factors,
                factor_results=factor_results,
            )
        )
