"""Loan evaluator for loan amount range and loan-to-value factors."""

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.services.engine.base import (
    EvaluationContext,
    FactorEvaluator,
    FactorResult,
)
from mortgage_market.services.engine.validation import exceeds_max_ltv, loan_to_value_bps


class LoanEvaluator(FactorEvaluator):
    """
    Evaluator for loan-related factors.

    Handles:
    - LOAN_AMOUNT: requested amount within the offer's [min, max] range
    - LOAN_TO_VALUE: requested LTV at or below the offer's maximum
    """

    def evaluate(
        self, factor: EligibilityFactor, context: EvaluationContext
    ) -> FactorResult:
        if factor == EligibilityFactor.LOAN_AMOUNT:
            return self._evaluate_loan_amount(context)
        elif factor == EligibilityFactor.LOAN_TO_VALUE:
            return self._evaluate_loan_to_value(context)
        else:
            raise ValueError(f"LoanEvaluator cannot handle factor: {factor.value}")

    def _evaluate_loan_amount(self, context: EvaluationContext) -> FactorResult:
        """Loan amount must fall inside the offer's inclusive range."""
        offer = context.offer
        amount = context.application.loan_amount

        passed = offer.min_loan_amount <= amount <= offer.max_loan_amount

        if passed:
            reason = (
                f"Loan amount {amount:,} is within {offer.min_loan_amount:,}"
                f"-{offer.max_loan_amount:,}"
            )
        elif amount < offer.min_loan_amount:
            reason = (
                f"Loan amount {amount:,} is below minimum of {offer.min_loan_amount:,} "
                f"(gap: {offer.min_loan_amount - amount:,})"
            )
        else:
            reason = (
                f"Loan amount {amount:,} exceeds maximum of {offer.max_loan_amount:,} "
                f"(excess: {amount - offer.max_loan_amount:,})"
            )

        return FactorResult(
            factor=EligibilityFactor.LOAN_AMOUNT,
            passed=passed,
            reason=reason,
            evidence={
                "actual": amount,
                "required_min": offer.min_loan_amount,
                "required_max": offer.max_loan_amount,
            },
        )

    def _evaluate_loan_to_value(self, context: EvaluationContext) -> FactorResult:
        """
        LTV must not exceed the offer's maximum.

        LTV = loan amount / property value, in bps; a zero property value
        counts as 100%. The check uses the exact ratio, the evidence the
        rounded one.
        """
        offer = context.offer
        application = context.application

        ltv = loan_to_value_bps(application.loan_amount, application.property_value)
        passed = not exceeds_max_ltv(
            application.loan_amount, application.property_value, offer.max_ltv_ratio
        )

        if passed:
            reason = f"LTV {ltv} bps is within maximum of {offer.max_ltv_ratio} bps"
        else:
            reason = (
                f"LTV {ltv} bps exceeds maximum of {offer.max_ltv_ratio} bps "
                f"(excess: {ltv - offer.max_ltv_ratio} bps)"
            )

        return FactorResult(
            factor=EligibilityFactor.LOAN_TO_VALUE,
            passed=passed,
            reason=reason,
            evidence={
                "actual": ltv,
                "required": offer.max_ltv_ratio,
                "loan_amount": application.loan_amount,
                "property_value": application.property_value,
            },
        )
