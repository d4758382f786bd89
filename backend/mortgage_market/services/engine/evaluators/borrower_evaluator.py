"""Borrower evaluator for credit score and income factors."""

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.services.engine.base import (
    EvaluationContext,
    FactorEvaluator,
    FactorResult,
)


class BorrowerEvaluator(FactorEvaluator):
    """
    Evaluator for borrower-related factors.

    Handles:
    - CREDIT_SCORE: credit score at or above the offer's minimum
    - INCOME: annual income at or above the offer's minimum
    """

    def evaluate(
        self, factor: EligibilityFactor, context: EvaluationContext
    ) -> FactorResult:
        if factor == EligibilityFactor.CREDIT_SCORE:
            return self._evaluate_credit_score(context)
        elif factor == EligibilityFactor.INCOME:
            return self._evaluate_income(context)
        else:
            raise ValueError(f"BorrowerEvaluator cannot handle factor: {factor.value}")

    def _evaluate_credit_score(self, context: EvaluationContext) -> FactorResult:
        required = context.offer.min_credit_score
        actual = context.application.credit_score
        passed = actual >= required

        if passed:
            reason = f"Credit score {actual} meets minimum requirement of {required}"
        else:
            reason = (
                f"Credit score {actual} is below minimum requirement of {required} "
                f"(gap: {required - actual})"
            )

        return FactorResult(
            factor=EligibilityFactor.CREDIT_SCORE,
            passed=passed,
            reason=reason,
            evidence={
                "actual": actual,
                "required": required,
                "gap": required - actual if not passed else 0,
            },
        )

    def _evaluate_income(self, context: EvaluationContext) -> FactorResult:
        required = context.offer.min_income
        actual = context.application.annual_income
        passed = actual >= required

        if passed:
            reason = f"Annual income {actual:,} meets minimum of {required:,}"
        else:
            reason = (
                f"Annual income {actual:,} is below minimum of {required:,} "
                f"(gap: {required - actual:,})"
            )

        return FactorResult(
            factor=EligibilityFactor.INCOME,
            passed=passed,
            reason=reason,
            evidence={
                "actual": actual,
                "required": required,
                "gap": required - actual if not passed else 0,
            },
        )
