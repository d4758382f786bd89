"""Additive match scoring over eligibility factor results."""

from typing import Iterable

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.services.engine.base import EligibilityResult, FactorResult

# Criteria that earn points. Offer availability is a gate, not a criterion.
WEIGHTED_FACTORS = (
    EligibilityFactor.LOAN_AMOUNT,
    EligibilityFactor.CREDIT_SCORE,
    EligibilityFactor.INCOME,
    EligibilityFactor.LOAN_TO_VALUE,
)
GATE_FACTOR = EligibilityFactor.OFFER_AVAILABILITY

DEFAULT_POINTS_PER_CRITERION = 25
MAX_SCORE = 100


class MatchScorer:
    """
    Scores how closely an application fits an offer.

    Each satisfied weighted criterion adds the same number of points, so with
    the default of 25 the score is one of 0, 25, 50, 75 or 100. The scorer is
    a pure function of its input.
    """

    def __init__(self, points_per_criterion: int = DEFAULT_POINTS_PER_CRITERION):
        """
        Initialize the scorer.

        Args:
            points_per_criterion: Points per satisfied criterion

        Raises:
            ValueError: If a full match would score outside 0-100
        """
        if not 0 <= points_per_criterion * len(WEIGHTED_FACTORS) <= MAX_SCORE:
            raise ValueError(
                f"points_per_criterion must be between 0 and "
                f"{MAX_SCORE // len(WEIGHTED_FACTORS)}, got {points_per_criterion}"
            )
        self.points_per_criterion = points_per_criterion

    def score(self, factor_results: Iterable[FactorResult]) -> int:
        """
        Compute the match score.

        Args:
            factor_results: Per-factor results from the eligibility evaluator

        Returns:
            points_per_criterion x number of satisfied weighted criteria
        """
        satisfied = {
            result.factor
            for result in factor_results
            if result.passed and result.factor in WEIGHTED_FACTORS
        }
        return self.points_per_criterion * len(satisfied)

    def score_result(self, result: EligibilityResult) -> int:
        """Score a complete eligibility result."""
        return self.score(result.factor_results)

    @staticmethod
    def passes_gate(factor_results: Iterable[FactorResult]) -> bool:
        """True when the offer availability gate was evaluated and passed."""
        return any(
            result.factor == GATE_FACTOR and result.passed for result in factor_results
        )
