"""Offer availability evaluator: the hard gate on active, unexpired offers."""

from datetime import datetime, timezone

from mortgage_market.core.enums import EligibilityFactor
from mortgage_market.services.engine.base import (
    EvaluationContext,
    FactorEvaluator,
    FactorResult,
)


def _as_utc(moment: datetime) -> datetime:
    # Some backends hand timestamps back naive; they are stored as UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class AvailabilityEvaluator(FactorEvaluator):
    """
    Evaluator for OFFER_AVAILABILITY.

    An offer is available while it is active and the evaluation time has not
    passed its validity deadline (the deadline itself is still valid).
    """

    def evaluate(
        self, factor: EligibilityFactor, context: EvaluationContext
    ) -> FactorResult:
        if factor != EligibilityFactor.OFFER_AVAILABILITY:
            raise ValueError(
                f"AvailabilityEvaluator cannot handle factor: {factor.value}"
            )

        offer = context.offer
        as_of = _as_utc(context.as_of)
        valid_until = _as_utc(offer.valid_until)

        evidence = {
            "is_active": offer.is_active,
            "valid_until": valid_until.isoformat(),
            "as_of": as_of.isoformat(),
        }

        if not offer.is_active:
            return FactorResult(
                factor=factor,
                passed=False,
                reason="Offer is inactive",
                evidence=evidence,
            )
        if as_of > valid_until:
            return FactorResult(
                factor=factor,
                passed=False,
                reason=f"Offer expired at {valid_until.isoformat()}",
                evidence=evidence,
            )

        return FactorResult(
            factor=factor,
            passed=True,
            reason=f"Offer is active until {valid_until.isoformat()}",
            evidence=evidence,
        )
