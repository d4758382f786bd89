"""Side-by-side cost comparison of two offers for one application."""

from dataclasses import dataclass
from typing import Optional

from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.application import MortgageApplication
from mortgage_market.models.domain.lender import MortgageOffer
from mortgage_market.services.engine.amortization import closing_costs, compute_payment


@dataclass(frozen=True)
class OfferComparison:
    """
    Cost figures for two offers on the same loan amount.

    Differences are offer2 minus offer1; the comparison itself does not pick
    a winner.
    """

    offer1_payment: int
    offer2_payment: int
    offer1_total_interest: int
    offer2_total_interest: int
    offer1_closing_costs: int
    offer2_closing_costs: int

    @property
    def payment_difference(self) -> int:
        return self.offer2_payment - self.offer1_payment

    @property
    def interest_difference(self) -> int:
        return self.offer2_total_interest - self.offer1_total_interest

    @property
    def closing_cost_difference(self) -> int:
        return self.offer2_closing_costs - self.offer1_closing_costs


def compare_offers(
    offer1: Optional[MortgageOffer],
    offer2: Optional[MortgageOffer],
    application: Optional[MortgageApplication],
) -> Result[OfferComparison]:
    """
    Price two offers against the application's loan amount.

    Each offer is priced at its own rate and term.

    Args:
        offer1: First offer, or None if the lookup found nothing
        offer2: Second offer, or None if the lookup found nothing
        application: Application supplying the loan amount

    Returns:
        Result with an OfferComparison; NOT_FOUND naming the missing side
    """
    if offer1 is None:
        return Result.fail("Offer 1 not found", ErrorKind.NOT_FOUND)
    if offer2 is None:
        return Result.fail("Offer 2 not found", ErrorKind.NOT_FOUND)
    if application is None:
        return Result.fail("Application not found", ErrorKind.NOT_FOUND)

    amount = application.loan_amount
    first = compute_payment(amount, offer1.interest_rate, offer1.loan_term)
    if not first:
        return Result.fail(first.error, first.error_kind)
    second = compute_payment(amount, offer2.interest_rate, offer2.loan_term)
    if not second:
        return Result.fail(second.error, second.error_kind)

    return Result.ok(
        OfferComparison(
            offer1_payment=first.value.monthly_payment,
            offer2_payment=second.value.monthly_payment,
            offer1_total_interest=first.value.total_interest,
            offer2_total_interest=second.value.total_interest,
            offer1_closing_costs=closing_costs(amount, offer1),
            offer2_closing_costs=closing_costs(amount, offer2),
        )
    )
