"""Fixed-payment amortization and fee arithmetic on integer-scaled money."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.lender import MortgageOffer
from mortgage_market.services.engine.base import BASIS_POINTS

MONTHS_PER_YEAR = 12

# Enough significant digits that (1 + r) ** -n never loses a unit of
# payment for any realistic principal and term.
_DECIMAL_PRECISION = 50


@dataclass(frozen=True)
class PaymentEstimate:
    """Monthly payment and lifetime interest, in the principal's units."""

    monthly_payment: int
    total_interest: int


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest whole unit, halves away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_payment(
    principal: int, annual_rate_bps: int, term_months: int
) -> Result[PaymentEstimate]:
    """
    Compute the level monthly payment for a fully amortizing loan.

    payment = P * r / (1 - (1 + r) ** -n), with r the monthly rate derived
    from the annual rate in basis points. A zero rate spreads the principal
    evenly with no interest.

    Args:
        principal: Loan principal in integer money units
        annual_rate_bps: Nominal annual rate in basis points
        term_months: Number of monthly payments

    Returns:
        Result with a PaymentEstimate, or a failure when an input is invalid
    """
    if term_months <= 0:
        return Result.fail(
            f"Loan term must be positive, got {term_months}",
            ErrorKind.INVALID_LOAN_TERM,
        )
    if principal <= 0:
        return Result.fail(
            f"Principal must be positive, got {principal}",
            ErrorKind.INVALID_AMOUNT,
        )
    if annual_rate_bps < 0:
        return Result.fail(
            f"Interest rate cannot be negative, got {annual_rate_bps}",
            ErrorKind.INVALID_RATE,
        )

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION

        if annual_rate_bps == 0:
            payment = round_half_up(Decimal(principal) / Decimal(term_months))
            return Result.ok(PaymentEstimate(monthly_payment=payment, total_interest=0))

        monthly_rate = Decimal(annual_rate_bps) / Decimal(BASIS_POINTS * MONTHS_PER_YEAR)
        discount = (Decimal(1) + monthly_rate) ** -term_months
        payment = round_half_up(Decimal(principal) * monthly_rate / (Decimal(1) - discount))

    return Result.ok(
        PaymentEstimate(
            monthly_payment=payment,
            total_interest=payment * term_months - principal,
        )
    )


def apply_rate(amount: int, rate_bps: int) -> int:
    """Apply a basis-point rate to an amount, rounding half up."""
    return round_half_up(Decimal(amount) * Decimal(rate_bps) / Decimal(BASIS_POINTS))


def closing_costs(loan_amount: int, offer: MortgageOffer) -> int:
    """
    Upfront cost of taking the offer.

    points and origination fee are charged on the loan amount; the lender's
    flat closing cost estimate is added on top.
    """
    return (
        apply_rate(loan_amount, offer.points + offer.origination_fee)
        + offer.closing_cost_estimate
    )


def platform_fee(loan_amount: int, fee_rate_bps: int) -> int:
    """Platform fee charged on the loan amount."""
    return apply_rate(loan_amount, fee_rate_bps)
