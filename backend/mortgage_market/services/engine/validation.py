"""Structural and range validation for offers and applications.

Each check returns a Result carrying the ErrorKind callers map to stable
codes. Checks run in a fixed order and the first failure wins.
"""

from decimal import Decimal

from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.schemas.application import MortgageApplicationCreate
from mortgage_market.models.schemas.lender import MortgageOfferCreate
from mortgage_market.services.engine.amortization import MONTHS_PER_YEAR, round_half_up
from mortgage_market.services.engine.base import BASIS_POINTS, PlatformConfig


def loan_to_value_bps(loan_amount: int, property_value: int) -> int:
    """
    Loan-to-value in basis points.

    A property value of zero saturates to 100% instead of dividing by zero.
    """
    if property_value <= 0:
        return BASIS_POINTS
    return round_half_up(
        Decimal(loan_amount) * Decimal(BASIS_POINTS) / Decimal(property_value)
    )


def exceeds_max_ltv(loan_amount: int, property_value: int, max_ltv: int) -> bool:
    """
    Whether loan / property value is strictly above max_ltv bps.

    Compared by cross-multiplication, so an LTV a fraction of a basis point
    over the cap is still rejected. A property value of zero counts as 100%.
    """
    if property_value <= 0:
        return BASIS_POINTS > max_ltv
    return loan_amount * BASIS_POINTS > max_ltv * property_value


def debt_to_income_bps(monthly_debt: int, annual_income: int) -> int:
    """
    Debt-to-income in basis points against monthly income.

    Monthly income of zero saturates to 100% instead of dividing by zero.
    """
    monthly_income = annual_income // MONTHS_PER_YEAR
    if monthly_income <= 0:
        return BASIS_POINTS
    return round_half_up(
        Decimal(monthly_debt) * Decimal(BASIS_POINTS) / Decimal(monthly_income)
    )


def validate_offer(
    fields: MortgageOfferCreate,
    lender_approved: bool,
    config: PlatformConfig,
) -> Result[None]:
    """
    Validate offer fields before an offer is created.

    Args:
        fields: Submitted offer fields
        lender_approved: Approval flag of the lender creating the offer
        config: Platform thresholds (credit score band)

    Returns:
        Successful Result, or the first failing check
    """
    if not lender_approved:
        return Result.fail("Lender is not approved", ErrorKind.LENDER_NOT_APPROVED)

    if fields.min_loan_amount <= 0:
        return Result.fail(
            f"Minimum loan amount must be positive, got {fields.min_loan_amount}",
            ErrorKind.INVALID_AMOUNT,
        )
    if fields.max_loan_amount <= fields.min_loan_amount:
        return Result.fail(
            f"Maximum loan amount {fields.max_loan_amount} must exceed "
            f"minimum {fields.min_loan_amount}",
            ErrorKind.INVALID_AMOUNT,
        )

    if fields.interest_rate <= 0:
        return Result.fail(
            f"Interest rate must be positive, got {fields.interest_rate}",
            ErrorKind.INVALID_RATE,
        )

    if fields.loan_term <= 0:
        return Result.fail(
            f"Loan term must be positive, got {fields.loan_term}",
            ErrorKind.INVALID_LOAN_TERM,
        )

    if not 0 < fields.max_ltv_ratio <= BASIS_POINTS:
        return Result.fail(
            f"Maximum LTV must be in (0, {BASIS_POINTS}] bps, got {fields.max_ltv_ratio}",
            ErrorKind.INVALID_AMOUNT,
        )

    if not config.credit_score_in_band(fields.min_credit_score):
        return Result.fail(
            f"Minimum credit score {fields.min_credit_score} outside "
            f"{config.credit_score_floor}-{config.credit_score_ceiling}",
            ErrorKind.INVALID_CREDIT_SCORE,
        )

    for name in ("min_income", "closing_cost_estimate"):
        if getattr(fields, name) < 0:
            return Result.fail(f"{name} cannot be negative", ErrorKind.INVALID_AMOUNT)
    for name in ("points", "origination_fee", "apr"):
        if getattr(fields, name) < 0:
            return Result.fail(f"{name} cannot be negative", ErrorKind.INVALID_RATE)

    return Result.ok()


def validate_application(
    fields: MortgageApplicationCreate,
    config: PlatformConfig,
) -> Result[None]:
    """
    Validate application fields before an application is submitted.

    Args:
        fields: Submitted application fields
        config: Platform thresholds (credit band, minimum score, maximum LTV)

    Returns:
        Successful Result, or the first failing check
    """
    if fields.loan_amount <= 0:
        return Result.fail(
            f"Loan amount must be positive, got {fields.loan_amount}",
            ErrorKind.INVALID_AMOUNT,
        )
    if fields.property_value <= 0:
        return Result.fail(
            f"Property value must be positive, got {fields.property_value}",
            ErrorKind.INVALID_AMOUNT,
        )

    if not config.credit_score_in_band(fields.credit_score):
        return Result.fail(
            f"Credit score {fields.credit_score} outside "
            f"{config.credit_score_floor}-{config.credit_score_ceiling}",
            ErrorKind.INVALID_CREDIT_SCORE,
        )
    if fields.credit_score < config.min_credit_score:
        return Result.fail(
            f"Credit score {fields.credit_score} below platform minimum "
            f"{config.min_credit_score}",
            ErrorKind.INVALID_CREDIT_SCORE,
        )

    if fields.annual_income <= 0:
        return Result.fail(
            f"Annual income must be positive, got {fields.annual_income}",
            ErrorKind.INSUFFICIENT_INCOME,
        )

    ltv = loan_to_value_bps(fields.loan_amount, fields.property_value)
    if exceeds_max_ltv(fields.loan_amount, fields.property_value, config.max_ltv_ratio):
        return Result.fail(
            f"Loan-to-value {ltv} bps exceeds platform maximum {config.max_ltv_ratio} bps",
            ErrorKind.INVALID_AMOUNT,
        )

    if fields.preferred_term is not None and fields.preferred_term <= 0:
        return Result.fail(
            f"Preferred term must be positive, got {fields.preferred_term}",
            ErrorKind.INVALID_LOAN_TERM,
        )

    if fields.down_payment < 0:
        return Result.fail("Down payment cannot be negative", ErrorKind.INVALID_AMOUNT)
    if fields.monthly_debt_payments is not None and fields.monthly_debt_payments < 0:
        return Result.fail(
            "Monthly debt payments cannot be negative", ErrorKind.INVALID_AMOUNT
        )
    if resolve_debt_to_income(fields) < 0:
        return Result.fail("Debt-to-income cannot be negative", ErrorKind.INVALID_AMOUNT)

    return Result.ok()


def resolve_debt_to_income(fields: MortgageApplicationCreate) -> int:
    """DTI in bps: derived from monthly debt when given, else as submitted, else 0."""
    if fields.monthly_debt_payments is not None:
        return debt_to_income_bps(fields.monthly_debt_payments, fields.annual_income)
    if fields.debt_to_income is not None:
        return fields.debt_to_income
    return 0
