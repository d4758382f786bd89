"""Unit tests for payment and fee arithmetic"""

import pytest

from mortgage_market.core.errors import ErrorKind
from mortgage_market.services.engine.amortization import (
    apply_rate,
    closing_costs,
    compute_payment,
    platform_fee,
)
from tests.factories import build_offer


def test_compute_payment_thirty_year_fixed():
    """300,000 at 4.00% over 360 months"""
    result = compute_payment(300_000, 400, 360)

    assert result.success
    assert result.value.monthly_payment == 1432
    assert result.value.total_interest == 1432 * 360 - 300_000 == 215_520


def test_compute_payment_at_five_and_a_half_percent():
    """300,000 at 5.50% over 360 months is 1,703.37 before rounding"""
    result = compute_payment(300_000, 550, 360)

    assert result.value.monthly_payment == 1703
    assert result.value.total_interest == 313_080


def test_compute_payment_zero_rate_spreads_principal():
    result = compute_payment(120_000, 0, 360)

    assert result.value.monthly_payment == 333
    assert result.value.total_interest == 0


def test_compute_payment_zero_rate_rounds_half_up():
    # 150 / 12 = 12.5
    assert compute_payment(150, 0, 12).value.monthly_payment == 13


def test_compute_payment_is_deterministic():
    first = compute_payment(412_345, 637, 300)
    second = compute_payment(412_345, 637, 300)

    assert first.value == second.value


@pytest.mark.parametrize(
    "principal, rate, term, kind",
    [
        (300_000, 400, 0, ErrorKind.INVALID_LOAN_TERM),
        (300_000, 400, -12, ErrorKind.INVALID_LOAN_TERM),
        (0, 400, 360, ErrorKind.INVALID_AMOUNT),
        (-1, 400, 360, ErrorKind.INVALID_AMOUNT),
        (300_000, -1, 360, ErrorKind.INVALID_RATE),
    ],
)
def test_compute_payment_rejects_invalid_inputs(principal, rate, term, kind):
    result = compute_payment(principal, rate, term)

    assert not result.success
    assert result.error_kind == kind
    assert result.value is None


def test_term_checked_before_principal():
    assert compute_payment(0, 400, 0).error_kind == ErrorKind.INVALID_LOAN_TERM


def test_payment_monotonic_in_rate():
    payments = [compute_payment(250_000, rate, 360).value.monthly_payment for rate in range(0, 1001, 50)]

    assert payments == sorted(payments)


def test_payment_monotonic_in_principal():
    payments = [
        compute_payment(principal, 500, 240).value.monthly_payment
        for principal in range(10_000, 500_001, 10_000)
    ]

    assert payments == sorted(payments)


def test_payment_non_increasing_in_term():
    payments = [compute_payment(250_000, 500, term).value.monthly_payment for term in range(12, 481, 12)]

    assert payments == sorted(payments, reverse=True)


def test_apply_rate_rounds_half_up():
    # 1,050 * 50 / 10,000 = 5.25; 1,100 * 50 / 10,000 = 5.5
    assert apply_rate(1_050, 50) == 5
    assert apply_rate(1_100, 50) == 6


def test_closing_costs_combines_points_fee_and_estimate():
    offer = build_offer(points=100, origination_fee=50, closing_cost_estimate=3_000)

    # 1.5% of 300,000 plus the flat estimate
    assert closing_costs(300_000, offer) == 7_500


def test_platform_fee():
    assert platform_fee(300_000, 100) == 3_000
    assert platform_fee(300_000, 0) == 0
