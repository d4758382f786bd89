"""Integration tests for the service layer against an in-memory database"""

from datetime import timedelta

import pytest

from mortgage_market.core.enums import ApplicationStatus, LenderResponse
from mortgage_market.core.errors import ErrorKind
from mortgage_market.db.session import seed_platform_stats
from mortgage_market.models.schemas.application import BorrowerCreate, MortgageApplicationCreate
from mortgage_market.models.schemas.lender import LenderCreate, MortgageOfferCreate
from mortgage_market.repositories.platform_repository import PlatformRepository
from mortgage_market.services import (
    ApplicationService,
    LenderService,
    MatchingService,
    PlatformService,
)
from tests.factories import (
    AS_OF,
    BORROWER,
    LENDER,
    OTHER_BORROWER,
    OTHER_LENDER,
    OWNER,
    application_payload,
    offer_payload,
)


async def register_approved_lender(db, principal: str = LENDER):
    service = LenderService(db)
    await service.register_lender(principal, LenderCreate(name=f"{principal} bank", license_number="NMLS-1"))
    return (await service.approve_lender(OWNER, principal)).unwrap()


async def create_offer(db, principal: str = LENDER, **overrides):
    result = await LenderService(db).create_offer(
        principal, MortgageOfferCreate(**offer_payload(**overrides))
    )
    return result.unwrap()


async def submit_application(db, principal: str = BORROWER, **overrides):
    service = ApplicationService(db)
    if not (await service.get_borrower(principal)).success:
        await service.register_borrower(principal, BorrowerCreate(first_name="Ada", last_name="Lovelace"))
    result = await service.submit_application(
        principal, MortgageApplicationCreate(**application_payload(**overrides))
    )
    return result.unwrap()


async def stats(db):
    return await PlatformService(db).get_stats()


# ==================== Platform ====================


async def test_platform_defaults_are_seeded(db):
    platform = await stats(db)

    assert platform.min_credit_score == 580
    assert platform.max_loan_to_value == 9_500
    assert platform.platform_fee_rate == 100
    assert not platform.is_paused
    assert (platform.total_lenders, platform.total_offers, platform.total_applications) == (0, 0, 0)


async def test_interleaved_sessions_both_count(session_factory):
    async with session_factory() as first, session_factory() as second:
        # Both sessions load the row before either increments
        await PlatformRepository(first).get_stats()
        await PlatformRepository(second).get_stats()

        await PlatformRepository(first).increment("total_offers")
        await first.commit()
        stats = await PlatformRepository(second).increment("total_offers")
        await second.commit()

    assert stats.total_offers == 2
    async with session_factory() as fresh:
        assert (await PlatformRepository(fresh).get_stats()).total_offers == 2


async def test_increment_rejects_unknown_counter(db):
    with pytest.raises(ValueError):
        await PlatformRepository(db).increment("total_matches")


async def test_seeding_twice_keeps_existing_row(session_factory):
    async with session_factory() as session:
        await PlatformRepository(session).increment("total_lenders")
        await session.commit()

    await seed_platform_stats(session_factory)

    async with session_factory() as session:
        assert (await PlatformRepository(session).get_stats()).total_lenders == 1


async def test_set_parameters_is_owner_only(db):
    result = await PlatformService(db).set_parameters(LENDER, 600, 9_000, 50)

    assert result.error_kind == ErrorKind.OWNER_ONLY


@pytest.mark.parametrize(
    "params, kind",
    [
        ((200, 9_000, 50), ErrorKind.INVALID_CREDIT_SCORE),
        ((600, 0, 50), ErrorKind.INVALID_AMOUNT),
        ((600, 10_001, 50), ErrorKind.INVALID_AMOUNT),
        ((600, 9_000, -1), ErrorKind.INVALID_RATE),
    ],
)
async def test_set_parameters_rejects_out_of_range_values(db, params, kind):
    result = await PlatformService(db).set_parameters(OWNER, *params)

    assert result.error_kind == kind


async def test_new_parameters_apply_to_later_applications(db):
    await PlatformService(db).set_parameters(OWNER, 740, 8_000, 100)

    service = ApplicationService(db)
    await service.register_borrower(BORROWER, BorrowerCreate(first_name="Ada", last_name="Lovelace"))
    result = await service.submit_application(
        BORROWER, MortgageApplicationCreate(**application_payload(credit_score=720))
    )

    assert result.error_kind == ErrorKind.INVALID_CREDIT_SCORE


# ==================== Lenders ====================


async def test_register_lender_starts_unapproved(db):
    result = await LenderService(db).register_lender(
        LENDER, LenderCreate(name="Alpha Bank", license_number="NMLS-1")
    )

    lender = result.unwrap()
    assert not lender.is_approved
    assert lender.reputation_score == 100
    assert (await stats(db)).total_lenders == 1


async def test_register_lender_twice_fails_and_keeps_counter(db):
    service = LenderService(db)
    data = LenderCreate(name="Alpha Bank", license_number="NMLS-1")
    await service.register_lender(LENDER, data)

    result = await service.register_lender(LENDER, data)

    assert result.error_kind == ErrorKind.ALREADY_EXISTS
    assert (await stats(db)).total_lenders == 1


async def test_approve_lender_checks_owner_then_existence(db):
    service = LenderService(db)

    assert (await service.approve_lender(LENDER, LENDER)).error_kind == ErrorKind.OWNER_ONLY
    assert (await service.approve_lender(OWNER, "nobody")).error_kind == ErrorKind.NOT_FOUND


async def test_set_reputation(db):
    await register_approved_lender(db)
    service = LenderService(db)

    assert (await service.set_reputation(OWNER, LENDER, 101)).error_kind == ErrorKind.INVALID_AMOUNT
    assert (await service.set_reputation(LENDER, LENDER, 50)).error_kind == ErrorKind.OWNER_ONLY
    assert (await service.set_reputation(OWNER, LENDER, 42)).unwrap().reputation_score == 42


async def test_completed_loans_keep_running_average(db):
    await register_approved_lender(db)
    service = LenderService(db)

    await service.record_completed_loan(OWNER, LENDER, 400)
    await service.record_completed_loan(OWNER, LENDER, 450)
    lender = (await service.record_completed_loan(OWNER, LENDER, 500)).unwrap()

    assert lender.total_loans_issued == 3
    assert lender.average_rate == 450


async def test_completed_loan_average_rounds_half_up(db):
    await register_approved_lender(db)
    service = LenderService(db)

    await service.record_completed_loan(OWNER, LENDER, 400)
    lender = (await service.record_completed_loan(OWNER, LENDER, 401)).unwrap()

    assert lender.average_rate == 401


async def test_completed_loan_rejects_non_positive_rate(db):
    await register_approved_lender(db)

    result = await LenderService(db).record_completed_loan(OWNER, LENDER, 0)

    assert result.error_kind == ErrorKind.INVALID_RATE


# ==================== Offers ====================


async def test_create_offer_increments_counter(db):
    await register_approved_lender(db)

    offer = await create_offer(db)

    assert offer.is_active
    assert offer.interest_rate == 400
    assert (await stats(db)).total_offers == 1


async def test_unapproved_lender_cannot_create_offer(db):
    await LenderService(db).register_lender(LENDER, LenderCreate(name="Alpha", license_number="N-1"))

    result = await LenderService(db).create_offer(LENDER, MortgageOfferCreate(**offer_payload()))

    assert result.error_kind == ErrorKind.LENDER_NOT_APPROVED
    assert (await stats(db)).total_offers == 0


async def test_unregistered_actor_cannot_create_offer(db):
    result = await LenderService(db).create_offer(LENDER, MortgageOfferCreate(**offer_payload()))

    assert result.error_kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "overrides, kind",
    [
        ({"max_loan_amount": 10_000}, ErrorKind.INVALID_AMOUNT),
        ({"interest_rate": 0}, ErrorKind.INVALID_RATE),
        ({"loan_term": 0}, ErrorKind.INVALID_LOAN_TERM),
        ({"max_ltv_ratio": 10_500}, ErrorKind.INVALID_AMOUNT),
    ],
)
async def test_invalid_offer_leaves_counter_unchanged(db, overrides, kind):
    await register_approved_lender(db)

    result = await LenderService(db).create_offer(
        LENDER, MortgageOfferCreate(**offer_payload(**overrides))
    )

    assert result.error_kind == kind
    assert (await stats(db)).total_offers == 0


async def test_only_offering_lender_updates_status(db):
    await register_approved_lender(db)
    await register_approved_lender(db, OTHER_LENDER)
    offer = await create_offer(db)
    service = LenderService(db)

    denied = await service.update_offer_status(OTHER_LENDER, offer.id, False)
    updated = await service.update_offer_status(LENDER, offer.id, False)

    assert denied.error_kind == ErrorKind.UNAUTHORIZED
    assert not updated.unwrap().is_active
    assert await service.list_offers(active_only=True) == []


# ==================== Applications ====================


async def test_submit_application(db):
    application = await submit_application(db, monthly_debt_payments=2_500, debt_to_income=None)

    assert application.status == ApplicationStatus.SUBMITTED
    assert application.debt_to_income == 2_500
    assert (await stats(db)).total_applications == 1
    borrower = (await ApplicationService(db).get_borrower(BORROWER)).unwrap()
    assert borrower.applications_count == 1


async def test_submit_requires_borrower_profile(db):
    result = await ApplicationService(db).submit_application(
        BORROWER, MortgageApplicationCreate(**application_payload())
    )

    assert result.error_kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "overrides, kind",
    [
        ({"credit_score": 250}, ErrorKind.INVALID_CREDIT_SCORE),
        ({"annual_income": 0}, ErrorKind.INSUFFICIENT_INCOME),
        ({"loan_amount": 399_000}, ErrorKind.INVALID_AMOUNT),
    ],
)
async def test_invalid_application_leaves_counter_unchanged(db, overrides, kind):
    service = ApplicationService(db)
    await service.register_borrower(BORROWER, BorrowerCreate(first_name="Ada", last_name="Lovelace"))

    result = await service.submit_application(
        BORROWER, MortgageApplicationCreate(**application_payload(**overrides))
    )

    assert result.error_kind == kind
    assert (await stats(db)).total_applications == 0


async def test_register_borrower_twice_fails(db):
    service = ApplicationService(db)
    data = BorrowerCreate(first_name="Ada", last_name="Lovelace")
    await service.register_borrower(BORROWER, data)

    assert (await service.register_borrower(BORROWER, data)).error_kind == ErrorKind.ALREADY_EXISTS


# ==================== Matching ====================


async def test_evaluate_eligibility_by_id(db):
    await register_approved_lender(db)
    offer = await create_offer(db)
    application = await submit_application(db)

    eligibility = (
        await MatchingService(db).evaluate_eligibility(application.id, offer.id, AS_OF)
    ).unwrap()

    assert eligibility.result.eligible
    assert eligibility.match_score == 100
    assert eligibility.result.estimated_payment == 1432


async def test_unknown_ids_are_not_found(db):
    await register_approved_lender(db)
    offer = await create_offer(db)
    application = await submit_application(db)
    service = MatchingService(db)

    missing_offer = await service.evaluate_eligibility(application.id, application.id, AS_OF)
    missing_application = await service.evaluate_eligibility(offer.id, offer.id, AS_OF)

    assert missing_offer.error_kind == ErrorKind.NOT_FOUND
    assert missing_application.error_kind == ErrorKind.NOT_FOUND


async def test_run_matching_scores_and_skips_gated_offers(db):
    await register_approved_lender(db)
    good = await create_offer(db)
    strict = await create_offer(db, min_credit_score=760, min_income=150_000)
    await create_offer(db, valid_until=(AS_OF - timedelta(days=1)).isoformat())
    inactive = await create_offer(db)
    await LenderService(db).update_offer_status(LENDER, inactive.id, False)
    application = await submit_application(db)

    run = (await MatchingService(db).run_matching(BORROWER, application.id, AS_OF)).unwrap()

    assert run.offers_evaluated == 3
    assert run.matches_created == 2
    scores = {match.offer_id: match.match_score for match in run.matches}
    assert scores == {good.id: 100, strict.id: 50}
    refreshed = (await ApplicationService(db).get_application(application.id)).unwrap()
    assert refreshed.status == ApplicationStatus.MATCHED


async def test_run_matching_twice_never_duplicates(db):
    await register_approved_lender(db)
    await create_offer(db)
    application = await submit_application(db)
    service = MatchingService(db)

    await service.run_matching(BORROWER, application.id, AS_OF)
    second = (await service.run_matching(BORROWER, application.id, AS_OF)).unwrap()

    assert second.matches_created == 0
    assert second.skipped_existing == 1
    assert len((await service.list_matches(BORROWER, application.id)).unwrap()) == 1


async def test_run_matching_without_offers_keeps_status(db):
    application = await submit_application(db)

    run = (await MatchingService(db).run_matching(BORROWER, application.id, AS_OF)).unwrap()

    assert run.matches_created == 0
    assert application.status == ApplicationStatus.SUBMITTED


async def test_only_applicant_runs_matching(db):
    application = await submit_application(db)
    await ApplicationService(db).register_borrower(
        OTHER_BORROWER, BorrowerCreate(first_name="Grace", last_name="Hopper")
    )

    result = await MatchingService(db).run_matching(OTHER_BORROWER, application.id, AS_OF)

    assert result.error_kind == ErrorKind.UNAUTHORIZED


async def test_match_is_a_snapshot(db):
    await register_approved_lender(db)
    offer = await create_offer(db)
    application = await submit_application(db)
    service = MatchingService(db)
    await service.run_matching(BORROWER, application.id, AS_OF)

    offer.min_credit_score = 800
    offer.interest_rate = 900
    await LenderService(db).update_offer_status(LENDER, offer.id, False)

    match = (await service.list_matches(BORROWER, application.id)).unwrap()[0]
    assert match.match_score == 100
    assert match.estimated_payment == 1432


async def test_lenders_see_only_their_own_matches(db):
    await register_approved_lender(db)
    await register_approved_lender(db, OTHER_LENDER)
    mine = await create_offer(db)
    await create_offer(db, OTHER_LENDER)
    application = await submit_application(db)
    service = MatchingService(db)
    await service.run_matching(BORROWER, application.id, AS_OF)

    visible = (await service.list_matches(LENDER, application.id)).unwrap()

    assert [match.offer_id for match in visible] == [mine.id]
    assert (await service.list_matches("stranger", application.id)).error_kind == (
        ErrorKind.UNAUTHORIZED
    )


async def test_respond_to_match(db):
    await register_approved_lender(db)
    await register_approved_lender(db, OTHER_LENDER)
    offer = await create_offer(db)
    application = await submit_application(db)
    service = MatchingService(db)
    await service.run_matching(BORROWER, application.id, AS_OF)

    denied = await service.respond_to_match(
        OTHER_LENDER, application.id, offer.id, LenderResponse.INTERESTED
    )
    match = (
        await service.respond_to_match(LENDER, application.id, offer.id, LenderResponse.INTERESTED)
    ).unwrap()

    assert denied.error_kind == ErrorKind.UNAUTHORIZED
    assert match.lender_response == LenderResponse.INTERESTED


async def test_respond_without_match_is_not_found(db):
    await register_approved_lender(db)
    offer = await create_offer(db)
    application = await submit_application(db)

    result = await MatchingService(db).respond_to_match(
        LENDER, application.id, offer.id, LenderResponse.DECLINED
    )

    assert result.error_kind == ErrorKind.NOT_FOUND


async def test_compare_offers_by_id(db):
    await register_approved_lender(db)
    first = await create_offer(db)
    second = await create_offer(db, interest_rate=550)
    application = await submit_application(db)

    comparison = (
        await MatchingService(db).compare_offers(first.id, second.id, application.id)
    ).unwrap()

    assert comparison.payment_difference == 1703 - 1432


# ==================== Pause ====================


async def test_pause_blocks_marketplace_operations(db):
    await register_approved_lender(db)
    offer = await create_offer(db)
    application = await submit_application(db)
    before = await stats(db)
    counters = (before.total_lenders, before.total_offers, before.total_applications)

    assert (await PlatformService(db).set_paused(LENDER, True)).error_kind == ErrorKind.OWNER_ONLY
    await PlatformService(db).set_paused(OWNER, True)

    blocked = [
        await LenderService(db).register_lender(
            OTHER_LENDER, LenderCreate(name="Beta", license_number="N-2")
        ),
        await LenderService(db).create_offer(LENDER, MortgageOfferCreate(**offer_payload())),
        await LenderService(db).update_offer_status(LENDER, offer.id, False),
        await ApplicationService(db).submit_application(
            BORROWER, MortgageApplicationCreate(**application_payload())
        ),
        await MatchingService(db).run_matching(BORROWER, application.id, AS_OF),
    ]

    assert all(result.error_kind == ErrorKind.PLATFORM_PAUSED for result in blocked)
    after = await stats(db)
    assert (after.total_lenders, after.total_offers, after.total_applications) == counters

    # owner administration keeps working, and unpausing restores the marketplace
    assert (await LenderService(db).set_reputation(OWNER, LENDER, 90)).success
    await PlatformService(db).set_paused(OWNER, False)
    assert (await MatchingService(db).run_matching(BORROWER, application.id, AS_OF)).success
