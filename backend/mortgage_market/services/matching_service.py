"""Matching service for eligibility checks, comparisons and match records."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.config import settings
from mortgage_market.core.enums import ApplicationStatus, LenderResponse
from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.application import MortgageApplication
from mortgage_market.models.domain.match import ApplicationMatch
from mortgage_market.repositories.application_repository import (
    ApplicationRepository,
    BorrowerRepository,
)
from mortgage_market.repositories.lender_repository import (
    LenderRepository,
    OfferRepository,
)
from mortgage_market.repositories.match_repository import MatchRepository
from mortgage_market.services.engine import (
    EligibilityEvaluator,
    EligibilityResult,
    MatchScorer,
    OfferComparison,
    compare_offers,
)
from mortgage_market.services.platform_service import PlatformService

logger = logging.getLogger(__name__)


@dataclass
class Eligibility:
    """Eligibility result for one application/offer pair, with its score."""

    application_id: UUID
    offer_id: UUID
    match_score: int
    result: EligibilityResult


@dataclass
class MatchingRun:
    """Outcome of matching an application against the active offers."""

    application_id: UUID
    offers_evaluated: int = 0
    skipped_existing: int = 0
    matches: List[ApplicationMatch] = field(default_factory=list)

    @property
    def matches_created(self) -> int:
        return len(self.matches)


class MatchingService:
    """
    Matching service connecting applications with mortgage offers.

    This service:
    1. Loads the application, offers and platform thresholds
    2. Runs the eligibility engine and scorer
    3. Persists snapshot matches for offers that pass the availability gate
    4. Lets the offering lender respond to matches
    """

    def __init__(self, db: AsyncSession, scorer: Optional[MatchScorer] = None):
        """
        Initialize the matching service.

        Args:
            db: Async database session
            scorer: Match scorer, built from settings when omitted
        """
        self.db = db
        self.repo = MatchRepository(db)
        self.application_repo = ApplicationRepository(db)
        self.borrower_repo = BorrowerRepository(db)
        self.lender_repo = LenderRepository(db)
        self.offer_repo = OfferRepository(db)
        self.platform = PlatformService(db)
        self.evaluator = EligibilityEvaluator()
        self.scorer = scorer or MatchScorer(settings.MATCH_POINTS_PER_CRITERION)

    async def evaluate_eligibility(
        self,
        application_id: UUID,
        offer_id: UUID,
        as_of: Optional[datetime] = None,
    ) -> Result[Eligibility]:
        """
        Evaluate one application against one offer without persisting anything.

        Args:
            application_id: UUID of the application
            offer_id: UUID of the offer
            as_of: Evaluation time (defaults to now)

        Returns:
            Result with the eligibility and its score
        """
        application = await self.application_repo.get_by_id(application_id)
        offer = await self.offer_repo.get_by_id(offer_id)
        config = await self.platform.get_config()

        evaluation = self.evaluator.evaluate(application, offer, config, as_of)
        if not evaluation:
            return Result.fail(evaluation.error, evaluation.error_kind)

        return Result.ok(
            Eligibility(
                application_id=application_id,
                offer_id=offer_id,
                match_score=self.scorer.score_result(evaluation.value),
                result=evaluation.value,
            )
        )

    async def compare_offers(
        self, offer1_id: UUID, offer2_id: UUID, application_id: UUID
    ) -> Result[OfferComparison]:
        """Compare the cost of two offers for one application."""
        offer1 = await self.offer_repo.get_by_id(offer1_id)
        offer2 = await self.offer_repo.get_by_id(offer2_id)
        application = await self.application_repo.get_by_id(application_id)
        return compare_offers(offer1, offer2, application)

    async def run_matching(
        self,
        actor: str,
        application_id: UUID,
        as_of: Optional[datetime] = None,
    ) -> Result[MatchingRun]:
        """
        Match an application against every active offer.

        One match is created per offer that passes the availability gate,
        eligible or not, with the score and costs frozen at creation. Pairs
        that already have a match are skipped.

        Args:
            actor: Calling principal (must own the application)
            application_id: UUID of the application
            as_of: Evaluation time (defaults to now)

        Returns:
            Result with a MatchingRun summary
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            return Result.fail("Application not found", ErrorKind.NOT_FOUND)
        if not await self._is_borrower_of(actor, application):
            return Result.fail(
                "Only the applying borrower can run matching", ErrorKind.UNAUTHORIZED
            )

        config = await self.platform.get_config()
        run = MatchingRun(application_id=application_id)

        for offer in await self.offer_repo.get_active_offers():
            run.offers_evaluated += 1

            if await self.repo.get_by_pair(application_id, offer.id):
                run.skipped_existing += 1
                continue

            evaluation = self.evaluator.evaluate(application, offer, config, as_of)
            if not evaluation:
                logger.warning(
                    f"Skipping offer {offer.id} for application {application_id}: "
                    f"{evaluation.error}"
                )
                continue

            result = evaluation.value
            if not self.scorer.passes_gate(result.factor_results):
                continue

            match = ApplicationMatch(
                application_id=application_id,
                offer_id=offer.id,
                match_score=self.scorer.score_result(result),
                estimated_payment=result.estimated_payment,
                total_interest=result.total_interest,
                total_closing_costs=result.total_closing_costs,
                lender_response=LenderResponse.PENDING,
            )
            self.db.add(match)
            run.matches.append(match)

        if run.matches:
            application.status = ApplicationStatus.MATCHED

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Concurrent matching run detected for application {application_id}")
            return Result.fail(
                "Matches for this application were created concurrently",
                ErrorKind.ALREADY_EXISTS,
            )

        for match in run.matches:
            await self.db.refresh(match)

        logger.info(
            f"Matching run for application {application_id}: "
            f"{run.offers_evaluated} offers evaluated, {run.matches_created} matches created, "
            f"{run.skipped_existing} already matched"
        )
        return Result.ok(run)

    async def list_matches(
        self, actor: str, application_id: UUID
    ) -> Result[List[ApplicationMatch]]:
        """
        List matches for an application visible to the actor.

        The applying borrower sees every match; a lender sees only matches
        on its own offers.

        Args:
            actor: Calling principal
            application_id: UUID of the application

        Returns:
            Result with the visible matches
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            return Result.fail("Application not found", ErrorKind.NOT_FOUND)

        matches = await self.repo.get_by_application(application_id)
        if await self._is_borrower_of(actor, application):
            return Result.ok(matches)

        lender = await self.lender_repo.get_by_principal(actor)
        if lender is None:
            return Result.fail(
                "Only the borrower or a matched lender can view matches", ErrorKind.UNAUTHORIZED
            )

        own_offer_ids = {offer.id for offer in await self.offer_repo.get_by_lender(lender.id)}
        return Result.ok([match for match in matches if match.offer_id in own_offer_ids])

    async def respond_to_match(
        self,
        actor: str,
        application_id: UUID,
        offer_id: UUID,
        response: LenderResponse,
    ) -> Result[ApplicationMatch]:
        """
        Record the offering lender's response to a match.

        Args:
            actor: Calling principal (must own the offer)
            application_id: UUID of the application
            offer_id: UUID of the matched offer
            response: Lender response

        Returns:
            Result with the updated match
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        offer = await self.offer_repo.get_by_id(offer_id)
        if offer is None:
            return Result.fail("Offer not found", ErrorKind.NOT_FOUND)

        lender = await self.lender_repo.get_by_principal(actor)
        if lender is None or offer.lender_id != lender.id:
            return Result.fail(
                "Only the offering lender can respond to this match", ErrorKind.UNAUTHORIZED
            )

        match = await self.repo.get_by_pair(application_id, offer_id)
        if match is None:
            return Result.fail("Match not found", ErrorKind.NOT_FOUND)

        match.lender_response = response
        await self.db.commit()
        await self.db.refresh(match)

        logger.info(
            f"Lender {actor} responded {response.value} to application {application_id}"
        )
        return Result.ok(match)

    async def _is_borrower_of(self, actor: str, application: MortgageApplication) -> bool:
        borrower = await self.borrower_repo.get_by_principal(actor)
        return borrower is not None and borrower.id == application.borrower_id
