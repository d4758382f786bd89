"""Lender service for registration, approval, statistics and offers."""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.lender import Lender, MortgageOffer
from mortgage_market.models.schemas.lender import LenderCreate, MortgageOfferCreate
from mortgage_market.repositories.lender_repository import (
    LenderRepository,
    OfferRepository,
)
from mortgage_market.services.engine.amortization import round_half_up
from mortgage_market.services.engine.validation import validate_offer
from mortgage_market.services.platform_service import PlatformService

logger = logging.getLogger(__name__)

MAX_REPUTATION_SCORE = 100


class LenderService:
    """
    Lender service for managing lenders and their mortgage offers.

    Provides business logic for registering and approving lenders,
    maintaining their completed-loan statistics, and creating offers that
    pass the engine's validation rules.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the lender service.

        Args:
            db: Async database session
        """
        self.db = db
        self.repo = LenderRepository(db)
        self.offer_repo = OfferRepository(db)
        self.platform = PlatformService(db)

    # ===== Lender Operations =====

    async def register_lender(self, actor: str, data: LenderCreate) -> Result[Lender]:
        """
        Register the calling actor as a lender.

        New lenders start unapproved with a reputation of 100.

        Args:
            actor: Calling principal
            data: Lender details

        Returns:
            Result with the created lender; ALREADY_EXISTS if the actor is
            already registered
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        if await self.repo.get_by_principal(actor):
            return Result.fail(f"Lender {actor} is already registered", ErrorKind.ALREADY_EXISTS)

        lender = await self.repo.create(
            principal=actor,
            name=data.name,
            license_number=data.license_number,
            contact_info=data.contact_info,
            is_approved=False,
            reputation_score=MAX_REPUTATION_SCORE,
            total_loans_issued=0,
            average_rate=0,
        )
        await self.platform.increment("total_lenders")
        await self.db.commit()
        await self.db.refresh(lender)

        logger.info(f"Registered lender {actor} ({data.name})")
        return Result.ok(lender)

    async def get_lender(self, principal: str) -> Result[Lender]:
        """
        Retrieve a lender by principal.

        Returns:
            Result with the lender; NOT_FOUND if unknown
        """
        lender = await self.repo.get_by_principal(principal)
        if lender is None:
            return Result.fail(f"Lender {principal} not found", ErrorKind.NOT_FOUND)
        return Result.ok(lender)

    async def list_lenders(
        self, approved_only: bool = False, skip: int = 0, limit: int = 100
    ) -> List[Lender]:
        """Retrieve lenders, optionally approved ones only."""
        if approved_only:
            return await self.repo.get_approved_lenders(skip=skip, limit=limit)
        return await self.repo.get_all(skip=skip, limit=limit)

    async def approve_lender(self, actor: str, principal: str) -> Result[Lender]:
        """
        Approve a lender so it can publish offers.

        Args:
            actor: Calling principal (must be the platform owner)
            principal: Lender to approve

        Returns:
            Result with the approved lender
        """
        if not self.platform.is_owner(actor):
            return Result.fail("Only the platform owner can approve lenders", ErrorKind.OWNER_ONLY)

        lender = await self.repo.get_by_principal(principal)
        if lender is None:
            return Result.fail(f"Lender {principal} not found", ErrorKind.NOT_FOUND)

        lender.is_approved = True
        await self.db.commit()
        await self.db.refresh(lender)

        logger.info(f"Approved lender {principal}")
        return Result.ok(lender)

    async def set_reputation(
        self, actor: str, principal: str, reputation_score: int
    ) -> Result[Lender]:
        """
        Set a lender's reputation score.

        Args:
            actor: Calling principal (must be the platform owner)
            principal: Lender to update
            reputation_score: New score, 0-100

        Returns:
            Result with the updated lender
        """
        if not self.platform.is_owner(actor):
            return Result.fail("Only the platform owner can set reputation", ErrorKind.OWNER_ONLY)
        if not 0 <= reputation_score <= MAX_REPUTATION_SCORE:
            return Result.fail(
                f"Reputation score must be 0-{MAX_REPUTATION_SCORE}, got {reputation_score}",
                ErrorKind.INVALID_AMOUNT,
            )

        lender = await self.repo.get_by_principal(principal)
        if lender is None:
            return Result.fail(f"Lender {principal} not found", ErrorKind.NOT_FOUND)

        lender.reputation_score = reputation_score
        await self.db.commit()
        await self.db.refresh(lender)
        return Result.ok(lender)

    async def record_completed_loan(
        self, actor: str, principal: str, interest_rate: int
    ) -> Result[Lender]:
        """
        Fold a completed loan into the lender's statistics.

        This is the only path that mutates total_loans_issued and
        average_rate; the average is a running mean rounded half up.

        Args:
            actor: Calling principal (must be the platform owner)
            principal: Lender that issued the loan
            interest_rate: Rate of the completed loan in bps

        Returns:
            Result with the updated lender
        """
        if not self.platform.is_owner(actor):
            return Result.fail(
                "Only the platform owner can record completed loans", ErrorKind.OWNER_ONLY
            )
        if interest_rate <= 0:
            return Result.fail(
                f"Interest rate must be positive, got {interest_rate}", ErrorKind.INVALID_RATE
            )

        lender = await self.repo.get_by_principal(principal)
        if lender is None:
            return Result.fail(f"Lender {principal} not found", ErrorKind.NOT_FOUND)

        issued = lender.total_loans_issued
        lender.average_rate = round_half_up(
            Decimal(lender.average_rate * issued + interest_rate) / Decimal(issued + 1)
        )
        lender.total_loans_issued = issued + 1
        await self.db.commit()
        await self.db.refresh(lender)

        logger.info(
            f"Recorded completed loan for {principal}: "
            f"{lender.total_loans_issued} issued, average rate {lender.average_rate} bps"
        )
        return Result.ok(lender)

    # ===== Offer Operations =====

    async def create_offer(
        self, actor: str, data: MortgageOfferCreate
    ) -> Result[MortgageOffer]:
        """
        Create a mortgage offer for the calling lender.

        Args:
            actor: Calling principal (a registered lender)
            data: Offer fields

        Returns:
            Result with the created offer; the offer counter only moves on
            success
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        lender = await self.repo.get_by_principal(actor)
        if lender is None:
            return Result.fail(f"Lender {actor} not found", ErrorKind.NOT_FOUND)

        config = await self.platform.get_config()
        validation = validate_offer(data, lender.is_approved, config)
        if not validation:
            logger.info(f"Rejected offer from {actor}: {validation.error}")
            return Result.fail(validation.error, validation.error_kind)

        offer = await self.offer_repo.create(
            lender_id=lender.id,
            is_active=True,
            **data.model_dump(),
        )
        await self.platform.increment("total_offers")
        await self.db.commit()
        await self.db.refresh(offer)

        logger.info(
            f"Lender {actor} created offer {offer.id}: "
            f"{offer.interest_rate} bps over {offer.loan_term} months"
        )
        return Result.ok(offer)

    async def get_offer(self, offer_id: UUID) -> Result[MortgageOffer]:
        """
        Retrieve an offer by ID.

        Returns:
            Result with the offer; NOT_FOUND if unknown
        """
        offer = await self.offer_repo.get_by_id(offer_id)
        if offer is None:
            return Result.fail("Offer not found", ErrorKind.NOT_FOUND)
        return Result.ok(offer)

    async def list_offers(
        self, active_only: bool = True, skip: int = 0, limit: int = 100
    ) -> List[MortgageOffer]:
        """Retrieve offers, active ones only by default."""
        if active_only:
            return await self.offer_repo.get_active_offers()
        return await self.offer_repo.get_all(skip=skip, limit=limit)

    async def update_offer_status(
        self, actor: str, offer_id: UUID, is_active: bool
    ) -> Result[MortgageOffer]:
        """
        Activate or deactivate an offer.

        Args:
            actor: Calling principal (must own the offer)
            offer_id: UUID of the offer
            is_active: Desired state

        Returns:
            Result with the updated offer
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        offer = await self.offer_repo.get_by_id(offer_id)
        if offer is None:
            return Result.fail("Offer not found", ErrorKind.NOT_FOUND)

        lender = await self.repo.get_by_principal(actor)
        if lender is None or offer.lender_id != lender.id:
            return Result.fail("Only the offering lender can update this offer", ErrorKind.UNAUTHORIZED)

        offer.is_active = is_active
        await self.db.commit()
        await self.db.refresh(offer)

        logger.info(f"Offer {offer_id} {'activated' if is_active else 'deactivated'} by {actor}")
        return Result.ok(offer)
