"""Repositories for lenders and their mortgage offers."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.models.domain.lender import Lender, MortgageOffer
from mortgage_market.repositories.base import BaseRepository


class LenderRepository(BaseRepository[Lender]):
    """Repository for lender records keyed by actor principal."""

    def __init__(self, db: AsyncSession):
        super().__init__(Lender, db)

    async def get_by_principal(self, principal: str) -> Optional[Lender]:
        """
        Retrieve a lender by the principal that registered it.

        Args:
            principal: Actor identity

        Returns:
            Lender if found, None otherwise
        """
        return await self.find_one_by(principal=principal)

    async def get_approved_lenders(self, skip: int = 0, limit: int = 100) -> List[Lender]:
        """Retrieve one page of approved lenders, oldest first."""
        stmt = (
            select(Lender)
            .where(Lender.is_approved.is_(True))
            .order_by(Lender.created_at)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class OfferRepository(BaseRepository[MortgageOffer]):
    """Repository for mortgage offers."""

    def __init__(self, db: AsyncSession):
        super().__init__(MortgageOffer, db)

    async def get_by_lender(self, lender_id: UUID) -> List[MortgageOffer]:
        """
        Retrieve every offer published by a lender.

        Args:
            lender_id: UUID of the lender

        Returns:
            Offers ordered by creation time
        """
        return await self.find_by(lender_id=lender_id)

    async def get_active_offers(self) -> List[MortgageOffer]:
        """
        Retrieve offers flagged active.

        Expiry is not filtered here; the eligibility gate decides it against
        the evaluation time.
        """
        stmt = (
            select(MortgageOffer)
            .where(MortgageOffer.is_active.is_(True))
            .order_by(MortgageOffer.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
