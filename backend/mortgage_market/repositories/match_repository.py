"""Repository for application matches."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.models.domain.match import ApplicationMatch
from mortgage_market.repositories.base import BaseRepository


class MatchRepository(BaseRepository[ApplicationMatch]):
    """
    Repository for application matches.

    One match exists per (application, offer) pair; the table's unique
    constraint backs up the existence checks done here.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(ApplicationMatch, db)

    async def get_by_pair(
        self, application_id: UUID, offer_id: UUID
    ) -> Optional[ApplicationMatch]:
        """
        Retrieve the match for an application/offer pair.

        Args:
            application_id: UUID of the application
            offer_id: UUID of the offer

        Returns:
            The match if one exists, None otherwise
        """
        return await self.find_one_by(application_id=application_id, offer_id=offer_id)

    async def get_by_application(self, application_id: UUID) -> List[ApplicationMatch]:
        """Retrieve every match for an application, oldest first."""
        return await self.find_by(application_id=application_id)
