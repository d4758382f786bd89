"""Repositories for borrowers and mortgage applications."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.models.domain.application import Borrower, MortgageApplication
from mortgage_market.repositories.base import BaseRepository


class BorrowerRepository(BaseRepository[Borrower]):
    """Repository for borrower profiles keyed by actor principal."""

    def __init__(self, db: AsyncSession):
        super().__init__(Borrower, db)

    async def get_by_principal(self, principal: str) -> Optional[Borrower]:
        """
        Retrieve a borrower profile by principal.

        Args:
            principal: Actor identity

        Returns:
            Borrower if found, None otherwise
        """
        return await self.find_one_by(principal=principal)


class ApplicationRepository(BaseRepository[MortgageApplication]):
    """Repository for mortgage applications."""

    def __init__(self, db: AsyncSession):
        super().__init__(MortgageApplication, db)

    async def get_by_borrower(self, borrower_id: UUID) -> List[MortgageApplication]:
        """Retrieve a borrower's applications, oldest first."""
        return await self.find_by(borrower_id=borrower_id)
