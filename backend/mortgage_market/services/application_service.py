"""Application service for borrower profiles and mortgage applications."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mortgage_market.core.enums import ApplicationStatus
from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.domain.application import Borrower, MortgageApplication
from mortgage_market.models.schemas.application import (
    BorrowerCreate,
    MortgageApplicationCreate,
)
from mortgage_market.repositories.application_repository import (
    ApplicationRepository,
    BorrowerRepository,
)
from mortgage_market.services.engine.validation import (
    resolve_debt_to_income,
    validate_application,
)
from mortgage_market.services.platform_service import PlatformService

logger = logging.getLogger(__name__)


class ApplicationService:
    """
    Application service for borrower-side operations.

    Provides business logic for:
    - Registering borrower profiles
    - Submitting mortgage applications against platform thresholds
    - Reading applications back
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the application service.

        Args:
            db: Async database session
        """
        self.db = db
        self.repo = ApplicationRepository(db)
        self.borrower_repo = BorrowerRepository(db)
        self.platform = PlatformService(db)

    async def register_borrower(self, actor: str, data: BorrowerCreate) -> Result[Borrower]:
        """
        Register the calling actor's borrower profile.

        Returns:
            Result with the profile; ALREADY_EXISTS if one is registered
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        if await self.borrower_repo.get_by_principal(actor):
            return Result.fail(f"Borrower {actor} is already registered", ErrorKind.ALREADY_EXISTS)

        borrower = await self.borrower_repo.create(
            principal=actor,
            first_name=data.first_name,
            last_name=data.last_name,
            applications_count=0,
            verified=False,
        )
        await self.db.commit()
        await self.db.refresh(borrower)

        logger.info(f"Registered borrower {actor}")
        return Result.ok(borrower)

    async def get_borrower(self, principal: str) -> Result[Borrower]:
        """Retrieve a borrower profile by principal."""
        borrower = await self.borrower_repo.get_by_principal(principal)
        if borrower is None:
            return Result.fail(f"Borrower {principal} not found", ErrorKind.NOT_FOUND)
        return Result.ok(borrower)

    async def submit_application(
        self, actor: str, data: MortgageApplicationCreate
    ) -> Result[MortgageApplication]:
        """
        Submit a mortgage application for the calling borrower.

        The application is checked against the platform's current credit
        score and LTV thresholds. Nothing is persisted and no counter moves
        when validation fails.

        Args:
            actor: Calling principal (must have a borrower profile)
            data: Application fields

        Returns:
            Result with the submitted application
        """
        paused = await self.platform.ensure_not_paused()
        if not paused:
            return Result.fail(paused.error, paused.error_kind)

        borrower = await self.borrower_repo.get_by_principal(actor)
        if borrower is None:
            return Result.fail(f"Borrower {actor} not found", ErrorKind.NOT_FOUND)

        config = await self.platform.get_config()
        validation = validate_application(data, config)
        if not validation:
            logger.info(f"Rejected application from {actor}: {validation.error}")
            return Result.fail(validation.error, validation.error_kind)

        application = await self.repo.create(
            borrower_id=borrower.id,
            loan_amount=data.loan_amount,
            property_value=data.property_value,
            down_payment=data.down_payment,
            preferred_term=data.preferred_term,
            credit_score=data.credit_score,
            annual_income=data.annual_income,
            debt_to_income=resolve_debt_to_income(data),
            loan_purpose=data.loan_purpose,
            property_type=data.property_type,
            occupancy_type=data.occupancy_type,
            status=ApplicationStatus.SUBMITTED,
        )
        borrower.applications_count += 1
        await self.platform.increment("total_applications")
        await self.db.commit()
        await self.db.refresh(application)

        logger.info(
            f"Borrower {actor} submitted application {application.id} "
            f"for {application.loan_amount}"
        )
        return Result.ok(application)

    async def get_application(self, application_id: UUID) -> Result[MortgageApplication]:
        """
        Retrieve an application by ID.

        Returns:
            Result with the application; NOT_FOUND if unknown
        """
        application = await self.repo.get_by_id(application_id)
        if application is None:
            return Result.fail("Application not found", ErrorKind.NOT_FOUND)
        return Result.ok(application)

    async def list_borrower_applications(
        self, principal: str
    ) -> Result[List[MortgageApplication]]:
        """Retrieve every application submitted by a borrower."""
        borrower = await self.borrower_repo.get_by_principal(principal)
        if borrower is None:
            return Result.fail(f"Borrower {principal} not found", ErrorKind.NOT_FOUND)
        return Result.ok(await self.repo.get_by_borrower(borrower.id))
