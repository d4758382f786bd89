"""API v1 router configuration."""

from fastapi import APIRouter

from mortgage_market.api.v1.endpoints import (
    applications,
    borrowers,
    health,
    lenders,
    offers,
    platform,
)

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    lenders.router,
    prefix="/lenders",
    tags=["lenders"],
)

api_router.include_router(
    offers.router,
    prefix="/offers",
    tags=["offers"],
)

api_router.include_router(
    borrowers.router,
    prefix="/borrowers",
    tags=["borrowers"],
)

api_router.include_router(
    applications.router,
    prefix="/applications",
    tags=["applications"],
)

api_router.include_router(
    platform.router,
    prefix="/platform",
    tags=["platform"],
)
