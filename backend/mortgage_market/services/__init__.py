from .application_service import ApplicationService
from .lender_service import LenderService
from .matching_service import Eligibility, MatchingRun, MatchingService
from .platform_service import PlatformService

__all__ = [
    "ApplicationService",
    "Eligibility",
    "LenderService",
    "MatchingRun",
    "MatchingService",
    "PlatformService",
]
