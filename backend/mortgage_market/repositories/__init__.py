from .base import BaseRepository
from .application_repository import ApplicationRepository, BorrowerRepository
from .lender_repository import LenderRepository, OfferRepository
from .match_repository import MatchRepository
from .platform_repository import PlatformRepository

__all__ = [
    "BaseRepository",
    "ApplicationRepository",
    "BorrowerRepository",
    "LenderRepository",
    "OfferRepository",
    "MatchRepository",
    "PlatformRepository",
]
