"""Domain models for the application."""

from mortgage_market.models.domain.application import Borrower, MortgageApplication
from mortgage_market.models.domain.lender import Lender, MortgageOffer
from mortgage_market.models.domain.match import ApplicationMatch, PlatformStats

__all__ = [
    "Lender",
    "MortgageOffer",
    "Borrower",
    "MortgageApplication",
    "ApplicationMatch",
    "PlatformStats",
]
