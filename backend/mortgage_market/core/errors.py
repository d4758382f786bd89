"""Error taxonomy shared by the engine, services and API.

Every failure surfaced to a caller carries one of these kinds. The numeric
codes are stable and must not be renumbered; clients depend on them.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Recoverable failure kinds."""

    OWNER_ONLY = "owner-only"
    NOT_FOUND = "not-found"
    UNAUTHORIZED = "unauthorized"
    INVALID_AMOUNT = "invalid-amount"
    INVALID_RATE = "invalid-rate"
    LENDER_NOT_APPROVED = "lender-not-approved"
    ALREADY_EXISTS = "already-exists"
    PLATFORM_PAUSED = "platform-paused"
    INVALID_CREDIT_SCORE = "invalid-credit-score"
    INSUFFICIENT_INCOME = "insufficient-income"
    INVALID_LOAN_TERM = "invalid-loan-term"

    @property
    def code(self) -> int:
        """Stable numeric code for client compatibility."""
        return ERROR_CODES[self]


ERROR_CODES: dict[ErrorKind, int] = {
    ErrorKind.OWNER_ONLY: 100,
    ErrorKind.NOT_FOUND: 101,
    ErrorKind.UNAUTHORIZED: 102,
    ErrorKind.INVALID_AMOUNT: 103,
    ErrorKind.INVALID_RATE: 104,
    ErrorKind.LENDER_NOT_APPROVED: 105,
    ErrorKind.ALREADY_EXISTS: 106,
    ErrorKind.PLATFORM_PAUSED: 107,
    ErrorKind.INVALID_CREDIT_SCORE: 108,
    ErrorKind.INSUFFICIENT_INCOME: 109,
    ErrorKind.INVALID_LOAN_TERM: 110,
}
