"""Mapping of failed service results onto HTTP errors."""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from mortgage_market.core.errors import ErrorKind
from mortgage_market.core.result import Result
from mortgage_market.models.schemas.match import ErrorResponse

HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.OWNER_ONLY: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_RATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.LENDER_NOT_APPROVED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.PLATFORM_PAUSED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INVALID_CREDIT_SCORE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INSUFFICIENT_INCOME: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_LOAN_TERM: status.HTTP_400_BAD_REQUEST,
}


class ServiceError(HTTPException):
    """HTTPException carrying the error kind of a failed operation."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(status_code=HTTP_STATUS[kind], detail=message)
        self.kind = kind
        self.message = message


def unwrap_or_raise(result: Result):
    """
    Return the value of a successful result.

    Raises:
        ServiceError: If the result failed
    """
    if not result:
        raise ServiceError(result.error_kind, result.error or "")
    return result.value


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a ServiceError as {"code", "error", "message"}."""
    body = ErrorResponse(code=exc.kind.code, error=exc.kind.value, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())
