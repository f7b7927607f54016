"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from holding.domain.error import (
    AlreadyAcceptedError,
    AuthenticationError,
    ConflictError,
    DomainError,
    ExpiredError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

# Checked in order; first match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExpiredError, status.HTTP_410_GONE),
    (AlreadyAcceptedError, status.HTTP_409_CONFLICT),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
]


def status_code_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def _handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_code_for(exc)
    logfire.info(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=code,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers that turn escaped exceptions into JSON responses."""
    app.add_exception_handler(DomainError, _handle_domain_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
