"""Translation of domain errors into HTTP errors.

Every route funnels DomainError subclasses through to_http_exception so the
status code for each failure is decided in one place.
"""

import logfire
from fastapi import HTTPException, status

from board.domain.error import (
    ConflictError,
    DomainError,
    NestingLimitExceededError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.domain.service import JWTService
from board.domain.value import Principal

# Order matters: subclasses before their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NestingLimitExceededError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException a route should raise.

    Args:
        error: The domain error

    Returns:
        HTTPException carrying the mapped status and the error message
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            logfire.warn(
                "Request failed",
                error_type=type(error).__name__,
                status_code=status_code,
                error=str(error),
            )
            return HTTPException(status_code=status_code, detail=str(error))

    logfire.error("Unmapped domain error", error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )


def bad_request(error: ValueError) -> HTTPException:
    """HTTPException for malformed identifiers or payload values."""
    logfire.warn("Malformed request", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def require_principal(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> Principal:
    """Resolve the caller from the auth cookie or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller tried to do, for the error message

    Returns:
        The authenticated principal

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    principal = jwt_service.get_principal_from_token(auth_token)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return principal
