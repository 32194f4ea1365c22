"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import HTTPException, status

from forum.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    LockedResourceError,
    NotFoundError,
    PermissionDeniedError,
    StoreError,
    ValidationError,
)

# Most specific classes first
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (LockedResourceError, status.HTTP_423_LOCKED),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error raised while performing ``action``.

    Args:
        error: The domain error
        action: Short description used in the log event

    Returns:
        HTTPException carrying the matching status code
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            break
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    if isinstance(error, StoreError):
        logfire.error(f"{action} failed in store", error=str(error))
        # Store details stay in the logs
        return HTTPException(status_code=status_code, detail="Storage unavailable")

    logfire.warn(f"{action} rejected", error=str(error), status_code=status_code)
    return HTTPException(status_code=status_code, detail=str(error))
