"""Translation of domain exceptions into HTTP errors."""

from fastapi import HTTPException, status

from sidak.domain.exceptions import (
    AssetValidationError,
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)


def http_error(exc: Exception) -> HTTPException:
    """Map a domain exception to the matching ``HTTPException``."""
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, PermissionDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(exc, DuplicateEntityError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, AssetValidationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors
        )
    raise exc


DOMAIN_ERRORS = (
    AssetValidationError,
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
