"""Translation of domain errors into HTTP errors for the v1 controllers."""

# Standard library imports
from typing import Dict, Type

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import (
    CatalogError,
    ValidationError,
    InvalidIdError,
    DuplicateEmailError,
    InvalidCredentialsError,
    AuthenticationError,
    NotFoundError,
    ForbiddenError,
)


BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

STATUS_BY_ERROR: Dict[Type[CatalogError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidIdError: status.HTTP_400_BAD_REQUEST,
    DuplicateEmailError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def to_http_exception(exception: CatalogError) -> HTTPException:
    """
    Map a domain error to an HTTPException carrying its message.
    
    The most specific registered base class wins; unmapped errors are 500.
    """
    for error_type in type(exception).__mro__:
        status_code = STATUS_BY_ERROR.get(error_type)
        if status_code is not None:
            headers = BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
            return HTTPException(status_code=status_code, detail=exception.message, headers=headers)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=exception.message,
    )
