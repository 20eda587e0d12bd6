# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import AuthenticationError, MissingTokenError
from ...di.container import get_container
from .errors import to_http_exception

logger = logging.getLogger(__name__)

# auto_error=False: a missing header or a non-Bearer scheme yields None
# instead of FastAPI's default error, so both map to our own 401 below.
security_scheme = HTTPBearer(auto_error=False)


async def _resolve_user(credentials: Optional[HTTPAuthorizationCredentials]) -> UserResponse:
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency that requires an authenticated caller
    
    Args:
        credentials: HTTP Bearer token credentials, if any
        
    Returns:
        UserResponse with user information
        
    Raises:
        HTTPException: 401 for a missing header, wrong scheme, empty,
            invalid or expired token, or a token whose user is gone
    """
    try:
        return await _resolve_user(credentials)
    except AuthenticationError as exception:
        raise to_http_exception(exception)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[UserResponse]:
    """
    FastAPI dependency that identifies the caller when possible
    
    Any failure to resolve the token leaves the request anonymous.
    
    Returns:
        UserResponse, or None for anonymous callers
    """
    if credentials is None:
        return None
    try:
        return await _resolve_user(credentials)
    except AuthenticationError:
        return None
    except Exception as e:
        logger.warning(f"Optional authentication failed, continuing anonymously: {e}")
        return None
