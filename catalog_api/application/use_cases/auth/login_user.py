# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidCredentialsError
from ....core.security import hash_password, verify_password
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserResponse
from .tokens import issue_token

logger = logging.getLogger(__name__)

# Verified against when the email is unknown so both failure paths cost one bcrypt check
_dummy_hash: Optional[str] = None


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("dummy-password-for-timing")
    return _dummy_hash


def _verify_against_dummy(password: str) -> None:
    """Spend one bcrypt check on an unknown email (runs in a worker thread)"""
    verify_password(password, _get_dummy_hash())


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            AuthResponse with the user's public fields and a fresh token
            
        Raises:
            InvalidCredentialsError: Unknown email or wrong password (indistinguishable)
        """
        user = await self.user_repository.find_by_email(request.email)
        
        if user is None:
            await asyncio.to_thread(_verify_against_dummy, request.password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()
        
        password_ok = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not password_ok:
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError()
        
        return AuthResponse(
            message="Login successful",
            user=UserResponse(
                id=user.id or "",
                name=user.name,
                email=user.email,
            ),
            token=issue_token(user),
        )
