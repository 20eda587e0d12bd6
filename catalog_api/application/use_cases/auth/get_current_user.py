# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidTokenError, UserNotFoundError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the caller's identity from a bearer token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            UserResponse with user information
            
        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the signature or payload is invalid
            UserNotFoundError: If the token's subject no longer exists
        """
        payload = decode_jwt_token(token)
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise InvalidTokenError()
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        return UserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
        )
