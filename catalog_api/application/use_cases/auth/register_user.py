# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserResponse
from .tokens import issue_token

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with name, normalized email and password
            
        Returns:
            AuthResponse with the created user's public fields and a token
            
        Raises:
            DuplicateEmailError: If a user with this email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEmailError()
        
        # bcrypt is CPU bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            hashed_password=hashed_password,
        )
        
        # The unique index still rejects a concurrent duplicate here
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")
        
        return AuthResponse(
            message="User registered successfully",
            user=UserResponse(
                id=saved_user.id or "",
                name=saved_user.name,
                email=saved_user.email,
            ),
            token=issue_token(saved_user),
        )
