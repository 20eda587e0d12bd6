# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import UserResponse, CurrentUserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import DuplicateEmailError, InvalidCredentialsError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        AuthResponse with the created user and a bearer token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except DuplicateEmailError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        AuthResponse with the user and a bearer token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    try:
        return await login_use_case.execute(request)
    except InvalidCredentialsError as exception:
        raise to_http_exception(exception)


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> CurrentUserResponse:
    """
    Get current authenticated user information
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        CurrentUserResponse with user information
    """
    return CurrentUserResponse(user=current_user)
