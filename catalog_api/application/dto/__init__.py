from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, CurrentUserResponse
from .product_dto import (
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductResponse,
    PageInfoResponse,
    ProductListResponse,
    ProductMessageResponse,
    ProductDetailResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "CurrentUserResponse",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductResponse",
    "PageInfoResponse",
    "ProductListResponse",
    "ProductMessageResponse",
    "ProductDetailResponse",
]
