from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr


class CurrentUserResponse(BaseModel):
    """DTO for GET /auth/me"""
    message: str = "User retrieved successfully"
    user: UserResponse
