# Local application imports
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....core.security import create_jwt_token


def issue_token(user: User) -> str:
    """Issue a bearer token whose subject is the user's ID"""
    return create_jwt_token({
        "sub": user.id or "",  # JWT standard claim (subject)
        UserFields.EMAIL: user.email,
    })
