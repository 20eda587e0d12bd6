from dataclasses import dataclass
from typing import Optional


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
# bcrypt only accepts the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.
    
    email is stored trimmed and lower-cased; it is the login identity.
    """
    id: Optional[str]
    name: str
    email: str
    hashed_password: str

    def __post_init__(self):
        """Business validations"""
        if not self.name or not (NAME_MIN_LENGTH <= len(self.name.strip()) <= NAME_MAX_LENGTH):
            raise ValueError(
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
            )
        if not self.email or "@" not in self.email or self.email != self.email.strip().lower():
            raise ValueError("Email must be a normalized address")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
