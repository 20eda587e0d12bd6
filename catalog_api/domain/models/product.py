# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500


@dataclass
class Product:
    """
    Pure domain model for Product entity - no external dependencies.
    
    owner_id is set once at creation and never rewritten by updates.
    """
    id: Optional[str]
    owner_id: str
    title: str
    image: str
    description: str
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_id:
            raise ValueError("Owner user ID is required")
        if not self.title or not (TITLE_MIN_LENGTH <= len(self.title.strip()) <= TITLE_MAX_LENGTH):
            raise ValueError(
                f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
            )
        if not self.image or len(self.image.strip()) < 1:
            raise ValueError("Image URL is required")
        if not self.description or not (
            DESCRIPTION_MIN_LENGTH <= len(self.description.strip()) <= DESCRIPTION_MAX_LENGTH
        ):
            raise ValueError(
                f"Description must be between {DESCRIPTION_MIN_LENGTH} and "
                f"{DESCRIPTION_MAX_LENGTH} characters"
            )
        if self.price is None or self.price < 0:
            raise ValueError("Price cannot be negative")
    
    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.owner_id == user_id
