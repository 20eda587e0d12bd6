from .user_repository import UserRepository
from .product_repository import ProductRepository

__all__ = ["UserRepository", "ProductRepository"]
