from .mongo_connection import (
    get_database,
    get_user_collection,
    get_product_collection,
    ensure_indexes,
    ping_database,
    close_database,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_product_collection",
    "ensure_indexes",
    "ping_database",
    "close_database",
    "MongoUserRepository",
    "MongoProductRepository",
]
