from .session import ClientSession, SessionEvent
from .api_client import CatalogApiClient, CatalogApiError

__all__ = [
    "ClientSession",
    "SessionEvent",
    "CatalogApiClient",
    "CatalogApiError",
]
