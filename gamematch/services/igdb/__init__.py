from .auth import IGDBAuthService
from .client import IGDBClient
from .query import CatalogQuery
from .service import IGDBService, get_igdb_service
from .session import CatalogSession

__all__ = [
    "CatalogQuery",
    "CatalogSession",
    "IGDBAuthService",
    "IGDBClient",
    "IGDBService",
    "get_igdb_service",
]
