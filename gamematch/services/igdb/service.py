from typing import Any

import httpx
from async_lru import alru_cache
from loguru import logger

from gamematch.core.constants import BROWSE_MIN_RATING_COUNT, GAME_INFO_FIELDS, SEARCH_FIELDS, SEARCH_LIMIT
from gamematch.core.settings import IGDBConfig, get_igdb_config
from gamematch.services.igdb.auth import IGDBAuthService
from gamematch.services.igdb.client import IGDBClient
from gamematch.services.igdb.query import CatalogQuery, at_least, contains_any, equals, not_an_edition
from gamematch.services.igdb.session import CatalogSession


class IGDBService:
    """
    Service for interacting with the IGDB game catalog.
    """

    def __init__(self, config: IGDBConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.client = IGDBClient(config, transport=transport)
        self.auth = IGDBAuthService(config, transport=transport)

    def session(self) -> CatalogSession:
        """Start a batch of calls that share one access token."""
        return CatalogSession(self.client, self.auth)

    async def close(self):
        await self.client.close()
        await self.auth.close()

    async def fetch_game_fields(self, query: CatalogQuery) -> list[dict[str, Any]]:
        """Run a single query in its own batch."""
        return await self.session().fetch(query)

    @alru_cache(maxsize=2000, ttl=3600)
    async def get_game_info(self, igdb_id: int) -> list[dict[str, Any]]:
        """Full metadata for one game, as the list IGDB returns."""
        query = CatalogQuery(fields=list(GAME_INFO_FIELDS)).filter(equals("id", igdb_id))
        return await self.fetch_game_fields(query)

    async def search_games(
        self,
        term: str,
        genre_ids: list[int] | None = None,
        platform_ids: list[int] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Search base games by title.

        A blank term browses well-reviewed games instead of searching.
        """
        term = term.strip()
        query = CatalogQuery(fields=list(SEARCH_FIELDS), limit=SEARCH_LIMIT).filter(not_an_edition())
        if term:
            query.search = term
        else:
            query.filter(at_least("rating_count", BROWSE_MIN_RATING_COUNT))
        if genre_ids:
            query.filter(contains_any("genres", genre_ids))
        if platform_ids:
            query.filter(contains_any("platforms", platform_ids))

        logger.debug(f"[IGDB] Searching games: {query.render()}")
        return await self.fetch_game_fields(query)


_igdb_service: IGDBService | None = None


def get_igdb_service() -> IGDBService:
    global _igdb_service
    if _igdb_service is None:
        _igdb_service = IGDBService(get_igdb_config())
    return _igdb_service
