import asyncio
from typing import Any

from gamematch.core.exceptions import CatalogUnavailableError
from gamematch.services.igdb.auth import IGDBAuthService
from gamematch.services.igdb.client import IGDBClient
from gamematch.services.igdb.query import CatalogQuery


class CatalogSession:
    """
    A batch of IGDB calls sharing one access token.

    The token is requested lazily by the first call. If the exchange fails,
    only that call fails and the next one tries again. Each call, token
    exchange included, must finish within the client's call deadline.
    """

    def __init__(self, client: IGDBClient, auth: IGDBAuthService):
        self.client = client
        self.auth = auth
        self._access_token: str | None = None
        self._lock = asyncio.Lock()

    async def _get_access_token(self) -> str:
        async with self._lock:
            if self._access_token is None:
                self._access_token = await self.auth.get_access_token()
            return self._access_token

    async def _fetch(self, query: CatalogQuery) -> list[dict[str, Any]]:
        access_token = await self._get_access_token()
        return await self.client.query(query, access_token)

    async def fetch(self, query: CatalogQuery) -> list[dict[str, Any]]:
        deadline = self.client.call_deadline
        try:
            return await asyncio.wait_for(self._fetch(query), timeout=deadline)
        except asyncio.TimeoutError as e:
            raise CatalogUnavailableError(f"IGDB /{query.endpoint} call exceeded {deadline}s") from e
