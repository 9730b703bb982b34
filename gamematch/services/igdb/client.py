from typing import Any

import httpx

from gamematch.core.base_client import BaseClient
from gamematch.core.exceptions import CatalogUnavailableError
from gamematch.core.settings import IGDBConfig
from gamematch.core.version import __version__
from gamematch.services.igdb.query import CatalogQuery


class IGDBClient(BaseClient):
    """
    Client for the IGDB v4 API.

    Every failure mode (transport, status, body shape) is reported as
    ``CatalogUnavailableError``. The per-call deadline is applied by
    ``CatalogSession`` so that it also covers the token exchange.
    """

    def __init__(self, config: IGDBConfig, transport: httpx.AsyncBaseTransport | None = None):
        headers = {
            "Client-ID": config.client_id,
            "Accept": "application/json",
            "User-Agent": f"gamematch/{__version__}",
        }
        super().__init__(
            base_url=config.catalog_endpoint,
            timeout=config.timeout,
            max_retries=config.max_retries,
            headers=headers,
            transport=transport,
        )
        self.call_deadline = config.call_deadline

    async def query(self, query: CatalogQuery, access_token: str) -> list[dict[str, Any]]:
        headers = {"Authorization": f"Bearer {access_token}", "Content-Type": "text/plain"}
        try:
            response = await self._request("POST", f"/{query.endpoint}", content=query.render(), headers=headers)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailableError(f"IGDB /{query.endpoint} request failed: {e}") from e

        if not isinstance(data, list):
            raise CatalogUnavailableError(f"IGDB /{query.endpoint} returned {type(data).__name__}, expected a list")
        return data
