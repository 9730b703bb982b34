import httpx
from loguru import logger

from gamematch.core.base_client import BaseClient
from gamematch.core.exceptions import CatalogUnavailableError
from gamematch.core.security import redact_token
from gamematch.core.settings import IGDBConfig
from gamematch.models.catalog import AccessToken


class IGDBAuthService:
    """
    Exchanges the IGDB client credentials for a bearer token.
    """

    def __init__(self, config: IGDBConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.client = BaseClient(timeout=config.timeout, max_retries=config.max_retries, transport=transport)

    async def get_access_token(self) -> str:
        if not self.config.client_id or not self.config.client_secret:
            raise CatalogUnavailableError("IGDB client credentials are not configured")

        form = {
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "grant_type": "client_credentials",
        }
        try:
            data = await self.client.post(self.config.token_endpoint, data=form)
            token = AccessToken.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"[IGDB] Token exchange failed for client {redact_token(self.config.client_id)}: {e}")
            raise CatalogUnavailableError("Could not obtain an IGDB access token") from e

        logger.debug(f"[IGDB] Obtained access token {redact_token(token.access_token)}")
        return token.access_token

    async def close(self):
        await self.client.close()
