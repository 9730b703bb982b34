from pydantic import BaseModel, Field

from gamematch.core.config import settings


class IGDBConfig(BaseModel):
    """Credentials and endpoints handed to the IGDB client at construction."""

    client_id: str
    client_secret: str
    token_endpoint: str = "https://id.twitch.tv/oauth2/token"
    catalog_endpoint: str = "https://api.igdb.com/v4"
    timeout: float = Field(default=10.0, description="Transport timeout for a single HTTP attempt")
    call_deadline: float = Field(default=20.0, description="Deadline for one logical catalog call")
    max_retries: int = 2


def get_igdb_config() -> IGDBConfig:
    return IGDBConfig(
        client_id=settings.IGDB_CLIENT_ID or "",
        client_secret=settings.IGDB_CLIENT_SECRET or "",
        token_endpoint=settings.IGDB_TOKEN_URL,
        catalog_endpoint=settings.IGDB_API_URL,
        timeout=settings.IGDB_TIMEOUT_SECONDS,
        call_deadline=settings.IGDB_CALL_DEADLINE_SECONDS,
        max_retries=settings.IGDB_MAX_RETRIES,
    )
