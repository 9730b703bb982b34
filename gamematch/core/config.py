from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8080
    APP_ENV: Literal["development", "production"] = "production"
    LOG_LEVEL: str = "INFO"

    # IGDB is authenticated through Twitch client credentials
    IGDB_CLIENT_ID: str | None = None
    IGDB_CLIENT_SECRET: str | None = None
    IGDB_TOKEN_URL: str = "https://id.twitch.tv/oauth2/token"
    IGDB_API_URL: str = "https://api.igdb.com/v4"
    IGDB_TIMEOUT_SECONDS: float = 10.0
    # Hard upper bound for one catalog call, retries included
    IGDB_CALL_DEADLINE_SECONDS: float = 20.0
    IGDB_MAX_RETRIES: int = 2
    # IGDB allows 4 requests per second; keep profile fan-out at or below that
    IGDB_MAX_CONCURRENCY: int = 4

    REDIS_URL: str = "redis://redis:6379/0"
    REDIS_MAX_CONNECTIONS: int = 20


settings = Settings()
