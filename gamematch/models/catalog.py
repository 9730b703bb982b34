from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AccessToken(BaseModel):
    """Twitch client-credentials grant response."""

    access_token: str
    expires_in: int | None = None
    token_type: str = "bearer"


class CatalogGame(BaseModel):
    """
    The subset of an IGDB game record used for profiling.

    IGDB omits empty array fields entirely, so missing or null genre and
    platform lists decode to empty lists.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str | None = None
    genres: list[int] = Field(default_factory=list)
    platforms: list[int] = Field(default_factory=list)

    @field_validator("genres", "platforms", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value
