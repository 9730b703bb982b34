import re
from typing import Any

from pydantic import BaseModel, field_validator

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class PlayerRecord(BaseModel):
    """A user plays a game."""

    user_id: str
    game_id: str


class GameRecord(BaseModel):
    id: str
    name: str | None = None
    catalog_id: int | None = None

    @field_validator("catalog_id", mode="before")
    @classmethod
    def _parse_catalog_id(cls, value: Any) -> int | None:
        # Leading integer of the stored value, so "1942abc" and 1942.9 give 1942.
        # -1, null and values without a leading integer mean "not linked".
        if value is None or isinstance(value, bool):
            return None
        match = _LEADING_INT.match(str(value))
        if match is None:
            return None
        parsed = int(match.group(1))
        return parsed if parsed >= 0 else None
