from pydantic import BaseModel, Field


class PlayedGame(BaseModel):
    internal_id: str
    catalog_id: int | None = None


class PreferenceProfile(BaseModel):
    """
    Genre histogram and platform coverage of the games a user plays.

    The histogram is the only part mutated after building: each failed
    search round removes one vote from every genre. Genres that reach zero
    stay in the map but drop out of the active list.
    """

    genre_histogram: dict[int, int] = Field(default_factory=dict)
    platform_ids: set[int] = Field(default_factory=set)
    # Number of played games that contributed nothing, keyed by skip reason
    skipped: dict[str, int] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.genre_histogram and not self.platform_ids

    def active_genre_ids(self) -> list[int]:
        """Genres with at least one vote left, in histogram order."""
        return [genre for genre, count in self.genre_histogram.items() if count > 0]

    def relax_genres(self) -> list[int]:
        """Take one vote from every genre and return the new active list."""
        for genre, count in self.genre_histogram.items():
            self.genre_histogram[genre] = max(count - 1, 0)
        return self.active_genre_ids()


class SearchConstraint(BaseModel):
    active_genre_ids: list[int] = Field(default_factory=list)
    platform_ids: list[int] = Field(default_factory=list)
    excluded_catalog_ids: list[int] = Field(default_factory=list)
