"""
Core constants used across the application. Keep these simple and documented.
"""

# Redis document keys
USER_KEY: str = "gamematch:user:{user_id}"
USER_PLAYS_KEY: str = "gamematch:players:{user_id}"
GAME_PLAYERS_KEY: str = "gamematch:game_players:{game_id}"
GAME_KEY: str = "gamematch:game:{game_id}"

# Recommendation search
MAX_SEARCH_ITERATIONS: int = 1000
MATCH_MIN_RATING: int = 60
MATCH_MIN_RATING_COUNT: int = 10
POPULAR_MIN_RATING: int = 75
POPULAR_MIN_RATING_COUNT: int = 100
RECOMMENDATION_LIMIT: int = 100
RECOMMENDATION_FIELDS: tuple[str, ...] = ("name",)

# Title search
SEARCH_LIMIT: int = 36
BROWSE_MIN_RATING_COUNT: int = 250
SEARCH_FIELDS: tuple[str, ...] = (
    "name",
    "id",
    "release_dates.y",
    "cover.image_id",
    "platforms.name",
    "screenshots.image_id",
    "artworks.image_id",
)
GAME_INFO_FIELDS: tuple[str, ...] = (
    "name",
    "id",
    "release_dates.y",
    "cover.image_id",
    "summary",
    "genres.name",
    "artworks.image_id",
    "screenshots.image_id",
    "platforms.name",
    "platforms.platform_family.name",
    "websites.category",
    "websites.url",
)
PROFILE_FIELDS: tuple[str, ...] = ("id", "genres", "platforms")
