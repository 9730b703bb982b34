class CatalogUnavailableError(Exception):
    """Raised when a single IGDB call cannot produce a usable response.

    Covers credential exchange failures, transport errors, timeouts,
    non-2xx responses and bodies that are not the expected JSON shape.
    """


class RecommendationError(Exception):
    """Base class for failures surfaced to recommendation callers."""


class UserNotFoundError(RecommendationError):
    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class NoRecommendationError(RecommendationError):
    """Personalised search and the popularity fallback both came back empty."""
