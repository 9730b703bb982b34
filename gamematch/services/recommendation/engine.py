from typing import Any

from loguru import logger

from gamematch.core.config import settings
from gamematch.services.igdb.service import get_igdb_service
from gamematch.services.recommendation.history import PlayHistoryAggregator
from gamematch.services.recommendation.profile import PreferenceProfileBuilder
from gamematch.services.recommendation.search import ConstraintRelaxationSearch
from gamematch.services.store.redis_store import game_store, player_store, user_store


class RecommendationService:
    """
    Recommends IGDB games to a user from what they already play.

    The whole request is one catalog batch: a single access token is shared
    by the profile lookups and every search round.
    """

    def __init__(
        self,
        catalog,
        aggregator: PlayHistoryAggregator,
        profile_builder: PreferenceProfileBuilder | None = None,
        search: ConstraintRelaxationSearch | None = None,
    ):
        self.catalog = catalog
        self.aggregator = aggregator
        self.profile_builder = profile_builder or PreferenceProfileBuilder()
        self.search = search or ConstraintRelaxationSearch()

    async def recommend_games(self, user_id: str) -> list[dict[str, Any]]:
        """
        Raises:
            UserNotFoundError: the user does not exist; no catalog call is made.
            NoRecommendationError: search and fallback both came back empty.
        """
        played = await self.aggregator.get_played_games(user_id)
        session = self.catalog.session()

        profile = await self.profile_builder.build(session, played)
        logger.info(
            f"[{user_id}] Profile built from {len(played)} games: "
            f"{len(profile.genre_histogram)} genres, {len(profile.platform_ids)} platforms, "
            f"skipped {profile.skipped or 'none'}"
        )

        excluded_ids = [game.catalog_id for game in played if game.catalog_id is not None]
        return await self.search.run(session, profile, excluded_ids)


_recommendation_service: RecommendationService | None = None


def get_recommendation_service() -> RecommendationService:
    global _recommendation_service
    if _recommendation_service is None:
        _recommendation_service = RecommendationService(
            catalog=get_igdb_service(),
            aggregator=PlayHistoryAggregator(user_store, player_store, game_store),
            profile_builder=PreferenceProfileBuilder(max_concurrency=settings.IGDB_MAX_CONCURRENCY),
        )
    return _recommendation_service
