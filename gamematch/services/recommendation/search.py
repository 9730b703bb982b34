from typing import Any

from loguru import logger

from gamematch.core.constants import (
    MATCH_MIN_RATING,
    MATCH_MIN_RATING_COUNT,
    MAX_SEARCH_ITERATIONS,
    POPULAR_MIN_RATING,
    POPULAR_MIN_RATING_COUNT,
    RECOMMENDATION_FIELDS,
    RECOMMENDATION_LIMIT,
)
from gamematch.core.exceptions import CatalogUnavailableError, NoRecommendationError
from gamematch.models.profile import PreferenceProfile, SearchConstraint
from gamematch.services.igdb.query import CatalogQuery, contains_any, excludes, greater_than, not_an_edition


class ConstraintRelaxationSearch:
    """
    Finds well-rated games matching a user's genres and platforms.

    Each round queries IGDB with the genres that still have votes. The first
    non-empty answer wins. An empty or failed round takes one vote from every
    genre, so the user's strongest genres are the last to go. When no genres
    are left the search stops and a global popularity query is used instead.

    The platform set is never relaxed. A profile with platforms but no genres
    gets a single platform-only round.
    """

    def __init__(self, max_iterations: int = MAX_SEARCH_ITERATIONS, limit: int = RECOMMENDATION_LIMIT):
        self.max_iterations = max_iterations
        self.limit = limit

    async def run(self, session, profile: PreferenceProfile, excluded_ids: list[int]) -> list[dict[str, Any]]:
        if profile.is_empty():
            logger.info("Profile has no genres or platforms, using popular games")
            return await self.fallback(session)

        platform_ids = sorted(profile.platform_ids)
        active_genres = profile.active_genre_ids()
        searching = True
        iteration = 0

        while searching and iteration < self.max_iterations:
            constraint = SearchConstraint(
                active_genre_ids=active_genres,
                platform_ids=platform_ids,
                excluded_catalog_ids=excluded_ids,
            )
            results = await self._try_fetch(session, self.build_search_query(constraint))
            if results:
                logger.info(f"Matched {len(results)} games after {iteration + 1} search round(s)")
                return results

            active_genres = profile.relax_genres()
            searching = bool(active_genres)
            iteration += 1
            logger.debug(f"Search round {iteration} empty, relaxed to genres {active_genres}")

        logger.info(f"Personalised search exhausted after {iteration} round(s), using popular games")
        return await self.fallback(session)

    async def fallback(self, session) -> list[dict[str, Any]]:
        results = await self._try_fetch(session, self.build_fallback_query())
        if not results:
            logger.warning("Popular games fallback returned nothing")
            raise NoRecommendationError("No recommendation available")
        return results

    def build_search_query(self, constraint: SearchConstraint) -> CatalogQuery:
        query = CatalogQuery(fields=list(RECOMMENDATION_FIELDS), limit=self.limit)
        if constraint.active_genre_ids:
            query.filter(contains_any("genres", constraint.active_genre_ids))
        query.filter(
            greater_than("rating", MATCH_MIN_RATING),
            greater_than("rating_count", MATCH_MIN_RATING_COUNT),
        )
        if constraint.excluded_catalog_ids:
            query.filter(excludes("id", constraint.excluded_catalog_ids))
        if constraint.platform_ids:
            query.filter(contains_any("platforms", constraint.platform_ids))
        return query.filter(not_an_edition())

    def build_fallback_query(self) -> CatalogQuery:
        return CatalogQuery(fields=list(RECOMMENDATION_FIELDS), limit=self.limit).filter(
            greater_than("rating", POPULAR_MIN_RATING),
            greater_than("rating_count", POPULAR_MIN_RATING_COUNT),
            not_an_edition(),
        )

    @staticmethod
    async def _try_fetch(session, query: CatalogQuery) -> list[dict[str, Any]]:
        # A failed call counts as an empty result
        try:
            return await session.fetch(query)
        except CatalogUnavailableError as e:
            logger.warning(f"Catalog query failed, treating as empty: {e}")
            return []
