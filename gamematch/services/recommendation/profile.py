import asyncio
from collections import Counter
from enum import Enum

from loguru import logger
from pydantic import ValidationError

from gamematch.core.constants import PROFILE_FIELDS
from gamematch.core.exceptions import CatalogUnavailableError
from gamematch.models.catalog import CatalogGame
from gamematch.models.profile import PlayedGame, PreferenceProfile
from gamematch.services.igdb.query import CatalogQuery, equals


class SkipReason(str, Enum):
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    NOT_IN_CATALOG = "not_in_catalog"
    MALFORMED = "malformed"


class PreferenceProfileBuilder:
    """
    Builds a genre histogram and platform set from the games a user plays.

    Lookups are best effort: a game whose catalog record cannot be read is
    skipped with a reason and the rest of the profile is still built.
    """

    def __init__(self, max_concurrency: int = 4):
        self.max_concurrency = max(1, max_concurrency)

    async def build(self, session, played_games: list[PlayedGame]) -> PreferenceProfile:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def lookup(catalog_id: int) -> CatalogGame | SkipReason:
            async with semaphore:
                return await self._lookup(session, catalog_id)

        catalog_ids = [game.catalog_id for game in played_games if game.catalog_id is not None]
        results = await asyncio.gather(*(lookup(catalog_id) for catalog_id in catalog_ids))

        profile = PreferenceProfile()
        skipped: Counter[str] = Counter()
        for catalog_id, result in zip(catalog_ids, results):
            if isinstance(result, SkipReason):
                logger.debug(f"Skipping game {catalog_id} while profiling: {result.value}")
                skipped[result.value] += 1
                continue
            self._accumulate(profile, result)

        profile.skipped = dict(skipped)
        return profile

    async def _lookup(self, session, catalog_id: int) -> CatalogGame | SkipReason:
        query = CatalogQuery(fields=list(PROFILE_FIELDS)).filter(equals("id", catalog_id))
        try:
            records = await session.fetch(query)
        except CatalogUnavailableError as e:
            logger.debug(f"Catalog lookup for game {catalog_id} failed: {e}")
            return SkipReason.CATALOG_UNAVAILABLE

        if not records:
            return SkipReason.NOT_IN_CATALOG
        try:
            return CatalogGame.model_validate(records[0])
        except ValidationError:
            return SkipReason.MALFORMED

    @staticmethod
    def _accumulate(profile: PreferenceProfile, game: CatalogGame) -> None:
        # A genre listed twice on one game counts twice
        for genre in game.genres:
            profile.genre_histogram[genre] = profile.genre_histogram.get(genre, 0) + 1
        profile.platform_ids.update(game.platforms)
