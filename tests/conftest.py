"""
Shared fixtures: in-memory stores and a scripted IGDB catalog.
"""
from typing import Any

import pytest

from gamematch.core.constants import POPULAR_MIN_RATING, PROFILE_FIELDS
from gamematch.core.settings import IGDBConfig
from gamematch.models.store import GameRecord, PlayerRecord
from gamematch.services.igdb.query import CatalogQuery, greater_than
from gamematch.services.recommendation.engine import RecommendationService
from gamematch.services.recommendation.history import PlayHistoryAggregator
from gamematch.services.recommendation.profile import PreferenceProfileBuilder
from gamematch.services.recommendation.search import ConstraintRelaxationSearch


class MemoryUserStore:
    def __init__(self, user_ids):
        self.user_ids = set(user_ids)

    async def exists(self, user_id: str) -> bool:
        return user_id in self.user_ids


class MemoryPlayerStore:
    def __init__(self, plays: dict[str, list[str]]):
        self.plays = plays
        self.calls = 0

    async def list_by_user(self, user_id: str) -> list[PlayerRecord]:
        self.calls += 1
        return [PlayerRecord(user_id=user_id, game_id=g) for g in self.plays.get(user_id, [])]

    async def list_by_game(self, game_id: str) -> list[PlayerRecord]:
        return [
            PlayerRecord(user_id=user_id, game_id=game_id)
            for user_id, game_ids in self.plays.items()
            if game_id in game_ids
        ]


class MemoryGameStore:
    def __init__(self, igdb_ids: dict[str, Any]):
        self.igdb_ids = igdb_ids

    async def get(self, game_id: str) -> GameRecord | None:
        if game_id not in self.igdb_ids:
            return None
        return GameRecord(id=game_id, catalog_id=self.igdb_ids[game_id])


class ScriptedCatalog:
    """
    Stands in for IGDBService.

    ``games`` maps an IGDB id to the record returned by a profile lookup (a
    dict, a raw list, or an exception to raise). ``search_responses`` are
    consumed one per search round; once exhausted every round is empty.
    """

    def __init__(self, games=None, search_responses=None, fallback=None):
        self.games = games or {}
        self.search_responses = list(search_responses or [])
        self.fallback = fallback if fallback is not None else []
        self.queries: list[CatalogQuery] = []
        self.sessions = 0

    def session(self):
        self.sessions += 1
        return self

    async def fetch(self, query: CatalogQuery) -> list[dict[str, Any]]:
        self.queries.append(query)
        kind = self.kind_of(query)
        if kind == "profile":
            catalog_id = int(query.where[0].split("=")[1])
            response = self.games.get(catalog_id, [])
            if isinstance(response, dict):
                response = [response]
        elif kind == "fallback":
            response = self.fallback
        else:
            response = self.search_responses.pop(0) if self.search_responses else []

        if isinstance(response, Exception):
            raise response
        return response

    @staticmethod
    def kind_of(query: CatalogQuery) -> str:
        if query.fields == list(PROFILE_FIELDS):
            return "profile"
        if greater_than("rating", POPULAR_MIN_RATING) in query.where:
            return "fallback"
        return "search"

    def of_kind(self, kind: str) -> list[CatalogQuery]:
        return [q for q in self.queries if self.kind_of(q) == kind]


@pytest.fixture
def igdb_config() -> IGDBConfig:
    return IGDBConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        token_endpoint="https://id.twitch.tv/oauth2/token",
        catalog_endpoint="https://api.igdb.com/v4",
        timeout=5.0,
        call_deadline=5.0,
        max_retries=1,
    )


@pytest.fixture
def make_catalog():
    return ScriptedCatalog


@pytest.fixture
def make_service():
    """Build a RecommendationService over in-memory stores."""

    def _build(catalog, users=("alice",), plays=None, games=None, max_iterations=1000):
        aggregator = PlayHistoryAggregator(
            MemoryUserStore(users),
            MemoryPlayerStore(plays or {}),
            MemoryGameStore(games or {}),
        )
        return RecommendationService(
            catalog=catalog,
            aggregator=aggregator,
            profile_builder=PreferenceProfileBuilder(max_concurrency=2),
            search=ConstraintRelaxationSearch(max_iterations=max_iterations),
        )

    return _build


@pytest.fixture
def memory_stores():
    return MemoryUserStore, MemoryPlayerStore, MemoryGameStore
