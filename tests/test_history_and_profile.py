"""
Tests for play history aggregation and preference profile building.
"""
import asyncio

import pytest

from gamematch.core.exceptions import CatalogUnavailableError, UserNotFoundError
from gamematch.models.profile import PlayedGame, PreferenceProfile
from gamematch.services.recommendation.history import PlayHistoryAggregator
from gamematch.services.recommendation.profile import PreferenceProfileBuilder, SkipReason


@pytest.fixture
def aggregator(memory_stores):
    users, players, games = memory_stores
    return PlayHistoryAggregator(
        users(["alice", "bob"]),
        players({"alice": ["g1", "g2", "g3", "g4", "g5"]}),
        games({"g1": 1942, "g2": "1020", "g3": -1, "g4": None, "g5": 1942}),
    )


class TestPlayHistoryAggregator:
    def test_unknown_user(self, aggregator):
        with pytest.raises(UserNotFoundError):
            asyncio.run(aggregator.get_played_games("mallory"))

    def test_drops_unlinked_games_and_keeps_duplicates(self, aggregator):
        played = asyncio.run(aggregator.get_played_games("alice"))

        assert sorted(g.catalog_id for g in played) == [1020, 1942, 1942]
        assert {g.internal_id for g in played} == {"g1", "g2", "g5"}

    def test_user_without_games(self, aggregator):
        assert asyncio.run(aggregator.get_played_games("bob")) == []

    def test_missing_game_documents_are_skipped(self, memory_stores):
        users, players, games = memory_stores
        aggregator = PlayHistoryAggregator(users(["alice"]), players({"alice": ["gone", "g1"]}), games({"g1": 7}))

        played = asyncio.run(aggregator.get_played_games("alice"))

        assert played == [PlayedGame(internal_id="g1", catalog_id=7)]


def played(*catalog_ids):
    return [PlayedGame(internal_id=f"g{i}", catalog_id=c) for i, c in enumerate(catalog_ids)]


class TestPreferenceProfileBuilder:
    def test_histogram_and_platforms(self, make_catalog):
        catalog = make_catalog(
            games={
                1: {"id": 1, "genres": [5, 12], "platforms": [6, 48]},
                2: {"id": 2, "genres": [5], "platforms": [6]},
            }
        )

        profile = asyncio.run(PreferenceProfileBuilder().build(catalog, played(1, 2)))

        assert profile.genre_histogram == {5: 2, 12: 1}
        assert profile.platform_ids == {6, 48}
        assert profile.skipped == {}

    def test_genre_listed_twice_counts_twice(self, make_catalog):
        catalog = make_catalog(games={1: {"id": 1, "genres": [5, 5], "platforms": [6]}})

        profile = asyncio.run(PreferenceProfileBuilder().build(catalog, played(1)))

        assert profile.genre_histogram == {5: 2}

    def test_duplicate_played_games_weigh_twice(self, make_catalog):
        catalog = make_catalog(games={1: {"id": 1, "genres": [31], "platforms": [6]}})

        profile = asyncio.run(PreferenceProfileBuilder().build(catalog, played(1, 1)))

        assert profile.genre_histogram == {31: 2}
        assert len(catalog.of_kind("profile")) == 2

    def test_missing_fields_contribute_nothing(self, make_catalog):
        catalog = make_catalog(games={1: {"id": 1}, 2: {"id": 2, "genres": None, "platforms": [6]}})

        profile = asyncio.run(PreferenceProfileBuilder().build(catalog, played(1, 2)))

        assert profile.genre_histogram == {}
        assert profile.platform_ids == {6}
        assert profile.skipped == {}

    def test_bad_lookups_are_skipped_with_reason(self, make_catalog):
        catalog = make_catalog(
            games={
                1: CatalogUnavailableError("boom"),
                2: [],
                3: {"genres": "not-a-list"},
                4: {"id": 4, "genres": [8], "platforms": [130]},
            }
        )

        profile = asyncio.run(PreferenceProfileBuilder(max_concurrency=1).build(catalog, played(1, 2, 3, 4)))

        assert profile.genre_histogram == {8: 1}
        assert profile.platform_ids == {130}
        assert profile.skipped == {
            SkipReason.CATALOG_UNAVAILABLE.value: 1,
            SkipReason.NOT_IN_CATALOG.value: 1,
            SkipReason.MALFORMED.value: 1,
        }

    def test_no_played_games(self, make_catalog):
        catalog = make_catalog()

        profile = asyncio.run(PreferenceProfileBuilder().build(catalog, []))

        assert profile.is_empty()
        assert catalog.queries == []


class TestPreferenceProfile:
    def test_active_genres_follow_counts_through_relaxation(self):
        profile = PreferenceProfile(genre_histogram={5: 3, 12: 1, 31: 2})

        assert profile.active_genre_ids() == [5, 12, 31]
        while profile.active_genre_ids():
            active = profile.relax_genres()
            assert active == [g for g, c in profile.genre_histogram.items() if c > 0]
            assert all(c >= 0 for c in profile.genre_histogram.values())

        assert profile.genre_histogram == {5: 0, 12: 0, 31: 0}

    def test_relaxation_keeps_exhausted_genres(self):
        profile = PreferenceProfile(genre_histogram={5: 2, 12: 1})

        assert profile.relax_genres() == [5]
        assert 12 in profile.genre_histogram
