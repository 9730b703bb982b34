"""
Tests for matching users who play the same games.
"""
import asyncio
import random

from gamematch.services.players import PlayerMatchService


def matcher(memory_stores, plays):
    _, players, _ = memory_stores
    return PlayerMatchService(players(plays))


class TestPlayerMatchService:
    def test_users_sharing_a_game_are_matched_once(self, memory_stores):
        service = matcher(
            memory_stores,
            {
                "alice": ["g1", "g2"],
                "bob": ["g1", "g2"],
                "carol": ["g2", "g9"],
                "dave": ["g9"],
            },
        )

        matches = asyncio.run(service.find_matches("alice"))

        assert sorted(matches) == ["bob", "carol"]

    def test_user_is_never_their_own_match(self, memory_stores):
        service = matcher(memory_stores, {"alice": ["g1"]})

        assert asyncio.run(service.find_matches("alice")) == []

    def test_user_without_games_has_no_matches(self, memory_stores):
        service = matcher(memory_stores, {"bob": ["g1"]})

        assert asyncio.run(service.find_matches("alice")) == []

    def test_matches_are_shuffled(self, memory_stores, monkeypatch):
        service = matcher(memory_stores, {"alice": ["g1"], "bob": ["g1"], "carol": ["g1"]})
        monkeypatch.setattr(random, "shuffle", lambda items: items.reverse())

        matches = asyncio.run(service.find_matches("alice"))

        assert matches == ["carol", "bob"]
