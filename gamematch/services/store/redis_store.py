import json
from typing import Any

import redis.asyncio as redis
from loguru import logger

from gamematch.core.config import settings
from gamematch.core.constants import GAME_KEY, GAME_PLAYERS_KEY, USER_KEY, USER_PLAYS_KEY
from gamematch.models.store import GameRecord, PlayerRecord


class RedisDocumentStore:
    """
    JSON documents and index sets kept in Redis.

    Connection errors are not swallowed here: a store that cannot be reached
    is a server fault, not a missing document.
    """

    def __init__(self, client: redis.Redis | None = None) -> None:
        self._client = client
        if client is None and not settings.REDIS_URL:
            logger.warning("REDIS_URL is not set. Store operations will fail until configured.")

    async def get_client(self) -> redis.Redis:
        if self._client is None:
            logger.info("Creating Redis client for document store")
            self._client = redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                encoding="utf-8",
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                health_check_interval=30,
                socket_keepalive=True,
            )
        return self._client

    async def exists(self, key: str) -> bool:
        client = await self.get_client()
        return bool(await client.exists(key))

    async def get_json(self, key: str) -> dict[str, Any] | None:
        client = await self.get_client()
        raw = await client.get(key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring undecodable document at '{key}': {e}")
            return None
        return data if isinstance(data, dict) else None

    async def members(self, key: str) -> set[str]:
        client = await self.get_client()
        return set(await client.smembers(key))

    async def close(self) -> None:
        """Close and disconnect the Redis client"""
        if self._client is not None:
            try:
                await self._client.close()
                logger.info("Document store Redis client closed")
            except Exception as exc:
                logger.warning(f"Failed to close document store Redis client: {exc}")
            finally:
                self._client = None


class UserStore:
    def __init__(self, store: RedisDocumentStore):
        self.store = store

    async def exists(self, user_id: str) -> bool:
        return await self.store.exists(USER_KEY.format(user_id=user_id))


class PlayerStore:
    """
    Which games each user plays.

    Play records are indexed both ways: a set of game ids per user and a set
    of user ids per game. Writers keep the two sets in step.
    """

    def __init__(self, store: RedisDocumentStore):
        self.store = store

    async def list_by_user(self, user_id: str) -> list[PlayerRecord]:
        game_ids = await self.store.members(USER_PLAYS_KEY.format(user_id=user_id))
        return [PlayerRecord(user_id=user_id, game_id=game_id) for game_id in game_ids]

    async def list_by_game(self, game_id: str) -> list[PlayerRecord]:
        user_ids = await self.store.members(GAME_PLAYERS_KEY.format(game_id=game_id))
        return [PlayerRecord(user_id=user_id, game_id=game_id) for user_id in user_ids]


class GameStore:
    def __init__(self, store: RedisDocumentStore):
        self.store = store

    async def get(self, game_id: str) -> GameRecord | None:
        data = await self.store.get_json(GAME_KEY.format(game_id=game_id))
        if data is None:
            return None
        return GameRecord(id=game_id, name=data.get("gamename"), catalog_id=data.get("igdb_id"))


document_store = RedisDocumentStore()
user_store = UserStore(document_store)
player_store = PlayerStore(document_store)
game_store = GameStore(document_store)


def get_game_store() -> GameStore:
    return game_store
