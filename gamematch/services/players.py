import asyncio
import random

from loguru import logger

from gamematch.services.store.redis_store import PlayerStore, player_store


class PlayerMatchService:
    """
    Finds other users who play at least one of the same games as a user.

    Each match is listed once and the list is returned in random order.
    """

    def __init__(self, players: PlayerStore):
        self.players = players

    async def find_matches(self, user_id: str) -> list[str]:
        own_plays = await self.players.list_by_user(user_id)
        if not own_plays:
            logger.debug(f"[{user_id}] No played games, nothing to match on")
            return []

        per_game = await asyncio.gather(*(self.players.list_by_game(p.game_id) for p in own_plays))

        matches: list[str] = []
        seen = {user_id}
        for records in per_game:
            for record in records:
                if record.user_id not in seen:
                    seen.add(record.user_id)
                    matches.append(record.user_id)

        random.shuffle(matches)
        logger.info(f"[{user_id}] Found {len(matches)} players across {len(own_plays)} games")
        return matches


_player_match_service: PlayerMatchService | None = None


def get_player_match_service() -> PlayerMatchService:
    global _player_match_service
    if _player_match_service is None:
        _player_match_service = PlayerMatchService(player_store)
    return _player_match_service
