import asyncio

from loguru import logger

from gamematch.core.exceptions import UserNotFoundError
from gamematch.models.profile import PlayedGame


class PlayHistoryAggregator:
    """
    Resolves the IGDB ids of every game a user plays.

    Games without an IGDB id are dropped. Two internal games that point at
    the same IGDB id are both kept, so that id weighs twice in the profile.
    """

    def __init__(self, users, players, games):
        self.users = users
        self.players = players
        self.games = games

    async def get_played_games(self, user_id: str) -> list[PlayedGame]:
        if not await self.users.exists(user_id):
            raise UserNotFoundError(user_id)

        player_records = await self.players.list_by_user(user_id)
        records = await asyncio.gather(*(self.games.get(p.game_id) for p in player_records))

        played = [
            PlayedGame(internal_id=record.id, catalog_id=record.catalog_id)
            for record in records
            if record is not None and record.catalog_id is not None
        ]
        logger.debug(
            f"[{user_id}] Resolved {len(played)} catalog ids from {len(player_records)} played games"
        )
        return played
