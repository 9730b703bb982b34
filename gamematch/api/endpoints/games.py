from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from gamematch.core.exceptions import CatalogUnavailableError
from gamematch.services.igdb.service import IGDBService, get_igdb_service
from gamematch.services.store.redis_store import GameStore, get_game_store

router = APIRouter(tags=["games"])


@router.get("/games/info/{game_id}")
async def get_game_info(
    game_id: str,
    catalog: IGDBService = Depends(get_igdb_service),
    games: GameStore = Depends(get_game_store),
) -> dict[str, Any]:
    """
    Catalog metadata for a game.

    ``game_id`` is looked up as an internal game id first; an id made of ASCII
    digits that is not a stored game is taken as an IGDB id.
    """
    record = await games.get(game_id)
    if record is not None:
        internal_id, catalog_id = record.id, record.catalog_id
    elif game_id.isascii() and game_id.isdecimal():
        internal_id, catalog_id = None, int(game_id)
    else:
        internal_id, catalog_id = None, None

    if catalog_id is None:
        raise HTTPException(status_code=404, detail="Not Found")

    try:
        info = await catalog.get_game_info(catalog_id)
    except CatalogUnavailableError as e:
        logger.warning(f"Failed to fetch catalog info for game {game_id}: {e}")
        raise HTTPException(status_code=502, detail="Game catalog unavailable")
    return {"game_id": internal_id, "catalog_id": catalog_id, "info": info}


@router.get("/gamesearch")
async def search_games(
    name: str = "",
    genres: list[int] = Query(default=[]),
    platforms: list[int] = Query(default=[]),
    catalog: IGDBService = Depends(get_igdb_service),
) -> list[dict[str, Any]]:
    """Search games by title, or browse popular games when ``name`` is blank."""
    try:
        return await catalog.search_games(name, genre_ids=genres, platform_ids=platforms)
    except CatalogUnavailableError as e:
        logger.warning(f"Game search failed for '{name}': {e}")
        raise HTTPException(status_code=502, detail="Game catalog unavailable")
