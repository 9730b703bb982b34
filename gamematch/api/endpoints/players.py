from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from gamematch.services.players import PlayerMatchService, get_player_match_service

router = APIRouter(tags=["players"])


@router.get("/players")
async def match_players(
    match: str = Query(..., min_length=1),
    service: PlayerMatchService = Depends(get_player_match_service),
) -> dict[str, list[str]]:
    """Users who share at least one played game with ``match``, shuffled."""
    try:
        matches = await service.find_matches(match)
    except Exception as e:
        logger.exception(f"[{match}] Error matching players: {e}")
        raise HTTPException(status_code=500, detail="Failed to match players")
    return {"shuffled_matches": matches}
