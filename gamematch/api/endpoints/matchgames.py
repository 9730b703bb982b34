from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from gamematch.core.exceptions import NoRecommendationError, UserNotFoundError
from gamematch.services.recommendation.engine import RecommendationService, get_recommendation_service

router = APIRouter(tags=["recommendations"])


@router.get("/matchgames/{user_id}")
async def match_games(
    user_id: str,
    service: RecommendationService = Depends(get_recommendation_service),
) -> list[dict[str, Any]]:
    """Recommend IGDB games for a user based on the games they play."""
    try:
        return await service.recommend_games(user_id)
    except UserNotFoundError as e:
        logger.info(f"[{user_id}] Recommendation requested for unknown user")
        raise HTTPException(status_code=400, detail=str(e))
    except NoRecommendationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"[{user_id}] Error recommending games: {e}")
        raise HTTPException(status_code=500, detail="Failed to recommend games")
