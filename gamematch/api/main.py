from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .endpoints.games import router as games_router
from .endpoints.health import router as health_router
from .endpoints.matchgames import router as matchgames_router
from .endpoints.players import router as players_router

api_router = APIRouter()


@api_router.get("/", response_class=PlainTextResponse)
async def root():
    return "gubu!"


api_router.include_router(health_router)
api_router.include_router(games_router)
api_router.include_router(matchgames_router)
api_router.include_router(players_router)
