import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gamematch.api.main import api_router
from gamematch.services.igdb.service import get_igdb_service
from gamematch.services.store.redis_store import document_store

from .config import settings
from .version import __version__

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    if not settings.IGDB_CLIENT_ID or not settings.IGDB_CLIENT_SECRET:
        logger.warning("IGDB credentials are not set. Catalog calls will fail until they are configured.")
    yield
    try:
        await get_igdb_service().close()
        logger.info("IGDB HTTP clients closed")
    except Exception as exc:
        logger.warning(f"Failed to close IGDB HTTP clients: {exc}")
    await document_store.close()


app = FastAPI(
    title="Gamematch",
    description="Game tracking social backend with IGDB-powered game recommendations",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
