from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.main import api_router
from app.services.geolocation import geolocation_client
from app.services.sheets import sheets_client

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    logger.info(f"{settings.APP_NAME} {__version__} starting ({settings.APP_ENV})")
    yield
    for client in (sheets_client, geolocation_client):
        try:
            await client.close()
        except Exception as exc:
            logger.warning(f"Failed to close {type(client).__name__}: {exc}")
    logger.info("HTTP clients closed")


app = FastAPI(
    title=settings.APP_NAME,
    description="Scenario quiz that maps how people think about AI at work onto one of six profiles",
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
