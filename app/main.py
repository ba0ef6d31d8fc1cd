import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import router
from app.core.config import settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configure logging on startup; nothing is held between requests.
    """
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting Mensa Menu (default location %s)", settings.DEFAULT_LOCATION)

    yield

    logger.info("Shutting down Mensa Menu")

app = FastAPI(
    title="Mensa Menu",
    description="Plain-text daily canteen menus from the TUM-Eat feeds",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)
