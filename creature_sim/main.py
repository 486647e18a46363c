"""FastAPI application entrypoint."""

import random
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from creature_sim.api.creatures import router as creatures_router
from creature_sim.api.health import router as health_router
from creature_sim.config import settings
from creature_sim.core.event_bus import EventBus
from creature_sim.core.logging import get_logger, setup_logging
from creature_sim.services.creature_repository import InMemoryCreatureRepository
from creature_sim.services.social_service import SocialService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_social_service() -> SocialService:
    """설정 기반 SocialService 구성 (저장소 + EventBus + rng)"""
    rng = random.Random(settings.RANDOM_SEED)
    return SocialService(
        repository=InMemoryCreatureRepository(),
        event_bus=EventBus(),
        rng=rng,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing SocialService...")
    if getattr(app.state, "social_service", None) is None:
        app.state.social_service = build_social_service()
    logger.info(f"SocialService initialized (seed={settings.RANDOM_SEED}).")

    yield

    logger.info("Shutting down...")
    app.state.social_service.close()
    app.state.social_service = None


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

app.include_router(health_router)
app.include_router(creatures_router)
