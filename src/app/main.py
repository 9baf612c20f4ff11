"""Fargate Hello Service – FastAPI application entry-point."""

from contextlib import asynccontextmanager
import logging
import sys
from collections.abc import AsyncIterator

from fastapi import FastAPI

from src.app.config import settings
from src.app.router import greeting, health

# Configure logging from settings
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Lifespan: nothing to load, only announce start / stop
# ──────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("🚀 %s %s starting …", settings.app_name, settings.app_version)
    yield
    logger.info("🛑 Shutting down …")


# ──────────────────────────────────────────────
# Application factory
# ──────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    description="Greeting and health-check endpoints for ECS Fargate.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# ── register routers ──
app.include_router(greeting.router)
app.include_router(health.router)
