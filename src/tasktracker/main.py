from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.tasktracker.api.middlewares import setup_middlewares
from src.tasktracker.api.v1.router import api_router
from src.tasktracker.core.config import get_settings
from src.tasktracker.core.db import dispose_engine
from src.tasktracker.core.exceptions import setup_exception_handlers
from src.tasktracker.core.health import setup_health_endpoint, setup_metrics_endpoint
from src.tasktracker.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", app_env=settings.app_env)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Registration and access tokens"},
    {"name": "users", "description": "Current user profile"},
    {"name": "projects", "description": "Projects owned by the current user"},
    {"name": "tasks", "description": "Tasks nested under an owned project"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Task tracking API with per-user project ownership",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_health_endpoint(app)
    setup_metrics_endpoint(app, settings)

    return app


app = create_app()
