"""Planets API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Gateway, user directory and photo store built once per app and kept on app.state;
      routes reach them only through api/dependencies.py
    - Photo static mount registered AFTER the API routes
    - Global error handlers map PlanetApiError → structured JSON responses

Design Decisions:
    - create_app(settings) factory: tests build isolated apps against SQLite
    - Lifespan over @app.on_event: logging, upload dir, optional create_all, engine dispose
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from planet_api import __version__
from planet_api.api.error_handlers import register_error_handlers
from planet_api.api.routes import health, planets
from planet_api.config import Settings, get_settings
from planet_api.infrastructure.auth import (
    SqlAlchemyUserDirectory, build_password_context,
)
from planet_api.infrastructure.database import DatabaseSessionManager
from planet_api.infrastructure.observability import setup_logging
from planet_api.infrastructure.photo_store import LocalPhotoStore
from planet_api.infrastructure.planet_gateway import SqlAlchemyPlanetGateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.photo_store.ensure_directory()
    if settings.database_create_tables:
        await app.state.db_manager.create_tables()
    logger.info("Planets API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Planets API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the application and its collaborators."""
    settings = settings or get_settings()

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    photo_store = LocalPhotoStore(
        settings.upload_dir,
        allowed_types=settings.photo_allowed_types,
        max_bytes=settings.photo_max_bytes,
    )

    app = FastAPI(
        title="Planets API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = db_manager
    app.state.planet_gateway = SqlAlchemyPlanetGateway(db_manager)
    app.state.user_directory = SqlAlchemyUserDirectory(
        db_manager, build_password_context(settings.password_schemes),
    )
    app.state.photo_store = photo_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(planets.router)

    # check_dir=False: the directory is created by the lifespan or the first upload
    app.mount(
        "/planets/photos",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="photos",
    )

    register_error_handlers(app)
    return app


app = create_app()
