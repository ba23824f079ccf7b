"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Injecting a pre-populated store
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings and an empty store
    test_settings = Settings(environment="test", seed_exercises=False, _env_file=None)
    test_app = create_app(settings=test_settings, store=InMemoryFitnessStore())
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from backend.settings import Settings, get_settings
from infrastructure.memory import InMemoryFitnessStore, load_exercise_catalog

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryFitnessStore] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional store to serve. If not provided, a new in-memory store
               is created and seeded from the exercise catalog.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="WebFitness API",
        description="Exercise library, routines, workouts and progress",
        version="1.0.0",
    )

    app.state.settings = settings
    app.state.store = store if store is not None else _build_store(settings)

    # Configure CORS middleware
    _configure_cors(app, settings)

    register_exception_handlers(app)

    _include_routers(app)

    logger.info(
        "WebFitness API created (environment=%s, current_user_id=%s)",
        settings.environment,
        settings.current_user_id,
    )
    return app


def _configure_logging(settings: Settings) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for webfitness-api")


def _build_store(settings: Settings) -> InMemoryFitnessStore:
    """Create the application's store, seeded with the catalog if enabled."""
    if not settings.seed_exercises:
        logger.info("Exercise seeding disabled; starting with an empty catalog")
        return InMemoryFitnessStore()

    exercises = load_exercise_catalog(settings.exercise_catalog_path)
    logger.info("Seeding %d exercises", len(exercises))
    return InMemoryFitnessStore(exercises=exercises)


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        exercises_router,
        health_router,
        progress_router,
        routines_router,
        users_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(users_router)
    app.include_router(exercises_router)
    app.include_router(routines_router)
    app.include_router(workouts_router)
    app.include_router(progress_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
