"""FastAPI application for the liftlog JSON API."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from loguru import logger

from ..clients.health import NullHealthClient
from ..db import Storage, get_db_path, init_db, seed_database
from ..services.workout_session import WorkoutSessionManager
from .routers import exercises, imports, workout

VERSION = "0.1.0"


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite file to use, defaults to the configured data directory
    """
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: make sure the schema and built-in data exist
        await init_db(db_path)
        await seed_database(db_path)
        logger.info(f"API using database {db_path}")
        yield
        # Shutdown: leave any active workout stored but unfinished
        app.state.session.stop_rest_timer()

    app = FastAPI(
        title="liftlog",
        description="Workout logging with Setgraph history import",
        version=VERSION,
        lifespan=lifespan,
    )

    storage = Storage(db_path)
    app.state.storage = storage
    app.state.session = WorkoutSessionManager(storage, health_client=NullHealthClient())

    app.include_router(exercises.router)
    app.include_router(imports.router)
    app.include_router(workout.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": VERSION}

    return app

