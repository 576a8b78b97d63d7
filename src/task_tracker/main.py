"""
FastAPI application factory.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import AppConfig
from .dependencies import ApplicationContainer, build_container
from .routers import auth, tasks
from .shared.exceptions import register_exception_handlers

log = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
ALEMBIC_DIR = Path(__file__).parent / "alembic"


def run_migrations(container: ApplicationContainer) -> None:
    """
    Upgrade the database schema to the latest revision.

    Any connection or migration failure propagates: the process must not
    start against a store it cannot reach.
    """
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_DIR))

    with container.engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")
    log.info("Database migrations applied")


def _setup_middleware(app: FastAPI, config: AppConfig) -> None:
    allowed_origins = list(config.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    log.info("CORSMiddleware added with origins: %s", allowed_origins)


def _setup_routers(app: FastAPI) -> None:
    app.include_router(auth.router, prefix=API_PREFIX, tags=["Auth"])
    app.include_router(tasks.router, prefix=API_PREFIX, tags=["Tasks"])

    register_exception_handlers(app)
    log.info("Registered routers and exception handlers")


def create_app(
    config: Optional[AppConfig] = None,
    container: Optional[ApplicationContainer] = None,
    apply_migrations: bool = True,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings; read from the environment when omitted
        container: Pre-built container (tests inject one bound to an
            in-memory database)
        apply_migrations: Run ``alembic upgrade head`` before serving
    """
    if container is None:
        config = config or AppConfig.from_env()
        container = build_container(config)
    config = container.config

    if apply_migrations:
        run_migrations(container)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Task tracker API starting")
        yield
        container.dispose()

    app = FastAPI(
        title="Task Tracker API",
        version=__version__,
        description="Personal task tracking backend with per-user task lists.",
        lifespan=lifespan,
    )
    app.state.container = container

    _setup_middleware(app, config)
    _setup_routers(app)

    @app.get("/health", tags=["Health"])
    async def health():
        """Basic health check endpoint."""
        log.debug("Health check endpoint '/health' called")
        return {"status": "ok"}

    return app
