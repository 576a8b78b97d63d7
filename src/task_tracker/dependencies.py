"""
Defines the application container and the FastAPI dependency injectors
that hand its shared resources to request handlers.

Everything here is built once at startup from an AppConfig and attached to
``app.state.container``; handlers never read ambient globals.
"""
from __future__ import annotations

import logging
from collections.abc import Generator
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy import create_engine, event, pool
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import Session, sessionmaker

from .config import AppConfig
from .repository.task_repository import TaskRepository
from .repository.user_repository import UserRepository
from .services.auth_service import AuthService
from .services.task_service import TaskService
from .services.token_service import TokenService
from .shared.exceptions import InternalServiceError

log = logging.getLogger(__name__)


def _is_sqlite_memory(url: URL) -> bool:
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def create_db_engine(database_url: str) -> Engine:
    """Create an engine with configuration appropriate to the database dialect."""
    url = make_url(database_url)
    dialect_name = url.get_dialect().name

    engine_kwargs = {}

    if dialect_name == "sqlite":
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_sqlite_memory(url):
            # An in-memory database lives only as long as its one connection.
            engine_kwargs["poolclass"] = pool.StaticPool
            log.info("Configuring in-memory SQLite database (single-connection mode)")
        else:
            log.info("Configuring SQLite file database")

    elif dialect_name in ("postgresql", "mysql"):
        engine_kwargs = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_timeout": 30,
            "pool_recycle": 1800,
            "pool_pre_ping": True,
        }
        log.info("Configuring %s database with connection pooling", dialect_name)

    else:
        log.warning("Using default configuration for dialect: %s", dialect_name)

    engine = create_engine(database_url, **engine_kwargs)

    if dialect_name == "sqlite":

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    log.debug("Database engine created for %s", url.render_as_string(hide_password=True))
    return engine


@dataclass
class ApplicationContainer:
    """Process-wide resources shared by every request."""

    config: AppConfig
    engine: Engine
    session_factory: sessionmaker
    token_service: TokenService
    task_service: TaskService
    auth_service: AuthService

    def dispose(self) -> None:
        self.engine.dispose()
        log.info("Database engine disposed")


def build_container(config: AppConfig, engine: Optional[Engine] = None) -> ApplicationContainer:
    """Wire repositories and services from configuration."""
    engine = engine or create_db_engine(config.database_url)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    token_service = TokenService(config.jwt_secret, ttl_seconds=config.token_ttl_seconds)
    container = ApplicationContainer(
        config=config,
        engine=engine,
        session_factory=session_factory,
        token_service=token_service,
        task_service=TaskService(TaskRepository()),
        auth_service=AuthService(UserRepository(), token_service),
    )
    log.info("Application container initialized")
    return container


def get_container(request: Request) -> ApplicationContainer:
    """FastAPI dependency to get the application container."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        log.critical("Application container has not been initialized")
        raise InternalServiceError("Application is not initialized")
    return container


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield one database session per request.

    Commits when the handler returns normally, rolls back on any error.
    """
    db = get_container(request).session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        try:
            db.rollback()
        except Exception as rollback_error:
            log.warning("Failed to rollback after error: %s", rollback_error)
        raise
    finally:
        db.close()


def get_token_service(request: Request) -> TokenService:
    """FastAPI dependency to get the token service."""
    return get_container(request).token_service


def get_task_service(request: Request) -> TaskService:
    """FastAPI dependency to get the task service."""
    return get_container(request).task_service


def get_auth_service(request: Request) -> AuthService:
    """FastAPI dependency to get the auth service."""
    return get_container(request).auth_service
