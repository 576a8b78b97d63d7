"""
Process-wide configuration loaded once at startup.

Environment Variables:
    JWT_SECRET: HMAC signing key for access tokens (required)
    DATABASE_URL: SQLAlchemy URL of the task store (required)
    CLIENT_URL: Allowed CORS origin(s), comma separated (default: http://localhost:5173)
    HOST: Bind address (default: 0.0.0.0)
    PORT: Listening port (default: 8080)
    TOKEN_TTL_SECONDS: Access token lifetime (default: 86400)
    LOG_LEVEL: Root log level when no logging config file is given (default: INFO)
    LOGGING_CONFIG_PATH: Optional logging.config.fileConfig INI file
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .services.token_service import DEFAULT_TOKEN_TTL_SECONDS
from .shared.exceptions import ConfigurationError

DEFAULT_CLIENT_URL = "http://localhost:5173"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class AppConfig:
    """Immutable application settings."""

    jwt_secret: str = field(repr=False)
    database_url: str
    cors_origins: tuple[str, ...] = (DEFAULT_CLIENT_URL,)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    log_level: str = "INFO"
    logging_config_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build configuration from environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or a
                numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        missing = [name for name in ("JWT_SECRET", "DATABASE_URL") if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        origins = tuple(
            origin.strip()
            for origin in env.get("CLIENT_URL", DEFAULT_CLIENT_URL).split(",")
            if origin.strip()
        )

        return cls(
            jwt_secret=env["JWT_SECRET"],
            database_url=env["DATABASE_URL"],
            cors_origins=origins or (DEFAULT_CLIENT_URL,),
            host=env.get("HOST", DEFAULT_HOST),
            port=_parse_int(env, "PORT", DEFAULT_PORT),
            token_ttl_seconds=_parse_int(env, "TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            logging_config_path=env.get("LOGGING_CONFIG_PATH") or None,
        )


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
