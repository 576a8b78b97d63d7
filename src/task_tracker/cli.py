"""
Command line entry point.

Usage:
    task-tracker run [--host HOST] [--port PORT] [--system-env]
    task-tracker migrate [--system-env]
"""

import logging
import sys

import click
import uvicorn
from dotenv import find_dotenv, load_dotenv

from . import __version__
from .config import AppConfig
from .dependencies import build_container
from .logging_setup import configure_logging
from .main import create_app, run_migrations
from .shared.exceptions import ConfigurationError

log = logging.getLogger(__name__)


def error_exit(message: str) -> None:
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(1)


def _load_config(system_env: bool) -> AppConfig:
    env_path = ""
    if not system_env:
        env_path = find_dotenv(usecwd=True)
        if env_path:
            load_dotenv(dotenv_path=env_path, override=True)

    try:
        config = AppConfig.from_env()
    except ConfigurationError as e:
        error_exit(f"Configuration error: {e.message}")

    if configure_logging(config.log_level, config.logging_config_path):
        log.info("Logging configured from %s", config.logging_config_path)

    if system_env:
        log.warning("Skipping .env file loading due to --system-env flag.")
    elif env_path:
        log.info("Loaded environment variables from: %s", env_path)
    else:
        log.warning(".env file not found; using process environment only.")
    return config


system_env_option = click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__, "-v", "--version", help="Show the version and exit.")
def cli():
    """Task tracker backend."""
    pass


@cli.command(name="run")
@click.option("--host", default=None, help="Bind address (overrides HOST).")
@click.option("--port", type=int, default=None, help="Listening port (overrides PORT).")
@system_env_option
def run(host, port, system_env: bool):
    """Apply migrations and serve the API."""
    config = _load_config(system_env)
    app = create_app(config=config)

    bind_host = host or config.host
    bind_port = port or config.port
    log.info("Serving on %s:%s", bind_host, bind_port)
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)


@cli.command(name="migrate")
@system_env_option
def migrate(system_env: bool):
    """Upgrade the database schema to the latest revision."""
    config = _load_config(system_env)
    container = build_container(config)
    try:
        run_migrations(container)
    finally:
        container.dispose()
    click.echo("Database is up to date.")


def main():
    cli()


if __name__ == "__main__":
    main()
