"""
Tests for environment-driven configuration.
"""

import pytest

from task_tracker.config import DEFAULT_CLIENT_URL, AppConfig
from task_tracker.shared.exceptions import ConfigurationError

REQUIRED = {"JWT_SECRET": "s3cret", "DATABASE_URL": "sqlite:///tasks.db"}


def test_defaults_apply_when_only_required_vars_set():
    config = AppConfig.from_env(REQUIRED)

    assert config.jwt_secret == "s3cret"
    assert config.database_url == "sqlite:///tasks.db"
    assert config.cors_origins == (DEFAULT_CLIENT_URL,)
    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.token_ttl_seconds == 86400
    assert config.log_level == "INFO"
    assert config.logging_config_path is None


def test_overrides_are_read():
    config = AppConfig.from_env(
        {
            **REQUIRED,
            "CLIENT_URL": "https://app.example.com, https://admin.example.com",
            "HOST": "127.0.0.1",
            "PORT": "9000",
            "TOKEN_TTL_SECONDS": "60",
            "LOG_LEVEL": "debug",
        }
    )

    assert config.cors_origins == ("https://app.example.com", "https://admin.example.com")
    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.token_ttl_seconds == 60
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("missing", ["JWT_SECRET", "DATABASE_URL"])
def test_missing_required_variable_fails(missing):
    env = {k: v for k, v in REQUIRED.items() if k != missing}

    with pytest.raises(ConfigurationError) as exc_info:
        AppConfig.from_env(env)

    assert missing in exc_info.value.message


def test_non_numeric_port_fails():
    with pytest.raises(ConfigurationError):
        AppConfig.from_env({**REQUIRED, "PORT": "eighty"})


def test_secret_is_not_in_repr():
    assert "s3cret" not in repr(AppConfig.from_env(REQUIRED))
