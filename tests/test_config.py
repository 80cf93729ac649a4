"""Tests for environment configuration."""

import pytest

from qaforum import config
from qaforum.config import Settings, TokenConfig, load_settings
from qaforum.database.database import get_client_kwargs
from qaforum.errors import ConfigurationError

CONFIG_VARS = [
    "JWT_SECRET_KEY",
    "JWT_EXPIRE",
    "JWT_COOKIE_EXPIRE",
    "APP_ENV",
    "NODE_ENV",
    "EMAIL_ENABLED",
    "SMTP_EMAIL",
    "SMTP_PASSWORD",
    "SMTP_FROM",
    "MONGO_URI",
    "MONGO_DB_NAME",
    "MONGO_MAX_POOL_SIZE",
    "AUTH_ACCEPT_HEADER_TOKEN",
    "CORS_ORIGINS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate load_settings() from the developer's environment and .env file."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    return monkeypatch


class TestLoadSettings:
    """Test load_settings()."""

    def test_missing_secret_is_fatal(self, clean_env):
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_defaults(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", "env-secret")
        settings = load_settings()

        assert settings.token.secret_key == "env-secret"
        assert settings.token.expires_in == 3600
        assert settings.token.cookie_expires_in == 3600000
        assert settings.environment == "development"
        assert settings.is_development is True
        assert settings.token.secure_cookie is False
        assert settings.email.enabled is False
        assert settings.accept_header_token is False
        assert settings.cors_origins == ["*"]

    def test_lifetimes_from_env(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", "env-secret")
        clean_env.setenv("JWT_EXPIRE", "600")
        clean_env.setenv("JWT_COOKIE_EXPIRE", "600000")
        settings = load_settings()

        assert settings.token.expires_in == 600
        assert settings.token.cookie_expires_in == 600000

    @pytest.mark.parametrize("var", ["APP_ENV", "NODE_ENV"])
    def test_secure_cookie_outside_development(self, clean_env, var):
        clean_env.setenv("JWT_SECRET_KEY", "env-secret")
        clean_env.setenv(var, "production")
        settings = load_settings()

        assert settings.environment == "production"
        assert settings.token.secure_cookie is True

    def test_email_sender_address_defaults_to_login(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", "env-secret")
        clean_env.setenv("EMAIL_ENABLED", "true")
        clean_env.setenv("SMTP_EMAIL", "forum@x.com")
        clean_env.setenv("SMTP_PASSWORD", "pw")
        settings = load_settings()

        assert settings.email.enabled is True
        assert settings.email.from_address == "forum@x.com"

    def test_cors_origins_list(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", "env-secret")
        clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        assert load_settings().cors_origins == ["http://a.test", "http://b.test"]


class TestClientKwargs:
    """Test get_client_kwargs()."""

    def test_pool_and_timeout(self):
        settings = Settings(
            token=TokenConfig(secret_key="k"),
            mongo_max_pool_size=25,
            mongo_server_selection_timeout_ms=1500,
        )
        assert get_client_kwargs(settings) == {
            "maxPoolSize": 25,
            "serverSelectionTimeoutMS": 1500,
            "tz_aware": False,
        }
