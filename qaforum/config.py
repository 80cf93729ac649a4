"""Runtime configuration for qaForum.

Settings are read from the environment (and an optional `.env` file) once,
then passed explicitly to the components that need them.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

from qaforum.errors import ConfigurationError


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class TokenConfig:
    """Signing and delivery parameters for access tokens."""
    secret_key: str
    algorithm: str = "HS256"
    expires_in: int = 3600  # seconds
    cookie_expires_in: int = 3600000  # milliseconds
    secure_cookie: bool = False


@dataclass(frozen=True)
class EmailConfig:
    """Outbound SMTP settings."""
    enabled: bool = False
    host: str = "smtp.gmail.com"
    port: int = 587
    use_tls: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    from_address: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    """Application settings."""
    token: TokenConfig
    email: EmailConfig = field(default_factory=EmailConfig)
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "question_answering"
    mongo_max_pool_size: int = 10
    mongo_server_selection_timeout_ms: int = 5000
    environment: str = "development"
    bcrypt_rounds: int = 12
    accept_header_token: bool = False
    reset_password_url: str = "http://localhost:3000/api/auth/resetPassword"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_settings() -> Settings:
    """Build Settings from the process environment.

    Raises:
        ConfigurationError: If JWT_SECRET_KEY is not set
    """
    load_dotenv()

    secret_key = os.getenv("JWT_SECRET_KEY")
    if not secret_key:
        raise ConfigurationError("JWT_SECRET_KEY must be set")

    environment = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"

    token = TokenConfig(
        secret_key=secret_key,
        algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        expires_in=int(os.getenv("JWT_EXPIRE", "3600")),
        cookie_expires_in=int(os.getenv("JWT_COOKIE_EXPIRE", "3600000")),
        secure_cookie=environment != "development",
    )

    smtp_email = os.getenv("SMTP_EMAIL")
    email = EmailConfig(
        enabled=_env_bool("EMAIL_ENABLED", "False"),
        host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
        port=int(os.getenv("SMTP_PORT", "587")),
        use_tls=_env_bool("SMTP_USE_TLS", "True"),
        username=smtp_email,
        password=os.getenv("SMTP_PASSWORD"),
        from_address=os.getenv("SMTP_FROM", smtp_email),
    )

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        token=token,
        email=email,
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        mongo_db_name=os.getenv("MONGO_DB_NAME", "question_answering"),
        mongo_max_pool_size=int(os.getenv("MONGO_MAX_POOL_SIZE", "10")),
        mongo_server_selection_timeout_ms=int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")),
        environment=environment,
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
        accept_header_token=_env_bool("AUTH_ACCEPT_HEADER_TOKEN", "False"),
        reset_password_url=os.getenv("RESET_PASSWORD_URL", "http://localhost:3000/api/auth/resetPassword"),
        api_prefix=os.getenv("API_PREFIX", "/api"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=origins or ["*"],
    )
