# core/config.py
import logging
import os
import secrets
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from core.exceptions import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    # Database
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///bookshelf.db"))

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))
    allowed_origins: List[str] = field(
        default_factory=lambda: _env_list("ALLOWED_ORIGINS", "http://localhost:5173")
    )
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Sessions
    jwt_secret: Optional[str] = field(default_factory=lambda: os.getenv("JWT_SECRET"))
    jwt_algorithm: str = field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    session_days: int = field(default_factory=lambda: int(os.getenv("SESSION_DAYS", "7")))
    cookie_name: str = field(default_factory=lambda: os.getenv("COOKIE_NAME", "token"))
    cookie_secure: bool = field(default_factory=lambda: _env_bool("COOKIE_SECURE", "True"))
    cookie_samesite: str = field(default_factory=lambda: os.getenv("COOKIE_SAMESITE", "none"))
    bcrypt_rounds: int = field(default_factory=lambda: int(os.getenv("BCRYPT_ROUNDS", "12")))

    # Catalog seeding over HTTP, off unless explicitly enabled
    enable_seed: bool = field(default_factory=lambda: _env_bool("ENABLE_SEED", "False"))

    # Google Books lookup
    google_books_url: str = field(
        default_factory=lambda: os.getenv("GOOGLE_BOOKS_URL", "https://www.googleapis.com/books/v1/volumes")
    )
    google_books_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GOOGLE_BOOKS_API_KEY"))
    google_books_timeout: float = field(default_factory=lambda: float(os.getenv("GOOGLE_BOOKS_TIMEOUT", "10")))

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "test")

    def jwt_secret_or_raise(self) -> str:
        """Return the session signing secret.

        Outside development a missing secret is fatal. In development a random
        per-process secret is generated, so sessions do not survive a restart.
        """
        if self.jwt_secret:
            return self.jwt_secret
        if not self.is_development:
            raise ConfigurationError("JWT_SECRET must be set outside development")
        logger.warning("JWT_SECRET is not set, using a random secret for this process")
        self.jwt_secret = secrets.token_urlsafe(32)
        return self.jwt_secret


def configure_logging(level: str = "INFO") -> None:
    """Install the stream handler and format shared by the API and the CLI."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
