"""
Settings - environment driven configuration.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings, read from the environment and .env"""
    APP_NAME: str = "session-gate"
    DEBUG: bool = False

    # Signs the session cookie; random per process when unset
    APP_KEY: Optional[str] = None

    # Session storage
    SESSION_DRIVER: str = "memory"
    REDIS_URL: str = "redis://localhost:6379/0"

    # Session cookie
    SESSION_LIFETIME: int = 120  # minutes
    SESSION_COOKIE: str = "session_gate_session"
    SESSION_DOMAIN: Optional[str] = None
    SESSION_SECURE_COOKIE: bool = False
    SESSION_SAME_SITE: str = "lax"

    # Front-ends allowed to use cookie authentication, comma separated host[:port]
    STATEFUL_DOMAINS: str = "localhost,localhost:3000,127.0.0.1,127.0.0.1:8000,::1"

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # python -m session_gate
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    SEED_EMAIL: Optional[str] = None
    SEED_PASSWORD: Optional[str] = None
    SEED_NAME: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

    @property
    def session_ttl(self) -> int:
        """Session lifetime in seconds."""
        return self.SESSION_LIFETIME * 60

    @property
    def stateful_domains(self) -> List[str]:
        return [d.strip() for d in self.STATEFUL_DOMAINS.split(",") if d.strip()]

    @property
    def stateful_origins(self) -> List[str]:
        """CORS origins for the stateful domains, http and https."""
        origins = []
        for domain in self.stateful_domains:
            # Bare IPv6 hosts need brackets inside a URL
            host = f"[{domain}]" if domain.count(":") > 1 else domain
            origins.append(f"http://{host}")
            origins.append(f"https://{host}")
        return origins


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


def validate_required_settings(settings: Settings) -> bool:
    """Warn about settings a deployment should not leave at their defaults"""
    missing = []

    if not settings.APP_KEY:
        missing.append("APP_KEY")

    if settings.SESSION_DRIVER not in ("memory", "redis"):
        logger.warning(f"Unknown SESSION_DRIVER {settings.SESSION_DRIVER!r}, using memory")

    if missing:
        logger.warning(f"Missing environment variables: {', '.join(missing)}")
        logger.warning("Session cookies will not survive a restart.")
        return False

    return True
