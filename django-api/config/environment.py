"""Environment-driven configuration.

Values come from the process environment or a ``.env`` file; Django settings
read them from a single ``Environment`` instance.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(BaseSettings):
    """Deployment settings that differ between environments."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    DJANGO_SECRET_KEY: str = "insecure-development-key"
    DJANGO_DEBUG: bool = False
    # Comma separated
    DJANGO_ALLOWED_HOSTS: str = "localhost,127.0.0.1"
    DJANGO_LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_ENGINE: str = "django.db.backends.sqlite3"
    DATABASE_NAME: str = ""
    DATABASE_USER: str = ""
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = ""
    DATABASE_PORT: str = ""

    # Cache
    CACHE_BACKEND: str = "django.core.cache.backends.locmem.LocMemCache"
    CACHE_LOCATION: str = "events"

    # Registration
    EVENTS_REGISTRATION_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    EVENTS_CACHE_TIMEOUT: int = Field(default=300, ge=0)

    @property
    def allowed_hosts(self) -> list[str]:
        return [h.strip() for h in self.DJANGO_ALLOWED_HOSTS.split(",") if h.strip()]

    @property
    def log_level(self) -> str:
        return self.DJANGO_LOG_LEVEL.upper()
