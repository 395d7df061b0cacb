"""
Configuration helpers for the posts backend.

Settings are read once from the environment (and an optional ``.env`` file)
so that routers/repositories do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    seed_on_startup: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    load_dotenv()

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./posts.db3").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        seed_on_startup=_bool(os.getenv("SEED_ON_STARTUP"), False),
    )
