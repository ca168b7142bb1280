"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All deployment-specific values come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box for local development
    - FRONT_URL is the single allowed CORS origin (frontend dev server by default)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from catalog.core.domain_types import StoreBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Item store
    item_store_backend: StoreBackend = StoreBackend.JSON
    items_json_path: str = "items.json"

    # Database (relational backend)
    database_url: str = "sqlite+aiosqlite:///../db/mercari.sqlite3"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_auto_create: bool = True

    # Images
    image_dir: str = "images"

    # API
    front_url: str = "http://localhost:3000"
    server_host: str = "0.0.0.0"
    server_port: int = 9000

    # Observability
    log_level: str = "DEBUG"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
