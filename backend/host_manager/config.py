from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Host Manager API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./host_manager.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Entity store: "database" (SQLAlchemy) or "json" (local fallback file)
    storage_backend: Literal["database", "json"] = "database"
    json_store_path: str = "data/store.json"
    seed_demo_data: bool = False

    # Admin login. The password is only used to bootstrap the hashed credential row.
    admin_username: str = "admin"
    admin_password: str = "password123"
    secret_key: str = "change-me-in-production"
    token_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # application services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
