import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_OVERRIDE_KEYS = frozenset({
    "policy_unscoped_access",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "SIDAK Inventaris API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./sidak.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Session tokens (HS256 JWT)
    auth_secret_key: str = "change-me-in-production"
    auth_token_ttl_hours: int = 24

    # Access policy: editors/viewers without allowed units
    policy_unscoped_access: bool = True

    # Seeding (relative to backend directory)
    master_data_seed_file: str = "data/master-data.yaml"
    seed_default_users: bool = True

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_audit: str = "INFO"            # sidak.audit: writes and denials

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key in _OVERRIDE_KEYS:
                    if key in overrides and isinstance(overrides[key], bool):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
