import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog"
    app_version: str = "0.1.0"
    app_env: str = "development"
    host: str = "127.0.0.1"
    port: int = 3000

    database_url: str = "sqlite:///blog.db"
    db_echo: bool = False

    # Connection pool, applied to server backends (PostgreSQL)
    db_max_open_conns: int = 25
    db_max_idle_conns: int = 25
    db_conn_max_lifetime: int = 300          # seconds before a connection is recycled
    db_timeout_seconds: float = 5.0          # deadline for a single store call

    templates_dir: str = str(_PACKAGE_DIR / "templates")
    contact_email: str = "summer@example.com"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Clamp pool limits so the idle bound never exceeds the open bound."""
        if self.db_max_idle_conns > self.db_max_open_conns:
            _config_logger.warning(
                "db_max_idle_conns=%d exceeds db_max_open_conns=%d; clamping",
                self.db_max_idle_conns,
                self.db_max_open_conns,
            )
            object.__setattr__(self, "db_max_idle_conns", self.db_max_open_conns)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
