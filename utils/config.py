"""Configuration for the update status service.

Settings come from environment variables so the application works out of
the box without any configuration file.
"""

import os as _os
from pathlib import Path


class AppConfig:
    """Application-level configuration loaded from environment variables.

    Environment variables:
        APP_DB_PATH: Path to the SQLite report database (default: update_status.sqlite)
        APP_PORT: API server port (default: 8000)
        APP_HOST: API server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_STATIC_PREFIX: URL prefix for library assets (default: /static)
        FORM_CACHE_TTL: Seconds a built form stays cached; 0 disables (default: 300)
        FORM_CACHE_SIZE: Max built forms kept in the cache (default: 128)
    """

    def __init__(self) -> None:
        self.db_path = Path(_os.getenv("APP_DB_PATH", "update_status.sqlite"))
        self.api_port = int(_os.getenv("APP_PORT", "8000"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        self.static_prefix = _os.getenv("APP_STATIC_PREFIX", "/static").rstrip("/")
        self.form_cache_ttl = float(_os.getenv("FORM_CACHE_TTL", "300"))
        self.form_cache_size = int(_os.getenv("FORM_CACHE_SIZE", "128"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
