"""Configuration package for labdb."""

from labdb.config.app_config import (
    AppConfig,
    DatabaseConfig,
    clear_config_cache,
    get_database_config,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "clear_config_cache",
    "get_database_config",
    "load_app_config",
]
