"""Application configuration loader.

Loads configuration from data/config/app_config_v1.yaml with fallback to
built-in defaults. The database path can be overridden with LABDB_DB_PATH.

Usage:
    from labdb.config.app_config import load_app_config, get_database_config

    config = load_app_config()
    db = get_database_config()
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

DB_PATH_ENV = "LABDB_DB_PATH"


@dataclass
class DatabaseConfig:
    """Settings used when opening SQLite connections."""

    path: str = "db/labdb.db"
    timeout: float = 5.0
    foreign_keys: bool = True


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    paths: dict[str, str] = field(default_factory=dict)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {
            "path": "db/labdb.db",
            "timeout": 5.0,
            "foreign_keys": True,
        },
        "paths": {
            "db_dir": "db",
            "config_dir": "data/config",
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    db_data = data.get("database") or {}
    database = DatabaseConfig(
        path=str(db_data.get("path", "db/labdb.db")),
        timeout=float(db_data.get("timeout", 5.0)),
        foreign_keys=bool(db_data.get("foreign_keys", True)),
    )

    env_path = os.environ.get(DB_PATH_ENV)
    if env_path:
        database.path = env_path

    paths = data.get("paths") or {}

    return AppConfig(database=database, paths=paths)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, falling back to defaults.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def get_database_config() -> DatabaseConfig:
    """Get the database section of the loaded config."""
    return load_app_config().database


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
