"""Application configuration helpers."""

from __future__ import annotations

from .declarative import (
    DEFAULT_MAX_COMPOSITE_RECORDS,
    DeclarativeConfig,
    StoreMode,
    get_declarative_config,
    resolve_store_mode,
)
from .env import env_flag, env_non_negative_int, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_MAX_COMPOSITE_RECORDS",
    "ConfigurationError",
    "DatabaseConfig",
    "DeclarativeConfig",
    "StorageConfig",
    "StoreMode",
    "configure_logging",
    "env_flag",
    "env_non_negative_int",
    "get_database_config",
    "get_declarative_config",
    "get_storage_config",
    "optional_env_var",
    "resolve_store_mode",
]
