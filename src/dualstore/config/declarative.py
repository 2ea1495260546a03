"""Declarative resource and store mode configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from .env import env_flag, env_non_negative_int, optional_env_var
from .storage import StorageConfig, get_storage_config

log = logging.getLogger(__name__)

DEFAULT_MAX_COMPOSITE_RECORDS: Final[int] = 1000


class StoreMode(StrEnum):
    MUTABLE = "mutable"
    DECLARATIVE = "declarative"
    COMPOSITE = "composite"


@dataclass(frozen=True, slots=True)
class DeclarativeConfig:
    """Where declarative resources live and how they are combined with the database."""

    enabled: bool
    resources_dir: Path
    store_mode: StoreMode
    max_composite_records: int = DEFAULT_MAX_COMPOSITE_RECORDS


def resolve_store_mode(explicit: str | None, *, declarative_enabled: bool) -> StoreMode:
    """Pick the organization unit store mode.

    An explicit, valid mode wins. Otherwise the global declarative flag decides
    between declarative-only and mutable-only.
    """

    if explicit is not None:
        normalized = explicit.strip().lower()
        try:
            return StoreMode(normalized)
        except ValueError:
            log.warning("Ignoring unknown store mode %r", explicit)
    return StoreMode.DECLARATIVE if declarative_enabled else StoreMode.MUTABLE


def get_declarative_config(*, storage: StorageConfig | None = None) -> DeclarativeConfig:
    enabled = env_flag("DECLARATIVE_RESOURCES_ENABLED")
    env_dir = optional_env_var("DECLARATIVE_RESOURCES_DIR")
    if env_dir is not None:
        resources_dir = Path(env_dir).expanduser().resolve()
    else:
        resources_dir = (storage or get_storage_config()).resources_path()
    return DeclarativeConfig(
        enabled=enabled,
        resources_dir=resources_dir,
        store_mode=resolve_store_mode(
            optional_env_var("ORGANIZATION_UNIT_STORE"),
            declarative_enabled=enabled,
        ),
        max_composite_records=env_non_negative_int(
            "COMPOSITE_MAX_RECORDS",
            default=DEFAULT_MAX_COMPOSITE_RECORDS,
        ),
    )
