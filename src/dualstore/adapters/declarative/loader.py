"""Load declarative organization units from YAML files.

Every ``*.yaml`` / ``*.yml`` file directly inside the resource directory is read
in name order. A file may contain several YAML documents; each document is either
a single organization unit mapping or a list of them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

import yaml
from pydantic import ValidationError

from dualstore.adapters.declarative.schema import OrganizationUnitDocument

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from dualstore.domain.model import OrganizationUnit

log = logging.getLogger(__name__)

RESOURCE_SUFFIXES = (".yaml", ".yml")


class DeclarativeLoadError(RuntimeError):
    """Raised when a declarative resource file cannot be loaded."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def resource_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in RESOURCE_SUFFIXES
    )


def _raw_documents(path: Path) -> Iterator[object]:
    try:
        with path.open(encoding="utf-8") as handle:
            documents = list(yaml.safe_load_all(handle))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise DeclarativeLoadError(path, f"unreadable resource file ({exc})") from exc

    for document in documents:
        if document is None:
            continue
        if isinstance(document, list):
            yield from cast(list[Any], document)
        else:
            yield document


def load_organization_units_file(path: Path) -> list[OrganizationUnit]:
    units: list[OrganizationUnit] = []
    for raw in _raw_documents(path):
        if not isinstance(raw, dict):
            raise DeclarativeLoadError(path, "expected a mapping per organization unit")
        try:
            units.append(OrganizationUnitDocument.model_validate(raw).to_domain())
        except ValidationError as exc:
            raise DeclarativeLoadError(path, f"invalid organization unit: {exc}") from exc
    return units


def load_organization_units(directory: Path) -> list[OrganizationUnit]:
    """Load every organization unit defined under ``directory``."""

    files = resource_files(directory)
    if not files:
        log.info("No declarative resource files found in %s", directory)
        return []

    seen: dict[str, Path] = {}
    units: list[OrganizationUnit] = []
    for path in files:
        for unit in load_organization_units_file(path):
            if unit.id in seen:
                first = seen[unit.id]
                raise DeclarativeLoadError(
                    path, f"duplicate organization unit id {unit.id} (first defined in {first})"
                )
            seen[unit.id] = path
            units.append(unit)

    log.info("Loaded %s declarative organization units from %s files", len(units), len(files))
    return units
