"""Declarative (file-based, immutable) store adapter."""

from __future__ import annotations

from .loader import DeclarativeLoadError, load_organization_units, resource_files
from .schema import OrganizationUnitDocument
from .store import DeclarativeOrganizationUnitStore, DeclarativeStoreError

__all__ = [
    "DeclarativeLoadError",
    "DeclarativeOrganizationUnitStore",
    "DeclarativeStoreError",
    "OrganizationUnitDocument",
    "load_organization_units",
    "resource_files",
]
