"""SQLAlchemy adapter package: the runtime (mutable) store."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, organization_unit_table
from .repositories import SqlAlchemyOrganizationUnitRepository

__all__ = [
    "SqlAlchemyOrganizationUnitRepository",
    "create_all_tables",
    "metadata",
    "organization_unit_table",
]
