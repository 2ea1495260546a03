"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import OrganizationUnitStore
from .unit_of_work import (
    OrganizationUnitRepositories,
    OrganizationUnitUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "OrganizationUnitRepositories",
    "OrganizationUnitStore",
    "OrganizationUnitUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]
