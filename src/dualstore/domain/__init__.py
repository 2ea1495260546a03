"""Organization unit domain built on the composite store helpers."""

from __future__ import annotations

from .errors import (
    ImmutableOrganizationUnitError,
    InvalidOrganizationUnitError,
    OrganizationUnitConflictError,
    OrganizationUnitError,
    OrganizationUnitHasChildrenError,
    OrganizationUnitNotFoundError,
    ResultLimitExceededError,
)
from .organization_units import CompositeOrganizationUnitStore, merge_organization_units
from .service import OrganizationUnitPage, OrganizationUnitService

__all__ = [
    "CompositeOrganizationUnitStore",
    "ImmutableOrganizationUnitError",
    "InvalidOrganizationUnitError",
    "OrganizationUnitConflictError",
    "OrganizationUnitError",
    "OrganizationUnitHasChildrenError",
    "OrganizationUnitNotFoundError",
    "OrganizationUnitPage",
    "OrganizationUnitService",
    "ResultLimitExceededError",
    "merge_organization_units",
]
