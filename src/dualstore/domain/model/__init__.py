from __future__ import annotations

from .organization_unit import OrganizationUnit, OrganizationUnitBasic, new_id

__all__ = ["OrganizationUnit", "OrganizationUnitBasic", "new_id"]
