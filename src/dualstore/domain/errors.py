"""Organization unit error definitions."""

from __future__ import annotations

from dualstore.composite.errors import ImmutableResourceError


class OrganizationUnitError(Exception):
    """Base class for organization unit errors."""


class OrganizationUnitNotFoundError(OrganizationUnitError, LookupError):
    """Raised when an organization unit exists in neither store."""

    def __init__(self, ou_id: str) -> None:
        super().__init__(f"organization unit not found: {ou_id}")
        self.ou_id = ou_id


class ImmutableOrganizationUnitError(ImmutableResourceError, OrganizationUnitError):
    """Raised when an update or delete targets a declarative organization unit."""

    resource_kind = "organization unit"


class ResultLimitExceededError(OrganizationUnitError):
    """Raised when a composite listing would have to consider too many records."""

    def __init__(self, max_records: int) -> None:
        super().__init__(
            f"result exceeds the limit of {max_records} records in composite store mode"
        )
        self.max_records = max_records


class OrganizationUnitConflictError(OrganizationUnitError):
    """Raised when a handle or name is already taken under the same parent."""


class OrganizationUnitHasChildrenError(OrganizationUnitError):
    """Raised when deleting an organization unit that still has children."""

    def __init__(self, ou_id: str) -> None:
        super().__init__(f"organization unit {ou_id} has child resources")
        self.ou_id = ou_id


class InvalidOrganizationUnitError(OrganizationUnitError, ValueError):
    """Raised when an organization unit payload is invalid."""
