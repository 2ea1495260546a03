"""Organization unit entities."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


def new_id() -> str:
    return str(uuid4())


@dataclass(frozen=True, slots=True, kw_only=True)
class OrganizationUnit:
    """A node in the organization unit hierarchy. Root units have no parent."""

    id: str
    handle: str
    name: str
    description: str | None = None
    parent: str | None = None

    def to_basic(self, *, is_read_only: bool = False) -> OrganizationUnitBasic:
        return OrganizationUnitBasic(
            id=self.id,
            handle=self.handle,
            name=self.name,
            description=self.description,
            is_read_only=is_read_only,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class OrganizationUnitBasic:
    """Listing projection of an organization unit."""

    id: str
    handle: str
    name: str
    description: str | None = None
    is_read_only: bool = False
