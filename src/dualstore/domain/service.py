"""Organization unit use cases on top of any ``OrganizationUnitStore``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

from dualstore.composite import is_declarative
from dualstore.domain.errors import (
    InvalidOrganizationUnitError,
    OrganizationUnitConflictError,
    OrganizationUnitHasChildrenError,
    OrganizationUnitNotFoundError,
)
from dualstore.domain.model import OrganizationUnit, OrganizationUnitBasic, new_id

if TYPE_CHECKING:
    from dualstore.domain.ports.persistence import OrganizationUnitStore

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrganizationUnitPage:
    total_results: int
    offset: int
    items: list[OrganizationUnitBasic] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


class OrganizationUnitService:
    def __init__(
        self,
        store: OrganizationUnitStore,
        *,
        declarative: OrganizationUnitStore | None = None,
    ) -> None:
        self.store = store
        self.declarative = declarative

    def list_organization_units(self, *, limit: int, offset: int = 0) -> OrganizationUnitPage:
        items = list(self.store.list_roots(limit, offset))
        return OrganizationUnitPage(
            total_results=self.store.count_roots(),
            offset=offset,
            items=items,
        )

    def count_organization_units(self) -> int:
        return self.store.count_roots()

    def list_children(self, ou_id: str, *, limit: int, offset: int = 0) -> OrganizationUnitPage:
        if not self.store.exists(ou_id):
            raise OrganizationUnitNotFoundError(ou_id)
        items = list(self.store.children(ou_id, limit, offset))
        return OrganizationUnitPage(
            total_results=self.store.children_count(ou_id),
            offset=offset,
            items=items,
        )

    def get_organization_unit(self, ou_id: str) -> OrganizationUnit:
        return self.store.get(ou_id)

    def get_by_path(self, path: str) -> OrganizationUnit:
        handles = [handle for handle in path.strip("/").split("/") if handle]
        if not handles:
            raise InvalidOrganizationUnitError("Path must contain at least one handle")
        return self.store.get_by_path(handles)

    def is_declarative(self, ou_id: str) -> bool:
        """Whether the unit comes from the declarative store (and is read-only)."""

        if self.declarative is None:
            return False
        return is_declarative(ou_id, self.declarative.exists)

    def create_organization_unit(
        self,
        *,
        handle: str,
        name: str,
        description: str | None = None,
        parent: str | None = None,
    ) -> OrganizationUnit:
        ou = OrganizationUnit(
            id=new_id(),
            handle=handle.strip(),
            name=name.strip(),
            description=description,
            parent=parent,
        )
        self._validate(ou)
        self._check_conflicts(ou)
        self.store.create(ou)
        log.info("Created organization unit %s (%s)", ou.id, ou.handle)
        return ou

    def update_organization_unit(
        self,
        ou_id: str,
        *,
        handle: str | None = None,
        name: str | None = None,
        description: str | None = None,
    ) -> OrganizationUnit:
        current = self.store.get(ou_id)
        updated = replace(
            current,
            handle=handle.strip() if handle is not None else current.handle,
            name=name.strip() if name is not None else current.name,
            description=description if description is not None else current.description,
        )
        self._validate(updated)
        self._check_conflicts(updated, current=current)
        self.store.update(updated)
        return updated

    def delete_organization_unit(self, ou_id: str) -> None:
        if not self.store.exists(ou_id):
            raise OrganizationUnitNotFoundError(ou_id)
        if self.store.has_child_resources(ou_id):
            raise OrganizationUnitHasChildrenError(ou_id)
        self.store.delete(ou_id)
        log.info("Deleted organization unit %s", ou_id)

    def _validate(self, ou: OrganizationUnit) -> None:
        if not ou.handle:
            raise InvalidOrganizationUnitError("Organization unit handle must not be empty")
        if "/" in ou.handle:
            raise InvalidOrganizationUnitError("Organization unit handle must not contain '/'")
        if not ou.name:
            raise InvalidOrganizationUnitError("Organization unit name must not be empty")
        if ou.parent is not None:
            if ou.parent == ou.id:
                raise InvalidOrganizationUnitError("Organization unit cannot be its own parent")
            if not self.store.exists(ou.parent):
                raise OrganizationUnitNotFoundError(ou.parent)

    def _check_conflicts(
        self,
        ou: OrganizationUnit,
        *,
        current: OrganizationUnit | None = None,
    ) -> None:
        if (current is None or current.handle != ou.handle) and self.store.handle_conflict(
            ou.handle, ou.parent
        ):
            raise OrganizationUnitConflictError(
                f"An organization unit with handle {ou.handle!r} already exists under this parent"
            )
        if (current is None or current.name != ou.name) and self.store.name_conflict(
            ou.name, ou.parent
        ):
            raise OrganizationUnitConflictError(
                f"An organization unit with name {ou.name!r} already exists under this parent"
            )
