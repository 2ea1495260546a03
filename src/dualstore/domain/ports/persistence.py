"""Ports for persisting organization units."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dualstore.domain.model import OrganizationUnit, OrganizationUnitBasic


@runtime_checkable
class OrganizationUnitStore(Protocol):
    """Store contract shared by the runtime, declarative and composite stores.

    Listings only cover root units and are ordered by name, then id. Lookups of a
    missing unit raise ``OrganizationUnitNotFoundError``.
    """

    def count_roots(self) -> int: ...

    def list_roots(self, limit: int, offset: int) -> Sequence[OrganizationUnitBasic]: ...

    def get(self, ou_id: str) -> OrganizationUnit: ...

    def get_by_path(self, handles: Sequence[str]) -> OrganizationUnit: ...

    def exists(self, ou_id: str) -> bool: ...

    def name_conflict(self, name: str, parent: str | None) -> bool: ...

    def handle_conflict(self, handle: str, parent: str | None) -> bool: ...

    def has_child_resources(self, ou_id: str) -> bool: ...

    def children_count(self, ou_id: str) -> int: ...

    def children(self, ou_id: str, limit: int, offset: int) -> Sequence[OrganizationUnitBasic]: ...

    def create(self, ou: OrganizationUnit) -> None: ...

    def update(self, ou: OrganizationUnit) -> None: ...

    def delete(self, ou_id: str) -> None: ...
