"""In-memory, read-only organization unit store populated from declarative files."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from dualstore.composite import DeclarativeOperationError, FetchWindow
from dualstore.domain.errors import OrganizationUnitNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dualstore.composite.errors import WriteOperation
    from dualstore.domain.model import OrganizationUnit, OrganizationUnitBasic


class DeclarativeStoreError(ValueError):
    """Raised when declarative organization units are inconsistent."""


class DeclarativeOrganizationUnitStore:
    """Immutable ``OrganizationUnitStore`` over a fixed set of units.

    Parent references must resolve within the same set and form no cycles. Write
    operations are rejected with ``DeclarativeOperationError``.
    """

    def __init__(self, units: Iterable[OrganizationUnit] = ()) -> None:
        self._units: dict[str, OrganizationUnit] = {}
        for unit in units:
            if unit.id in self._units:
                raise DeclarativeStoreError(f"Duplicate organization unit id: {unit.id}")
            self._units[unit.id] = unit
        for unit in self._units.values():
            if unit.parent is not None and unit.parent not in self._units:
                raise DeclarativeStoreError(
                    f"Organization unit {unit.id} references unknown parent {unit.parent}"
                )
        for unit in self._units.values():
            self._check_ancestry(unit)

    def __len__(self) -> int:
        return len(self._units)

    def count_roots(self) -> int:
        return len(self._children_of(None))

    def list_roots(self, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._page(self._children_of(None), limit=limit, offset=offset)

    def get(self, ou_id: str) -> OrganizationUnit:
        try:
            return self._units[ou_id]
        except KeyError:
            raise OrganizationUnitNotFoundError(ou_id) from None

    def get_by_path(self, handles: Sequence[str]) -> OrganizationUnit:
        parent: str | None = None
        current: OrganizationUnit | None = None
        for handle in handles:
            current = next(
                (unit for unit in self._children_of(parent) if unit.handle == handle),
                None,
            )
            if current is None:
                break
            parent = current.id
        if current is None:
            raise OrganizationUnitNotFoundError("/".join(handles))
        return current

    def exists(self, ou_id: str) -> bool:
        return ou_id in self._units

    def name_conflict(self, name: str, parent: str | None) -> bool:
        return any(unit.name == name for unit in self._children_of(parent))

    def handle_conflict(self, handle: str, parent: str | None) -> bool:
        return any(unit.handle == handle for unit in self._children_of(parent))

    def has_child_resources(self, ou_id: str) -> bool:
        return self.children_count(ou_id) > 0

    def children_count(self, ou_id: str) -> int:
        return len(self._children_of(ou_id))

    def children(self, ou_id: str, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._page(self._children_of(ou_id), limit=limit, offset=offset)

    def create(self, ou: OrganizationUnit) -> NoReturn:
        self._reject("create")

    def update(self, ou: OrganizationUnit) -> NoReturn:
        self._reject("update")

    def delete(self, ou_id: str) -> NoReturn:
        self._reject("delete")

    def _check_ancestry(self, unit: OrganizationUnit) -> None:
        if unit.parent == unit.id:
            raise DeclarativeStoreError(f"Organization unit {unit.id} cannot be its own parent")
        seen = {unit.id}
        parent = unit.parent
        while parent is not None:
            if parent in seen:
                raise DeclarativeStoreError(
                    f"Organization unit {unit.id} is part of a parent cycle"
                )
            seen.add(parent)
            parent = self._units[parent].parent

    def _children_of(self, parent: str | None) -> list[OrganizationUnit]:
        children = [unit for unit in self._units.values() if unit.parent == parent]
        return sorted(children, key=lambda unit: (unit.name, unit.id))

    @staticmethod
    def _page(
        units: Sequence[OrganizationUnit],
        *,
        limit: int,
        offset: int,
    ) -> list[OrganizationUnitBasic]:
        window = FetchWindow(offset=offset, limit=limit)
        window.validate()
        return [unit.to_basic(is_read_only=True) for unit in window.page(units)]

    @staticmethod
    def _reject(operation: WriteOperation) -> NoReturn:
        raise DeclarativeOperationError(operation)


if TYPE_CHECKING:
    from dualstore.domain.ports.persistence import OrganizationUnitStore

    _store_check: OrganizationUnitStore = DeclarativeOrganizationUnitStore()
