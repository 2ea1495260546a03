"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import delete, func, insert, select, update

from dualstore.adapters.sqlalchemy.mappings import organization_unit_table
from dualstore.composite import FetchWindow
from dualstore.domain.errors import OrganizationUnitNotFoundError
from dualstore.domain.model import OrganizationUnit, OrganizationUnitBasic

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement, Row
    from sqlalchemy.orm import Session

_ou = organization_unit_table.c


def _parent_clause(parent: str | None) -> ColumnElement[bool]:
    return _ou.parent_id.is_(None) if parent is None else _ou.parent_id == parent


def _to_unit(row: Row[tuple[str, str, str, str | None, str | None]]) -> OrganizationUnit:
    return OrganizationUnit(
        id=row.id,
        handle=row.handle,
        name=row.name,
        description=row.description,
        parent=row.parent_id,
    )


def _to_basic(row: Row[tuple[str, str, str, str | None]]) -> OrganizationUnitBasic:
    return OrganizationUnitBasic(
        id=row.id,
        handle=row.handle,
        name=row.name,
        description=row.description,
    )


class SqlAlchemyOrganizationUnitRepository:
    """Runtime (mutable) organization unit store."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_roots(self) -> int:
        return self._count(_parent_clause(None))

    def list_roots(self, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._page(_parent_clause(None), limit=limit, offset=offset)

    def get(self, ou_id: str) -> OrganizationUnit:
        stmt = select(organization_unit_table).where(_ou.id == ou_id)
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            raise OrganizationUnitNotFoundError(ou_id)
        return _to_unit(row)

    def get_by_path(self, handles: Sequence[str]) -> OrganizationUnit:
        parent: str | None = None
        row = None
        for handle in handles:
            stmt = (
                select(organization_unit_table)
                .where(_parent_clause(parent))
                .where(_ou.handle == handle)
                .limit(1)
            )
            row = self.session.execute(stmt).one_or_none()
            if row is None:
                raise OrganizationUnitNotFoundError("/".join(handles))
            parent = row.id
        if row is None:
            raise OrganizationUnitNotFoundError("/".join(handles))
        return _to_unit(row)

    def exists(self, ou_id: str) -> bool:
        return self._count(_ou.id == ou_id) > 0

    def name_conflict(self, name: str, parent: str | None) -> bool:
        return self._count(_parent_clause(parent), _ou.name == name) > 0

    def handle_conflict(self, handle: str, parent: str | None) -> bool:
        return self._count(_parent_clause(parent), _ou.handle == handle) > 0

    def has_child_resources(self, ou_id: str) -> bool:
        return self.children_count(ou_id) > 0

    def children_count(self, ou_id: str) -> int:
        return self._count(_parent_clause(ou_id))

    def children(self, ou_id: str, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._page(_parent_clause(ou_id), limit=limit, offset=offset)

    def create(self, ou: OrganizationUnit) -> None:
        self.session.execute(
            insert(organization_unit_table).values(
                id=ou.id,
                handle=ou.handle,
                name=ou.name,
                description=ou.description,
                parent_id=ou.parent,
            )
        )

    def update(self, ou: OrganizationUnit) -> None:
        stmt = (
            update(organization_unit_table)
            .where(_ou.id == ou.id)
            .values(
                handle=ou.handle,
                name=ou.name,
                description=ou.description,
                parent_id=ou.parent,
            )
        )
        if self.session.execute(stmt).rowcount == 0:
            raise OrganizationUnitNotFoundError(ou.id)

    def delete(self, ou_id: str) -> None:
        stmt = delete(organization_unit_table).where(_ou.id == ou_id)
        if self.session.execute(stmt).rowcount == 0:
            raise OrganizationUnitNotFoundError(ou_id)

    def _count(self, *criteria: ColumnElement[bool]) -> int:
        stmt = select(func.count()).select_from(organization_unit_table).where(*criteria)
        return cast(int, self.session.execute(stmt).scalar_one())

    def _page(
        self,
        criterion: ColumnElement[bool],
        *,
        limit: int,
        offset: int,
    ) -> list[OrganizationUnitBasic]:
        FetchWindow(offset=offset, limit=limit).validate()
        stmt = (
            select(_ou.id, _ou.handle, _ou.name, _ou.description)
            .where(criterion)
            .order_by(_ou.name, _ou.id)
            .limit(limit)
            .offset(offset)
        )
        return [_to_basic(row) for row in self.session.execute(stmt)]


if TYPE_CHECKING:
    from dualstore.domain.ports.persistence import OrganizationUnitStore

    _session_stub = cast("Session", object())
    _repo_check: OrganizationUnitStore = SqlAlchemyOrganizationUnitRepository(_session_stub)
