"""Tests for the SQLAlchemy organization unit repository."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session  # noqa: TC002

from dualstore.adapters.sqlalchemy import SqlAlchemyOrganizationUnitRepository
from dualstore.composite import InvalidParameterError
from dualstore.domain.errors import OrganizationUnitNotFoundError
from tests.helpers.organization_units import make_unit


@pytest.fixture
def repository(sqlite_session: Session) -> SqlAlchemyOrganizationUnitRepository:
    repository = SqlAlchemyOrganizationUnitRepository(sqlite_session)
    repository.create(make_unit("Sales"))
    repository.create(make_unit("Engineering", handle="eng"))
    repository.create(make_unit("Platform", parent="ou-engineering"))
    repository.create(make_unit("Apps", parent="ou-engineering"))
    sqlite_session.commit()
    return repository


def test_lists_roots_ordered_by_name(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    roots = repository.list_roots(10, 0)

    assert repository.count_roots() == 2
    assert [unit.name for unit in roots] == ["Engineering", "Sales"]
    assert not any(unit.is_read_only for unit in roots)


def test_pages_children(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    assert repository.children_count("ou-engineering") == 2
    assert [unit.id for unit in repository.children("ou-engineering", 1, 0)] == ["ou-apps"]
    assert [unit.id for unit in repository.children("ou-engineering", 5, 1)] == ["ou-platform"]
    assert repository.children("ou-engineering", 0, 0) == []


def test_paging_rejects_negative_offset(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    with pytest.raises(InvalidParameterError, match="offset"):
        repository.children("ou-engineering", 5, -1)


def test_get_returns_full_unit(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    unit = repository.get("ou-platform")

    assert unit.parent == "ou-engineering"
    assert unit.handle == "platform"


def test_get_missing_unit_raises(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    with pytest.raises(OrganizationUnitNotFoundError) as exc:
        repository.get("ou-missing")

    assert exc.value.ou_id == "ou-missing"


def test_get_by_path(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    assert repository.get_by_path(["eng", "apps"]).id == "ou-apps"

    with pytest.raises(OrganizationUnitNotFoundError):
        repository.get_by_path(["sales", "apps"])


def test_conflicts_are_scoped_to_parent(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    assert repository.handle_conflict("eng", None)
    assert not repository.handle_conflict("eng", "ou-engineering")
    assert repository.name_conflict("Apps", "ou-engineering")
    assert not repository.name_conflict("Apps", None)


def test_update_and_delete(
    repository: SqlAlchemyOrganizationUnitRepository, sqlite_session: Session
) -> None:
    repository.update(make_unit("Sales and Marketing", ou_id="ou-sales", handle="sales"))
    sqlite_session.commit()
    assert repository.get("ou-sales").name == "Sales and Marketing"

    repository.delete("ou-sales")
    sqlite_session.commit()
    assert not repository.exists("ou-sales")


def test_update_and_delete_missing_unit_raise(
    repository: SqlAlchemyOrganizationUnitRepository,
) -> None:
    with pytest.raises(OrganizationUnitNotFoundError):
        repository.update(make_unit("Ghost"))
    with pytest.raises(OrganizationUnitNotFoundError):
        repository.delete("ou-ghost")


def test_has_child_resources(repository: SqlAlchemyOrganizationUnitRepository) -> None:
    assert repository.has_child_resources("ou-engineering")
    assert not repository.has_child_resources("ou-sales")
