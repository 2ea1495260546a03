from __future__ import annotations

import logging

import pytest
from sqlalchemy.orm import Session  # noqa: TC002

from dualstore.adapters.declarative import DeclarativeOrganizationUnitStore
from dualstore.adapters.sqlalchemy import SqlAlchemyOrganizationUnitRepository
from dualstore.composite import DeclarativeConflictError
from dualstore.domain import (
    CompositeOrganizationUnitStore,
    ImmutableOrganizationUnitError,
    OrganizationUnitNotFoundError,
    ResultLimitExceededError,
    merge_organization_units,
)
from tests.helpers.organization_units import make_basic, make_unit


@pytest.fixture
def runtime(sqlite_session: Session) -> SqlAlchemyOrganizationUnitRepository:
    repository = SqlAlchemyOrganizationUnitRepository(sqlite_session)
    repository.create(make_unit("Sales"))
    repository.create(make_unit("Tooling", parent="ou-engineering"))
    sqlite_session.commit()
    return repository


@pytest.fixture
def declarative() -> DeclarativeOrganizationUnitStore:
    return DeclarativeOrganizationUnitStore(
        [
            make_unit("Engineering", handle="eng"),
            make_unit("Platform", parent="ou-engineering"),
        ]
    )


@pytest.fixture
def store(
    declarative: DeclarativeOrganizationUnitStore,
    runtime: SqlAlchemyOrganizationUnitRepository,
) -> CompositeOrganizationUnitStore:
    return CompositeOrganizationUnitStore(declarative, runtime, max_records=100)


def test_merge_organization_units_flags_read_only_and_dedupes() -> None:
    merged = merge_organization_units(
        [make_basic("Sales"), make_basic("Shared", ou_id="ou-shared")],
        [make_basic("Shared copy", ou_id="ou-shared"), make_basic("Engineering")],
    )

    assert [(unit.id, unit.is_read_only) for unit in merged] == [
        ("ou-sales", False),
        ("ou-shared", False),
        ("ou-engineering", True),
    ]
    assert merged[1].name == "Shared"


def test_get_prefers_runtime_then_declarative(store: CompositeOrganizationUnitStore) -> None:
    assert store.get("ou-sales").name == "Sales"
    assert store.get("ou-platform").parent == "ou-engineering"


def test_get_missing_unit_raises_not_found(store: CompositeOrganizationUnitStore) -> None:
    with pytest.raises(OrganizationUnitNotFoundError) as exc:
        store.get("ou-missing")

    assert exc.value.ou_id == "ou-missing"


def test_get_by_path_resolves_declarative_units(store: CompositeOrganizationUnitStore) -> None:
    assert store.get_by_path(["eng", "platform"]).id == "ou-platform"


def test_roots_span_both_stores(store: CompositeOrganizationUnitStore) -> None:
    roots = store.list_roots(10, 0)

    assert store.count_roots() == 2
    assert [(unit.id, unit.is_read_only) for unit in roots] == [
        ("ou-sales", False),
        ("ou-engineering", True),
    ]
    assert [unit.id for unit in store.list_roots(1, 1)] == ["ou-engineering"]


def test_children_span_both_stores(store: CompositeOrganizationUnitStore) -> None:
    children = store.children("ou-engineering", 10, 0)

    assert store.children_count("ou-engineering") == 2
    assert {unit.id for unit in children} == {"ou-tooling", "ou-platform"}
    assert store.has_child_resources("ou-engineering")
    assert not store.has_child_resources("ou-sales")


def test_listing_over_cap_raises(
    declarative: DeclarativeOrganizationUnitStore,
    runtime: SqlAlchemyOrganizationUnitRepository,
) -> None:
    store = CompositeOrganizationUnitStore(declarative, runtime, max_records=1)

    with pytest.raises(ResultLimitExceededError) as exc:
        store.list_roots(10, 0)

    assert exc.value.max_records == 1


def test_existence_and_conflicts_consult_both_stores(
    store: CompositeOrganizationUnitStore,
) -> None:
    assert store.exists("ou-engineering")
    assert store.exists("ou-sales")
    assert not store.exists("ou-missing")
    assert store.handle_conflict("eng", None)
    assert store.name_conflict("Sales", None)
    assert store.name_conflict("Platform", "ou-engineering")
    assert not store.name_conflict("Platform", None)


def test_is_declarative(store: CompositeOrganizationUnitStore) -> None:
    assert store.is_declarative("ou-engineering")
    assert not store.is_declarative("ou-sales")


def test_is_declarative_treats_store_errors_as_false(
    runtime: SqlAlchemyOrganizationUnitRepository,
    caplog: pytest.LogCaptureFixture,
) -> None:
    class BrokenDeclarativeStore(DeclarativeOrganizationUnitStore):
        def exists(self, ou_id: str) -> bool:
            raise OSError("resource directory vanished")

    store = CompositeOrganizationUnitStore(BrokenDeclarativeStore(), runtime)

    with caplog.at_level(logging.WARNING):
        assert store.is_declarative("ou-sales") is False

    assert "ou-sales" in caplog.text


def test_create_writes_to_runtime(
    store: CompositeOrganizationUnitStore,
    runtime: SqlAlchemyOrganizationUnitRepository,
) -> None:
    store.create(make_unit("Support"))

    assert runtime.exists("ou-support")


def test_create_rejects_declarative_id(
    store: CompositeOrganizationUnitStore,
    runtime: SqlAlchemyOrganizationUnitRepository,
) -> None:
    with pytest.raises(DeclarativeConflictError, match="ou-engineering"):
        store.create(make_unit("Engineering"))

    assert not runtime.exists("ou-engineering")


def test_update_and_delete_reject_declarative_units(
    store: CompositeOrganizationUnitStore,
) -> None:
    with pytest.raises(ImmutableOrganizationUnitError) as exc:
        store.update(make_unit("Renamed", ou_id="ou-platform"))
    assert str(exc.value) == (
        "organization unit with ID ou-platform is declarative and cannot be modified"
    )

    with pytest.raises(ImmutableOrganizationUnitError):
        store.delete("ou-engineering")


def test_update_and_delete_runtime_units(
    store: CompositeOrganizationUnitStore,
    runtime: SqlAlchemyOrganizationUnitRepository,
) -> None:
    store.update(make_unit("Sales EMEA", ou_id="ou-sales", handle="sales"))
    assert runtime.get("ou-sales").name == "Sales EMEA"

    store.delete("ou-sales")
    assert not runtime.exists("ou-sales")
