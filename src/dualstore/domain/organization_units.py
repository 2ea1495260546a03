"""Composite organization unit store.

Reads combine the runtime store and the declarative store; writes only reach the
runtime store, and never for units that are defined declaratively.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING, cast

from dualstore import composite
from dualstore.config.declarative import DEFAULT_MAX_COMPOSITE_RECORDS
from dualstore.domain.errors import (
    ImmutableOrganizationUnitError,
    OrganizationUnitNotFoundError,
    ResultLimitExceededError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dualstore.composite.ports import Counter, Fetcher
    from dualstore.domain.model import OrganizationUnit, OrganizationUnitBasic
    from dualstore.domain.ports.persistence import OrganizationUnitStore

log = getLogger(__name__)


def _unit_id(unit: OrganizationUnit | OrganizationUnitBasic) -> str:
    return unit.id


def merge_organization_units(
    runtime_units: Sequence[OrganizationUnitBasic],
    declarative_units: Sequence[OrganizationUnitBasic],
) -> list[OrganizationUnitBasic]:
    """Merge listings from both stores, runtime units first, deduplicated by id.

    Runtime units are flagged writable and declarative units read-only.
    """

    return composite.merge_by_identity(
        (replace(unit, is_read_only=False) for unit in runtime_units),
        (replace(unit, is_read_only=True) for unit in declarative_units),
        identity=_unit_id,
    )


class CompositeOrganizationUnitStore:
    """``OrganizationUnitStore`` spanning a declarative and a runtime store."""

    def __init__(
        self,
        declarative: OrganizationUnitStore,
        runtime: OrganizationUnitStore,
        *,
        max_records: int = DEFAULT_MAX_COMPOSITE_RECORDS,
    ) -> None:
        self.declarative = declarative
        self.runtime = runtime
        self.max_records = max_records

    # Reads -----------------------------------------------------------------

    def count_roots(self) -> int:
        return composite.merge_count(self.runtime.count_roots, self.declarative.count_roots)

    def list_roots(self, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._bounded_list(
            self.runtime.count_roots,
            self.declarative.count_roots,
            lambda count: self.runtime.list_roots(count, 0),
            lambda count: self.declarative.list_roots(count, 0),
            limit=limit,
            offset=offset,
        )

    def get(self, ou_id: str) -> OrganizationUnit:
        return composite.get(
            lambda: self.runtime.get(ou_id),
            lambda: self.declarative.get(ou_id),
            not_found=OrganizationUnitNotFoundError,
        )

    def get_by_path(self, handles: Sequence[str]) -> OrganizationUnit:
        return composite.get(
            lambda: self.runtime.get_by_path(handles),
            lambda: self.declarative.get_by_path(handles),
            not_found=OrganizationUnitNotFoundError,
        )

    def exists(self, ou_id: str) -> bool:
        return composite.boolean_check(
            lambda: self.declarative.exists(ou_id),
            lambda: self.runtime.exists(ou_id),
        )

    def is_declarative(self, ou_id: str) -> bool:
        return composite.is_declarative(ou_id, self.declarative.exists)

    def name_conflict(self, name: str, parent: str | None) -> bool:
        return composite.boolean_check(
            lambda: self.declarative.name_conflict(name, parent),
            lambda: self.runtime.name_conflict(name, parent),
        )

    def handle_conflict(self, handle: str, parent: str | None) -> bool:
        return composite.boolean_check(
            lambda: self.declarative.handle_conflict(handle, parent),
            lambda: self.runtime.handle_conflict(handle, parent),
        )

    def has_child_resources(self, ou_id: str) -> bool:
        return composite.has_children(
            lambda: self.declarative.has_child_resources(ou_id),
            lambda: self.runtime.has_child_resources(ou_id),
        )

    def children_count(self, ou_id: str) -> int:
        return composite.merge_count(
            lambda: self.runtime.children_count(ou_id),
            lambda: self.declarative.children_count(ou_id),
        )

    def children(self, ou_id: str, limit: int, offset: int) -> list[OrganizationUnitBasic]:
        return self._bounded_list(
            lambda: self.runtime.children_count(ou_id),
            lambda: self.declarative.children_count(ou_id),
            lambda count: self.runtime.children(ou_id, count, 0),
            lambda count: self.declarative.children(ou_id, count, 0),
            limit=limit,
            offset=offset,
        )

    # Writes ----------------------------------------------------------------

    def create(self, ou: OrganizationUnit) -> None:
        composite.create(ou, _unit_id, self.declarative.exists, self.runtime.create)

    def update(self, ou: OrganizationUnit) -> None:
        composite.update(
            ou,
            _unit_id,
            self.declarative.exists,
            self.runtime.update,
            immutable_error=ImmutableOrganizationUnitError,
        )

    def delete(self, ou_id: str) -> None:
        composite.delete(
            ou_id,
            self.declarative.exists,
            self.runtime.delete,
            immutable_error=ImmutableOrganizationUnitError,
        )

    def _bounded_list(
        self,
        runtime_counter: Counter,
        declarative_counter: Counter,
        runtime_fetcher: Fetcher[OrganizationUnitBasic],
        declarative_fetcher: Fetcher[OrganizationUnitBasic],
        *,
        limit: int,
        offset: int,
    ) -> list[OrganizationUnitBasic]:
        result = composite.merge_list_bounded(
            runtime_counter,
            declarative_counter,
            runtime_fetcher,
            declarative_fetcher,
            merge_organization_units,
            limit=limit,
            offset=offset,
            max_records=self.max_records,
        )
        if result.limit_exceeded:
            log.info("Composite listing refused: more than %s records", self.max_records)
            raise ResultLimitExceededError(self.max_records)
        return result.items


if TYPE_CHECKING:
    _store_stub = cast("OrganizationUnitStore", object())
    _store_check: OrganizationUnitStore = CompositeOrganizationUnitStore(_store_stub, _store_stub)
