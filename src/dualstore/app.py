"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from dualstore.adapters.declarative import DeclarativeOrganizationUnitStore, load_organization_units
from dualstore.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from dualstore.config import DeclarativeConfig, StoreMode, get_declarative_config
from dualstore.domain import CompositeOrganizationUnitStore, OrganizationUnitService

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dualstore.domain.ports.persistence import OrganizationUnitStore
    from dualstore.domain.ports.unit_of_work import OrganizationUnitUnitOfWork

UnitOfWorkFactory = Callable[[], "OrganizationUnitUnitOfWork"]


log = getLogger(__name__)


def load_declarative_store(config: DeclarativeConfig) -> DeclarativeOrganizationUnitStore:
    """Load the declarative store for the configured mode (empty in mutable mode)."""

    if config.store_mode is StoreMode.MUTABLE:
        return DeclarativeOrganizationUnitStore()
    return DeclarativeOrganizationUnitStore(load_organization_units(config.resources_dir))


def build_organization_unit_store(
    mode: StoreMode,
    *,
    runtime: OrganizationUnitStore,
    declarative: OrganizationUnitStore,
    max_records: int,
) -> OrganizationUnitStore:
    if mode is StoreMode.DECLARATIVE:
        return declarative
    if mode is StoreMode.COMPOSITE:
        return CompositeOrganizationUnitStore(declarative, runtime, max_records=max_records)
    return runtime


@contextmanager
def organization_unit_service(
    *,
    config: DeclarativeConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Iterator[OrganizationUnitService]:
    """Yield a service bound to the configured store; commit runtime changes on success."""

    effective_config = config or get_declarative_config()
    declarative = load_declarative_store(effective_config)
    log.debug(
        "Organization unit store mode=%s, declarative units=%s",
        effective_config.store_mode,
        len(declarative),
    )

    if effective_config.store_mode is StoreMode.DECLARATIVE:
        yield OrganizationUnitService(declarative, declarative=declarative)
        return

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyUnitOfWork

    with unit_of_work_factory() as uow:
        store = build_organization_unit_store(
            effective_config.store_mode,
            runtime=uow.repositories.organization_units,
            declarative=declarative,
            max_records=effective_config.max_composite_records,
        )
        composite = effective_config.store_mode is StoreMode.COMPOSITE
        yield OrganizationUnitService(store, declarative=declarative if composite else None)
        uow.commit()
