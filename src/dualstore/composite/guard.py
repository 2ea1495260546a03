"""Write guards that keep declarative resources immutable.

Each guard finishes the declarative existence check before touching the runtime
store. The runtime mutator runs at most once, and never after a positive or
failing check.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from dualstore.composite.errors import DeclarativeConflictError

if TYPE_CHECKING:
    from dualstore.composite.ports import (
        Creator,
        Deleter,
        ErrorFactory,
        Existence,
        IdentityExtractor,
        Updater,
    )

log = getLogger(__name__)


def create[T](
    entity: T,
    identity: IdentityExtractor[T],
    declarative_exists: Existence,
    primary_create: Creator[T],
) -> None:
    """Create ``entity`` in the runtime store unless its id is declarative."""

    resource_id = identity(entity)
    if declarative_exists(resource_id):
        raise DeclarativeConflictError(resource_id)
    primary_create(entity)


def update[T](
    entity: T,
    identity: IdentityExtractor[T],
    declarative_exists: Existence,
    primary_update: Updater[T],
    *,
    immutable_error: ErrorFactory,
) -> None:
    """Update ``entity`` in the runtime store unless its id is declarative."""

    resource_id = identity(entity)
    if declarative_exists(resource_id):
        raise immutable_error(resource_id)
    primary_update(entity)


def delete(
    resource_id: str,
    declarative_exists: Existence,
    primary_delete: Deleter,
    *,
    immutable_error: ErrorFactory,
) -> None:
    """Delete ``resource_id`` from the runtime store unless it is declarative."""

    if declarative_exists(resource_id):
        raise immutable_error(resource_id)
    primary_delete(resource_id)


def is_declarative(resource_id: str, declarative_exists: Existence) -> bool:
    """Return whether ``resource_id`` is served by the declarative store.

    A failing lookup counts as "not declarative".
    """

    try:
        return bool(declarative_exists(resource_id))
    except Exception:  # noqa: BLE001
        log.warning("Declarative existence check failed for %s", resource_id, exc_info=True)
        return False


__all__ = ["create", "delete", "is_declarative", "update"]
