"""Dual-store lookup: runtime store first, declarative store as fallback."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dualstore.composite.ports import Getter

log = getLogger(__name__)


def get[T](
    primary: Getter[T],
    declarative: Getter[T],
    *,
    not_found: type[Exception],
) -> T:
    """Return the entity from the runtime store, falling back to the declarative store.

    ``not_found`` is the exception type both getters raise for a missing entity.
    Only that type triggers the fallback; any other error from ``primary`` is
    propagated untouched. Whatever the declarative getter raises is reported as the
    runtime store's not-found error.
    """

    try:
        return primary()
    except not_found as exc:
        missing = exc

    try:
        return declarative()
    except Exception as exc:  # noqa: BLE001
        log.debug("Declarative lookup failed, reporting not found: %s", exc)
        raise missing from None


__all__ = ["get"]
