"""Merged pagination over a runtime store and a declarative store.

Two strategies are provided:

``merge_list``
    Fetches everything from both stores, merges and slices. Only suitable for
    small collections such as root-level configuration objects.

``merge_list_bounded``
    Scatter-gather: each store is asked for at most ``depth = offset + limit``
    items, and the whole call is refused up front when the combined count is
    above ``max_records``. In that case no fetcher is invoked at all.

Both rely on the caller's merger for deduplication and ordering, and only ever
slice its output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from dualstore.composite.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dualstore.composite.ports import Counter, Fetcher, Merger

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FetchWindow:
    """Requested page plus an optional hard cap (``max_records == 0`` means no cap)."""

    offset: int = 0
    limit: int = 0
    max_records: int = 0

    def validate(self) -> None:
        for name, value in (
            ("limit", self.limit),
            ("offset", self.offset),
            ("max_records", self.max_records),
        ):
            if value < 0:
                raise InvalidParameterError(name, value)

    @property
    def end(self) -> int:
        return self.offset + self.limit

    def cap_exceeded(self, total: int) -> bool:
        return self.max_records > 0 and total > self.max_records

    def page[T](self, merged: Sequence[T]) -> list[T]:
        if self.offset >= len(merged):
            return []
        return list(merged[self.offset : min(self.end, len(merged))])


@dataclass(frozen=True, slots=True)
class MergeResult[T]:
    """Page produced by ``merge_list_bounded``.

    ``limit_exceeded`` is only ever set together with an empty ``items``.
    """

    items: list[T] = field(default_factory=list)
    limit_exceeded: bool = False


def merge_list[T](
    primary_counter: Counter,
    declarative_counter: Counter,
    primary_fetcher: Fetcher[T],
    declarative_fetcher: Fetcher[T],
    merger: Merger[T],
    *,
    limit: int,
    offset: int,
) -> list[T]:
    """Fetch both stores completely, merge, then return the requested page."""

    window = FetchWindow(offset=offset, limit=limit)
    window.validate()

    primary_count = primary_counter()
    declarative_count = declarative_counter()
    total = primary_count + declarative_count
    if offset >= total:
        log.debug("Offset %s beyond combined total %s, skipping fetch", offset, total)
        return []

    primary_items = primary_fetcher(primary_count)
    declarative_items = declarative_fetcher(declarative_count)
    return window.page(merger(primary_items, declarative_items))


def merge_list_bounded[T](
    primary_counter: Counter,
    declarative_counter: Counter,
    primary_fetcher: Fetcher[T],
    declarative_fetcher: Fetcher[T],
    merger: Merger[T],
    *,
    limit: int,
    offset: int,
    max_records: int,
) -> MergeResult[T]:
    """Scatter-gather a single page from both stores under a hard record cap.

    Example: ``offset=20, limit=10`` against stores holding 50 and 100 items
    fetches 30 items from each, merges up to 60 and returns ``merged[20:30]``.
    """

    window = FetchWindow(offset=offset, limit=limit, max_records=max_records)
    window.validate()

    primary_count = primary_counter()
    declarative_count = declarative_counter()
    total = primary_count + declarative_count

    if window.cap_exceeded(total):
        log.debug("Combined total %s exceeds max_records %s", total, max_records)
        return MergeResult(items=[], limit_exceeded=True)

    if offset >= total:
        log.debug("Offset %s beyond combined total %s, skipping fetch", offset, total)
        return MergeResult(items=[], limit_exceeded=False)

    # Merge order is unknown until both sides are combined, so each store must
    # be able to supply the full depth on its own.
    depth = min(window.end, total)
    primary_items = primary_fetcher(min(depth, primary_count))
    declarative_items = declarative_fetcher(min(depth, declarative_count))

    return MergeResult(
        items=window.page(merger(primary_items, declarative_items)),
        limit_exceeded=False,
    )


__all__ = ["FetchWindow", "MergeResult", "merge_list", "merge_list_bounded"]
