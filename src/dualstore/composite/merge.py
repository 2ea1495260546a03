"""Identity-keyed merger for use with the pagination helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dualstore.composite.ports import IdentityExtractor


def merge_by_identity[T](
    first: Iterable[T],
    second: Iterable[T],
    *,
    identity: IdentityExtractor[T],
) -> list[T]:
    """Concatenate ``first`` and ``second``, keeping the first item seen per identity."""

    seen: set[str] = set()
    merged: list[T] = []
    for items in (first, second):
        for item in items:
            key = identity(item)
            if key in seen:
                continue
            seen.add(key)
            merged.append(item)
    return merged


__all__ = ["merge_by_identity"]
