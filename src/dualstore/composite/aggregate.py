"""Boolean and count aggregation across the two stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dualstore.composite.ports import Checker, Counter


def boolean_check(declarative_checker: Checker, primary_checker: Checker) -> bool:
    """OR-combine a check over both stores, asking the declarative store first.

    A positive declarative answer short-circuits the runtime check.
    """

    if declarative_checker():
        return True
    return bool(primary_checker())


def has_children(declarative_checker: Checker, primary_checker: Checker) -> bool:
    """Return whether a resource has children in either store."""

    return boolean_check(declarative_checker, primary_checker)


def merge_count(primary_counter: Counter, declarative_counter: Counter) -> int:
    """Sum the counts reported by the runtime and declarative stores."""

    primary_count = primary_counter()
    declarative_count = declarative_counter()
    return primary_count + declarative_count


__all__ = ["boolean_check", "has_children", "merge_count"]
