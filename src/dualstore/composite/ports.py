"""Accessor contracts supplied by callers of the composite helpers.

Every accessor talks to exactly one backing store. The helpers never hold on to
an accessor beyond the call it was passed to.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

type Getter[T] = Callable[[], T]
type Existence = Callable[[str], bool]
type Checker = Callable[[], bool]
type Counter = Callable[[], int]
type Fetcher[T] = Callable[[int], Sequence[T]]
type Creator[T] = Callable[[T], None]
type Updater[T] = Callable[[T], None]
type Deleter = Callable[[str], None]
type IdentityExtractor[T] = Callable[[T], str]
type Merger[T] = Callable[[Sequence[T], Sequence[T]], Sequence[T]]
type ErrorFactory = Callable[[str], Exception]


__all__ = [
    "Checker",
    "Counter",
    "Creator",
    "Deleter",
    "ErrorFactory",
    "Existence",
    "Fetcher",
    "Getter",
    "IdentityExtractor",
    "Merger",
    "Updater",
]
