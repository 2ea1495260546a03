"""Coordination helpers for resources held in a runtime store and a declarative store.

The runtime store is mutable (usually a database); the declarative store is loaded
from configuration files and never written to. These helpers only orchestrate
accessor callables supplied by the caller and keep no state between calls.
"""

from __future__ import annotations

from .aggregate import boolean_check, has_children, merge_count
from .errors import (
    CompositeStoreError,
    DeclarativeConflictError,
    DeclarativeOperationError,
    ImmutableResourceError,
    InvalidParameterError,
)
from .guard import create, delete, is_declarative, update
from .merge import merge_by_identity
from .paginate import FetchWindow, MergeResult, merge_list, merge_list_bounded
from .resolve import get

__all__ = [
    "CompositeStoreError",
    "DeclarativeConflictError",
    "DeclarativeOperationError",
    "FetchWindow",
    "ImmutableResourceError",
    "InvalidParameterError",
    "MergeResult",
    "boolean_check",
    "create",
    "delete",
    "get",
    "has_children",
    "is_declarative",
    "merge_by_identity",
    "merge_count",
    "merge_list",
    "merge_list_bounded",
    "update",
]
