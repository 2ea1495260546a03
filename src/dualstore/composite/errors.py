"""Error taxonomy for composite store coordination."""

from __future__ import annotations

from typing import Final, Literal

type WriteOperation = Literal["create", "update", "delete"]

_OPERATION_CODES: Final[dict[WriteOperation, str]] = {
    "create": "DCR-1001",
    "update": "DCR-1002",
    "delete": "DCR-1003",
}

_OPERATION_DESCRIPTIONS: Final[dict[WriteOperation, str]] = {
    "create": "Creating declarative resources is not permitted",
    "update": "Updating declarative resources is not permitted",
    "delete": "Deleting declarative resources is not permitted",
}


class CompositeStoreError(Exception):
    """Base class for errors raised while coordinating two stores."""


class InvalidParameterError(CompositeStoreError, ValueError):
    """Raised when a paging parameter is negative."""

    def __init__(self, name: str, value: int) -> None:
        super().__init__(f"{name} must be non-negative, got {value}")
        self.name = name
        self.value = value


class DeclarativeConflictError(CompositeStoreError):
    """Raised when a new runtime resource would shadow a declarative one."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"resource with ID {resource_id} already exists as declarative resource")
        self.resource_id = resource_id


class ImmutableResourceError(CompositeStoreError):
    """Raised when an update or delete targets a declarative resource."""

    resource_kind = "resource"

    def __init__(self, resource_id: str) -> None:
        super().__init__(
            f"{self.resource_kind} with ID {resource_id} is declarative and cannot be modified"
        )
        self.resource_id = resource_id


class DeclarativeOperationError(CompositeStoreError):
    """Raised when a write reaches a store that only serves declarative resources."""

    def __init__(self, operation: WriteOperation) -> None:
        super().__init__(f"Declarative resource {operation} operation is not allowed")
        self.operation: WriteOperation = operation
        self.code = _OPERATION_CODES[operation]
        self.description = _OPERATION_DESCRIPTIONS[operation]


__all__ = [
    "CompositeStoreError",
    "DeclarativeConflictError",
    "DeclarativeOperationError",
    "ImmutableResourceError",
    "InvalidParameterError",
    "WriteOperation",
]
