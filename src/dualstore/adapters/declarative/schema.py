"""Pydantic models describing declarative resource documents."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dualstore.domain.model import OrganizationUnit


def _scalar_to_text(value: object) -> object:
    # YAML reads unquoted ids such as ``42`` as integers.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


def _blank_to_none(value: object) -> object:
    value = _scalar_to_text(value)
    if isinstance(value, str):
        return value or None
    return value


class DeclarativeBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class OrganizationUnitDocument(DeclarativeBaseModel):
    """One organization unit as written in a YAML resource file."""

    id: str = Field(min_length=1)
    handle: str = Field(min_length=1, pattern=r"^[^/]+$")
    name: str = Field(min_length=1)
    description: str | None = None
    parent: str | None = None

    _normalize_text = field_validator("id", "handle", "name", mode="before")(_scalar_to_text)
    _normalize_optional = field_validator("description", "parent", mode="before")(
        _blank_to_none
    )

    def to_domain(self) -> OrganizationUnit:
        return OrganizationUnit(
            id=self.id,
            handle=self.handle,
            name=self.name,
            description=self.description,
            parent=self.parent,
        )
