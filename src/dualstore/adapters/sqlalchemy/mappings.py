"""SQLAlchemy table metadata for the runtime store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, Index, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# parent_id may point at a declarative unit, so it carries no foreign key.
organization_unit_table = Table(
    "organization_unit",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("handle", String, nullable=False),
    Column("name", String, nullable=False),
    Column("description", String, nullable=True),
    Column("parent_id", String(36), nullable=True),
    Index("ix_organization_unit_parent_handle", "parent_id", "handle"),
    Index("ix_organization_unit_parent_name", "parent_id", "name"),
)


def create_all_tables(engine: Engine) -> None:
    log.debug("Creating runtime store tables on %s", engine.url)
    metadata.create_all(engine)
