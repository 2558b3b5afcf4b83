"""Company schema.

Defines the two tables behind the company store:

| Table       | Column        | Constraint                          |
|-------------|---------------|-------------------------------------|
| departments | id            | PRIMARY KEY                         |
| departments | name          | NOT NULL, UNIQUE                    |
| employees   | id            | PRIMARY KEY                         |
| employees   | name          | NOT NULL, UNIQUE                    |
| employees   | department_id | NOT NULL, REFERENCES departments(id) |

Identifiers are client-generated text tokens, never auto-increment integers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, MetaData, Table, Text

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

__all__ = ["metadata", "departments", "employees", "create_schema"]

logger = logging.getLogger(__name__)

# Constraint names: pk_<table>, uq_<table>_<col>, fk_<table>_<col>_<reftable>
metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    }
)

departments = Table(
    "departments",
    metadata,
    Column("id", Text, primary_key=True, comment="Client-generated identifier."),
    Column(
        "name",
        Text,
        nullable=False,
        unique=True,
        comment="Normalized (trimmed, lower-cased) department name.",
    ),
    comment="One row per department.",
)

employees = Table(
    "employees",
    metadata,
    Column("id", Text, primary_key=True, comment="Client-generated identifier."),
    Column(
        "name",
        Text,
        nullable=False,
        unique=True,
        comment="Trimmed employee name, case preserved.",
    ),
    Column(
        "department_id",
        Text,
        ForeignKey("departments.id"),
        nullable=False,
        comment="Department the employee belongs to.",
    ),
    comment="One row per employee.",
)


def create_schema(engine: Engine) -> None:
    """Create any missing company tables. Existing tables are left untouched."""
    logger.debug("Ensuring company tables exist")
    metadata.create_all(engine, checkfirst=True)
