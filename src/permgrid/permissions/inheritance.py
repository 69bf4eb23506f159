"""Effective access resolution down the permission hierarchy.

Inheritance is implicit: a scalar at a coarser level governs every
descendant until a per-child mapping ("controlled") introduces overrides.

Provides:
- ``database_access()`` — native + schemas access of one database.
- ``schema_access()`` — tables access of one schema.
- ``table_access()`` — fields access of one table.

Field ids are never addressed; fields always read as the inherited level
or ``none``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .access import classify
from .constants import AccessLevel
from .paths import get_in


@dataclass(frozen=True)
class DatabaseCell:
    native: Optional[str]
    schemas: str


@dataclass(frozen=True)
class SchemaCell:
    tables: str


@dataclass(frozen=True)
class TableCell:
    fields: str


def database_access(tree: Any, group_id: Any, db_id: Any) -> DatabaseCell:
    """Resolve database-level access for one group.

    ``native`` is passed through raw; ``schemas`` is classified.
    """
    return DatabaseCell(
        native=get_in(tree, [group_id, db_id, "native"]),
        schemas=classify(get_in(tree, [group_id, db_id, "schemas"])),
    )


def schema_access(tree: Any, group_id: Any, db_id: Any, schema_name: str) -> SchemaCell:
    """Resolve tables access of ``schema_name`` for one group."""
    schemas = database_access(tree, group_id, db_id).schemas
    if schemas != AccessLevel.CONTROLLED:
        return SchemaCell(tables=schemas)
    return SchemaCell(tables=classify(get_in(tree, [group_id, db_id, "schemas", schema_name])))


def table_access(
    tree: Any,
    group_id: Any,
    db_id: Any,
    schema_name: str,
    table_id: Any,
) -> TableCell:
    """Resolve fields access of one table for one group."""
    tables = schema_access(tree, group_id, db_id, schema_name).tables
    if tables != AccessLevel.CONTROLLED:
        return TableCell(fields=tables)
    return TableCell(fields=classify(get_in(tree, [group_id, db_id, "schemas", schema_name, table_id])))


__all__ = [
    "DatabaseCell",
    "SchemaCell",
    "TableCell",
    "database_access",
    "schema_access",
    "table_access",
]
