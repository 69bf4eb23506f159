"""Permission tree classification, navigation and mutation.

Defines:
- AccessLevel / CellKind / GridType: value and dispatch constants
- classify(): raw tree value → access level
- database_access() / schema_access() / table_access(): inherited access
- set_permission(): pure tree update with scalar promotion
- get_in() / set_in() / trees_differ(): persistent path helpers
"""

from .access import Node, PerChild, Uniform, as_node, classify, is_scalar, to_raw
from .constants import AccessLevel, CellKind, GridType
from .inheritance import (
    DatabaseCell,
    SchemaCell,
    TableCell,
    database_access,
    schema_access,
    table_access,
)
from .paths import Path, PermissionTree, get_in, set_in, trees_differ
from .updater import set_permission

__all__ = [
    "AccessLevel",
    "CellKind",
    "DatabaseCell",
    "GridType",
    "Node",
    "Path",
    "PerChild",
    "PermissionTree",
    "SchemaCell",
    "TableCell",
    "Uniform",
    "as_node",
    "classify",
    "database_access",
    "get_in",
    "is_scalar",
    "schema_access",
    "set_in",
    "set_permission",
    "table_access",
    "to_raw",
    "trees_differ",
]
