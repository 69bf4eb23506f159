"""Access levels, cell kinds and grid types.

Provides:
- ``AccessLevel`` — permission value constants stored in the tree.
- ``CellKind`` — the editable column kinds of a grid.
- ``GridType`` — the granularity of a derived grid.
"""

from __future__ import annotations

from enum import Enum


class AccessLevel:
    """Canonical access level values.

    Any other truthy scalar found in a permission tree is treated as an
    opaque custom grant and passed through unchanged::

        classify("all")        → "all"
        classify({"public": "all"}) → "controlled"
        classify(None)         → "none"
    """

    NONE = "none"
    CONTROLLED = "controlled"
    ALL = "all"

    # ── Native query access ─────────────────────────────
    WRITE = "write"
    READ = "read"


class CellKind(str, Enum):
    """Editable cell kinds, one updater per kind."""

    NATIVE = "native"
    SCHEMAS = "schemas"
    TABLES = "tables"
    FIELDS = "fields"


class GridType(str, Enum):
    """Granularity of a derived grid."""

    DATABASE = "database"
    SCHEMA = "schema"
    TABLE = "table"


__all__ = [
    "AccessLevel",
    "CellKind",
    "GridType",
]
