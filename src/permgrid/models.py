"""Data models for permission groups, database metadata and the graph.

These are Pydantic models built from backend payloads.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from .config import GridConfig


def group_display_name(name: str, config: Optional[GridConfig] = None) -> str:
    """Human name of a group; built-in groups get friendlier labels."""
    config = config or GridConfig()
    if name == config.admin_group_name:
        return config.admin_display_name
    if name == config.default_group_name:
        return config.default_display_name
    return name


class Group(BaseModel):
    """A permission group (one grid column)."""

    id: int
    name: str
    display_name: str = ""
    editable: bool = True
    member_count: Optional[int] = None

    @model_validator(mode="after")
    def derive_builtin_fields(self, info: ValidationInfo) -> "Group":
        """Fill display_name and editable from the group name unless given.

        The administrative group is never editable.
        """
        config = (info.context or {}).get("config") or GridConfig()
        if not self.display_name:
            self.display_name = group_display_name(self.name, config)
        if "editable" not in self.model_fields_set:
            self.editable = self.name != config.admin_group_name
        return self

    @classmethod
    def from_api(cls, payload: Mapping[str, Any], config: Optional[GridConfig] = None) -> "Group":
        """Build a group from a backend record using ``config`` for built-in names."""
        return cls.model_validate(payload, context={"config": config})


class Table(BaseModel):
    """A table of a database, as listed by the metadata endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    schema_name: str = Field(alias="schema")
    display_name: str


class Database(BaseModel):
    """A database with its ordered table list."""

    id: int
    name: str
    tables: list[Table] = Field(default_factory=list)

    def schema_names(self) -> list[str]:
        """Distinct schema names, in first-occurrence order."""
        return list(dict.fromkeys(table.schema_name for table in self.tables))

    def tables_in(self, schema_name: str) -> list[Table]:
        return [table for table in self.tables if table.schema_name == schema_name]


def _coerce_id(key: Any) -> Any:
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return key


class PermissionGraph(BaseModel):
    """The permission tree of every group plus its revision token."""

    revision: Any
    groups: dict[int, dict[int, dict[str, Any]]] = Field(default_factory=dict)

    @field_validator("groups")
    @classmethod
    def coerce_table_ids(cls, v: dict[int, dict[int, dict[str, Any]]]) -> dict[int, dict[int, dict[str, Any]]]:
        """Turn numeric table-id keys from JSON back into ints."""
        for databases in v.values():
            for db in databases.values():
                schemas = db.get("schemas")
                if not isinstance(schemas, Mapping):
                    continue
                db["schemas"] = {
                    name: ({_coerce_id(k): t for k, t in tables.items()} if isinstance(tables, Mapping) else tables)
                    for name, tables in schemas.items()
                }
        return v


class Location(BaseModel):
    """Grid location from the routing layer.

    No database selects the database grid, a database alone selects the
    schema grid, and a database with a schema selects the table grid.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    database_id: Optional[int] = Field(default=None, alias="databaseId")
    schema_name: Optional[str] = Field(default=None, alias="schemaName")

    @field_validator("database_id", mode="before")
    @classmethod
    def parse_database_id(cls, v: Any) -> Any:
        """Accept integer-as-string ids; an empty string means no database."""
        if v == "" or v is None:
            return None
        return v


__all__ = [
    "Database",
    "Group",
    "Location",
    "PermissionGraph",
    "Table",
    "group_display_name",
]
