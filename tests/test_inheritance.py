"""Tests for inherited access resolution."""

from __future__ import annotations

from permgrid import (
    AccessLevel,
    DatabaseCell,
    SchemaCell,
    TableCell,
    database_access,
    schema_access,
    table_access,
)

from .conftest import ALL_USERS_ID, ANALYSTS_ID, SAMPLE_DB, WAREHOUSE_DB


class TestDatabaseAccess:
    """Tests for database_access()."""

    def test_scalar_schemas(self, tree) -> None:
        assert database_access(tree, ANALYSTS_ID, SAMPLE_DB) == DatabaseCell(native="read", schemas="all")

    def test_controlled_schemas(self, tree) -> None:
        cell = database_access(tree, ALL_USERS_ID, WAREHOUSE_DB)
        assert cell.native == "none"
        assert cell.schemas == AccessLevel.CONTROLLED

    def test_missing_group(self, tree) -> None:
        """Unknown groups resolve to no access."""
        assert database_access(tree, 999, SAMPLE_DB) == DatabaseCell(native=None, schemas=AccessLevel.NONE)

    def test_missing_tree(self) -> None:
        assert database_access(None, 1, 1).schemas == AccessLevel.NONE


class TestSchemaAccess:
    """Tests for schema_access()."""

    def test_uniform_inheritance(self, tree) -> None:
        """A scalar schemas grant applies to every schema."""
        for schema in ("public", "reporting", "anything"):
            assert schema_access(tree, ANALYSTS_ID, WAREHOUSE_DB, schema) == SchemaCell(tables="all")

    def test_controlled_lookup(self, tree) -> None:
        assert schema_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "public").tables == AccessLevel.CONTROLLED
        assert schema_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "reporting").tables == "all"

    def test_controlled_missing_schema(self, tree) -> None:
        """A schema absent from a controlled mapping has no access."""
        assert schema_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "staging").tables == AccessLevel.NONE


class TestTableAccess:
    """Tests for table_access()."""

    def test_inherits_schema_level(self, tree) -> None:
        """Fields follow the schema tables level when it is not controlled."""
        for table_id in (201, 202):
            fields = table_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "reporting", table_id).fields
            assert fields == schema_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "reporting").tables

    def test_inherits_from_database(self, tree) -> None:
        assert table_access(tree, ANALYSTS_ID, WAREHOUSE_DB, "public", 101) == TableCell(fields="all")

    def test_controlled_lookup(self, tree) -> None:
        assert table_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "public", 101).fields == "all"
        assert table_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "public", 102).fields == AccessLevel.NONE

    def test_controlled_missing_table(self, tree) -> None:
        assert table_access(tree, ALL_USERS_ID, WAREHOUSE_DB, "public", 999).fields == AccessLevel.NONE
