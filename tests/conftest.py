"""Shared fixtures: two groups, two databases, a small permission graph."""

from __future__ import annotations

from typing import Any

import pytest
from permgrid import Database, Group, LocalPermissionsApi

ADMIN_ID = 1
ALL_USERS_ID = 2
ANALYSTS_ID = 3

SAMPLE_DB = 10
WAREHOUSE_DB = 20


@pytest.fixture
def groups_payload() -> list[dict[str, Any]]:
    return [
        {"id": ADMIN_ID, "name": "Admin", "member_count": 1},
        {"id": ALL_USERS_ID, "name": "Default", "member_count": 12},
        {"id": ANALYSTS_ID, "name": "Analysts", "member_count": 4},
    ]


@pytest.fixture
def databases_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": SAMPLE_DB,
            "name": "Sample Dataset",
            "tables": [
                {"id": 1, "schema": "PUBLIC", "display_name": "Orders"},
                {"id": 2, "schema": "PUBLIC", "display_name": "People"},
            ],
        },
        {
            "id": WAREHOUSE_DB,
            "name": "Warehouse",
            "tables": [
                {"id": 101, "schema": "public", "display_name": "Accounts"},
                {"id": 201, "schema": "reporting", "display_name": "Revenue"},
                {"id": 102, "schema": "public", "display_name": "Invoices"},
                {"id": 202, "schema": "reporting", "display_name": "Churn"},
            ],
        },
    ]


@pytest.fixture
def tree() -> dict[Any, Any]:
    return {
        ADMIN_ID: {
            SAMPLE_DB: {"native": "write", "schemas": "all"},
            WAREHOUSE_DB: {"native": "write", "schemas": "all"},
        },
        ALL_USERS_ID: {
            SAMPLE_DB: {"native": "none", "schemas": "none"},
            WAREHOUSE_DB: {
                "native": "none",
                "schemas": {
                    "public": {101: "all", 102: "none"},
                    "reporting": "all",
                },
            },
        },
        ANALYSTS_ID: {
            SAMPLE_DB: {"native": "read", "schemas": "all"},
            WAREHOUSE_DB: {"native": "none", "schemas": "all"},
        },
    }


@pytest.fixture
def groups(groups_payload: list[dict[str, Any]]) -> list[Group]:
    return [Group.from_api(group) for group in groups_payload]


@pytest.fixture
def databases(databases_payload: list[dict[str, Any]]) -> list[Database]:
    return [Database.model_validate(db) for db in databases_payload]


@pytest.fixture
def api(groups_payload, databases_payload, tree) -> LocalPermissionsApi:
    return LocalPermissionsApi(
        groups=groups_payload,
        databases=databases_payload,
        graph={"revision": 5, "groups": tree},
    )
