"""Permission grid derivation.

``build_grid()`` turns groups, database metadata, the permission tree and a
location into a render-ready grid: groups as columns, databases / schemas /
tables as rows, one cell record per (row, group), and the updater for each
editable cell kind at that granularity.

``GridSelector`` memoizes ``build_grid()`` on the identity of its inputs, so
repeated render passes over unchanged state get the same ``Grid`` object.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union
from urllib.parse import quote

from .config import DEFAULT_BASE_PATH, GridConfig
from .exceptions import UnknownDatabaseError
from .models import Database, Group, Location
from .permissions import (
    AccessLevel,
    CellKind,
    DatabaseCell,
    GridType,
    SchemaCell,
    TableCell,
    database_access,
    schema_access,
    set_permission,
    table_access,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityId:
    """Composite key of a grid row."""

    database_id: int
    schema_name: Optional[str] = None
    table_id: Optional[int] = None


@dataclass(frozen=True)
class EntityLink:
    name: str
    url: str


@dataclass(frozen=True)
class GridEntity:
    id: EntityId
    name: str
    link: Optional[EntityLink] = None


Cell = Union[DatabaseCell, SchemaCell, TableCell]
Updater = Callable[[Any, Any, EntityId, Any], Any]


@dataclass(frozen=True)
class Grid:
    """Derived permission grid.

    Attributes:
        type: Granularity of the rows.
        groups: Column headers.
        entities: Row headers.
        data: ``data[row][column]`` cell records.
        permissions: Updater per editable cell kind. Each updater takes
            ``(tree, group_id, entity_id, value)`` and returns a new tree.
    """

    type: GridType
    groups: Sequence[Group]
    entities: Sequence[GridEntity]
    data: Sequence[Sequence[Cell]]
    permissions: Mapping[CellKind, Updater]


def _find_database(databases: Sequence[Database], database_id: int) -> Optional[Database]:
    for database in databases:
        if database.id == database_id:
            return database
    return None


def _tables_url(base_path: str, database_id: int, schema_name: str) -> str:
    return f"{base_path.rstrip('/')}/databases/{database_id}/schemas/{quote(schema_name, safe='')}/tables"


def _schemas_url(base_path: str, database_id: int) -> str:
    return f"{base_path.rstrip('/')}/databases/{database_id}/schemas"


def _database_grid(
    groups: Sequence[Group],
    databases: Sequence[Database],
    tree: Any,
    base_path: str,
) -> Grid:
    def update_native(perms: Any, group_id: Any, entity_id: EntityId, value: Any) -> Any:
        return set_permission(perms, [group_id, entity_id.database_id, "native"], value)

    def update_schemas(perms: Any, group_id: Any, entity_id: EntityId, value: Any) -> Any:
        database = _find_database(databases, entity_id.database_id)
        schema_names = database.schema_names() if database else None
        return set_permission(perms, [group_id, entity_id.database_id, "schemas"], value, schema_names)

    entities = []
    for database in databases:
        schema_names = database.schema_names()
        if len(schema_names) == 1:
            link = EntityLink("View tables", _tables_url(base_path, database.id, schema_names[0]))
        else:
            link = EntityLink("View schemas", _schemas_url(base_path, database.id))
        entities.append(GridEntity(id=EntityId(database.id), name=database.name, link=link))

    return Grid(
        type=GridType.DATABASE,
        groups=groups,
        entities=entities,
        data=[[database_access(tree, group.id, database.id) for group in groups] for database in databases],
        permissions={
            CellKind.NATIVE: update_native,
            CellKind.SCHEMAS: update_schemas,
        },
    )


def _schema_grid(groups: Sequence[Group], database: Database, tree: Any, base_path: str) -> Grid:
    schema_names = database.schema_names()

    def update_tables(perms: Any, group_id: Any, entity_id: EntityId, value: Any) -> Any:
        table_ids = [table.id for table in database.tables_in(entity_id.schema_name)]
        perms = set_permission(perms, [group_id, entity_id.database_id, "schemas"], AccessLevel.CONTROLLED, schema_names)
        return set_permission(
            perms, [group_id, entity_id.database_id, "schemas", entity_id.schema_name], value, table_ids
        )

    return Grid(
        type=GridType.SCHEMA,
        groups=groups,
        entities=[
            GridEntity(
                id=EntityId(database.id, schema_name),
                name=schema_name,
                link=EntityLink("View tables", _tables_url(base_path, database.id, schema_name)),
            )
            for schema_name in schema_names
        ],
        data=[
            [schema_access(tree, group.id, database.id, schema_name) for group in groups]
            for schema_name in schema_names
        ],
        permissions={CellKind.TABLES: update_tables},
    )


def _table_grid(groups: Sequence[Group], database: Database, schema_name: str, tree: Any) -> Grid:
    schema_names = database.schema_names()
    tables = database.tables_in(schema_name)
    table_ids = [table.id for table in tables]

    def update_fields(perms: Any, group_id: Any, entity_id: EntityId, value: Any) -> Any:
        db_path = [group_id, entity_id.database_id, "schemas"]
        perms = set_permission(perms, db_path, AccessLevel.CONTROLLED, schema_names)
        perms = set_permission(perms, db_path + [entity_id.schema_name], AccessLevel.CONTROLLED, table_ids)
        # TODO: seed field ids once field-level grants are editable
        return set_permission(perms, db_path + [entity_id.schema_name, entity_id.table_id], value)

    return Grid(
        type=GridType.TABLE,
        groups=groups,
        entities=[
            GridEntity(id=EntityId(database.id, schema_name, table.id), name=table.display_name)
            for table in tables
        ],
        data=[
            [table_access(tree, group.id, database.id, schema_name, table.id) for group in groups]
            for table in tables
        ],
        permissions={CellKind.FIELDS: update_fields},
    )


def build_grid(
    groups: Optional[Sequence[Group]],
    databases: Optional[Sequence[Database]],
    tree: Any,
    location: Optional[Location] = None,
    base_path: str = DEFAULT_BASE_PATH,
) -> Optional[Grid]:
    """Derive the permission grid for ``location``.

    Args:
        groups: Loaded groups (columns), or None while loading.
        databases: Loaded database metadata, or None while loading.
        tree: Permission tree of every group, or None while loading.
        location: Selected database / schema; None selects the database grid.
        base_path: Route prefix for row navigation links.

    Returns:
        The grid, or None while any input is still loading.

    Raises:
        UnknownDatabaseError: ``location`` names a database that is not in
            ``databases``.
    """
    if groups is None or databases is None or tree is None:
        return None

    location = location or Location()
    if location.database_id is None:
        return _database_grid(groups, databases, tree, base_path)

    database = _find_database(databases, location.database_id)
    if database is None:
        raise UnknownDatabaseError(location.database_id)

    if location.schema_name is None:
        return _schema_grid(groups, database, tree, base_path)
    return _table_grid(groups, database, location.schema_name, tree)


class GridSelector:
    """Memoized ``build_grid()``.

    Holds the inputs and result of the last call; a call with the very same
    objects (compared by identity) returns the cached grid.
    """

    def __init__(self, config: Optional[GridConfig] = None):
        self.config = config or GridConfig()
        self._last_args: Optional[tuple[Any, ...]] = None
        self._last_grid: Optional[Grid] = None

    def __call__(
        self,
        groups: Optional[Sequence[Group]],
        databases: Optional[Sequence[Database]],
        tree: Any,
        location: Optional[Location] = None,
    ) -> Optional[Grid]:
        args = (groups, databases, tree, location)
        if self._last_args is not None and all(a is b for a, b in zip(args, self._last_args)):
            return self._last_grid

        grid = build_grid(groups, databases, tree, location, base_path=self.config.base_path)
        logger.debug(
            "Built %s grid (%d rows)",
            grid.type.value if grid else "no",
            len(grid.entities) if grid else 0,
        )
        self._last_args = args
        self._last_grid = grid
        return grid

    def clear(self) -> None:
        self._last_args = None
        self._last_grid = None


__all__ = [
    "Cell",
    "EntityId",
    "EntityLink",
    "Grid",
    "GridEntity",
    "GridSelector",
    "Updater",
    "build_grid",
]
