from .config import GridConfig, LogLevel, load_config_from_env
from .exceptions import (
    NotLoadedError,
    PermGridError,
    PermissionsApiError,
    UnknownDatabaseError,
)
from .grid import EntityId, EntityLink, Grid, GridEntity, GridSelector, build_grid
from .interfaces import PermissionsApi
from .local import LocalPermissionsApi
from .logging import (
    PermGridFormatter,
    PermGridLoggerAdapter,
    get_logger,
    safe_preview,
    setup_logging,
)
from .models import Database, Group, Location, PermissionGraph, Table, group_display_name
from .permissions import (
    AccessLevel,
    CellKind,
    DatabaseCell,
    GridType,
    PerChild,
    SchemaCell,
    TableCell,
    Uniform,
    classify,
    database_access,
    get_in,
    schema_access,
    set_in,
    set_permission,
    table_access,
    trees_differ,
)
from .session import PermissionsSession

__all__ = [
    'AccessLevel',
    'CellKind',
    'Database',
    'DatabaseCell',
    'EntityId',
    'EntityLink',
    'Grid',
    'GridConfig',
    'GridEntity',
    'GridSelector',
    'GridType',
    'Group',
    'LocalPermissionsApi',
    'Location',
    'LogLevel',
    'NotLoadedError',
    'PerChild',
    'PermGridError',
    'PermGridFormatter',
    'PermGridLoggerAdapter',
    'PermissionGraph',
    'PermissionsApi',
    'PermissionsApiError',
    'PermissionsSession',
    'SchemaCell',
    'Table',
    'TableCell',
    'Uniform',
    'UnknownDatabaseError',
    'build_grid',
    'classify',
    'database_access',
    'get_in',
    'get_logger',
    'group_display_name',
    'load_config_from_env',
    'safe_preview',
    'schema_access',
    'set_in',
    'set_permission',
    'setup_logging',
    'table_access',
    'trees_differ',
]
