"""Editing session state for the permissions admin screen.

A ``PermissionsSession`` holds what the screen works on: groups, database
metadata, the edited permission tree, the tree as last loaded or saved
(for dirty checks), the revision token and the last save error.

Loads replace state wholesale. Edits replace the tree with the result of a
grid updater. Saves submit the whole tree with its revision.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from .config import GridConfig
from .exceptions import NotLoadedError, PermissionsApiError
from .grid import EntityId, Grid, GridSelector, Updater
from .interfaces import PermissionsApi
from .logging import get_logger, safe_preview
from .models import Database, Group, Location, PermissionGraph
from .permissions import CellKind, trees_differ

logger = get_logger(__name__)


class PermissionsSession:
    """State container for one admin editing session."""

    def __init__(self, api: PermissionsApi, config: Optional[GridConfig] = None):
        self.api = api
        self.config = config or GridConfig()

        self.groups: Optional[list[Group]] = None
        self.databases: Optional[list[Database]] = None
        self.permissions: Optional[dict[Any, Any]] = None
        self.original_permissions: Optional[dict[Any, Any]] = None
        self.revision: Any = None
        self.save_error: Any = None

        self._selector = GridSelector(self.config)

    # ── Loading ─────────────────────────────────────────

    async def initialize(self) -> None:
        """Load permissions, groups and metadata concurrently."""
        await asyncio.gather(
            self.load_permissions(),
            self.load_groups(),
            self.load_metadata(),
        )

    async def load_permissions(self) -> None:
        graph = await self.api.fetch_graph()
        self._apply_graph(graph)
        self.save_error = None
        logger.info("Loaded permission graph", revision=graph.revision)

    async def load_groups(self) -> None:
        payload = await self.api.list_groups()
        self.groups = [Group.from_api(group, self.config) for group in payload or []]
        logger.debug("Loaded %d groups", len(self.groups))

    async def load_metadata(self) -> None:
        payload = await self.api.list_databases()
        self.databases = [Database.model_validate(db) for db in payload or []]
        logger.debug("Loaded %d databases", len(self.databases))

    # ── Editing ─────────────────────────────────────────

    def update_permission(self, group_id: Any, entity_id: EntityId, value: Any, updater: Updater) -> None:
        """Replace the tree with ``updater``'s result for one cell edit."""
        if self.permissions is None:
            raise NotLoadedError()
        self.permissions = updater(self.permissions, group_id, entity_id, value)
        logger.debug("Set %s to %s", entity_id, value, group_id=group_id, revision=self.revision)

    def edit(self, grid: Grid, kind: CellKind, group_id: Any, entity_id: EntityId, value: Any) -> None:
        """Apply a cell edit using the grid's updater for ``kind``."""
        self.update_permission(group_id, entity_id, value, grid.permissions[kind])

    @property
    def dirty(self) -> bool:
        """True when the edited tree differs from the last loaded/saved one."""
        return trees_differ(self.permissions, self.original_permissions)

    def grid(self, location: Optional[Location] = None) -> Optional[Grid]:
        """Grid for the current state; None until everything is loaded."""
        return self._selector(self.groups, self.databases, self.permissions, location)

    # ── Saving ──────────────────────────────────────────

    async def save(self) -> Optional[PermissionGraph]:
        """Submit the edited tree.

        Returns:
            The graph returned by the backend, or None when the backend
            rejected the submission. The rejection payload is kept in
            ``save_error`` and the last loaded tree stays authoritative.
        """
        if self.permissions is None or self.revision is None:
            raise NotLoadedError()

        submission = PermissionGraph(revision=self.revision, groups=self.permissions)
        try:
            graph = await self.api.update_graph(submission)
        except PermissionsApiError as e:
            self.save_error = e.data
            logger.warning(
                "Saving permissions failed: %s",
                safe_preview(e.data),
                revision=self.revision,
                extra={"error_code": e.code},
            )
            return None

        self._apply_graph(graph)
        self.save_error = None
        logger.info("Saved permission graph", revision=graph.revision)
        return graph

    def _apply_graph(self, graph: PermissionGraph) -> None:
        self.permissions = graph.groups
        self.original_permissions = graph.groups
        self.revision = graph.revision


__all__ = ["PermissionsSession"]
