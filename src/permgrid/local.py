"""In-process permissions backend.

Keeps groups, database metadata and the permission graph in memory. Used for
local development, demos and tests in place of a remote service.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from .exceptions import PermissionsApiError
from .interfaces import PermissionsApi
from .models import PermissionGraph

logger = logging.getLogger(__name__)


class LocalPermissionsApi(PermissionsApi):
    """PermissionsApi backed by in-memory state.

    ``update_graph`` accepts a submission only when it is based on the
    current revision. Each accepted submission gets a new token from
    ``next_revision()``; this backend mints integers counting up by one.
    """

    def __init__(
        self,
        groups: Optional[list[dict[str, Any]]] = None,
        databases: Optional[list[dict[str, Any]]] = None,
        graph: Optional[dict[str, Any]] = None,
    ):
        self._groups = list(groups or [])
        self._databases = list(databases or [])
        self._graph = PermissionGraph.model_validate(graph or {"revision": 0, "groups": {}})

    @property
    def revision(self) -> Any:
        return self._graph.revision

    def next_revision(self, revision: Any) -> Any:
        """Token for the graph that replaces ``revision``."""
        return revision + 1

    async def list_groups(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._groups)

    async def list_databases(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._databases)

    async def fetch_graph(self) -> PermissionGraph:
        return self._graph.model_copy(deep=True)

    async def update_graph(self, graph: PermissionGraph) -> PermissionGraph:
        if graph.revision != self._graph.revision:
            logger.warning(
                "Rejected permission update: stale revision %s (current %s)",
                graph.revision,
                self._graph.revision,
            )
            raise PermissionsApiError(
                "Stale revision",
                data={
                    "message": (
                        "Looks like someone else edited the permissions and your data is out of date. "
                        "Please fetch new data and try again."
                    ),
                    "revision": self._graph.revision,
                },
            )

        self._graph = PermissionGraph(
            revision=self.next_revision(self._graph.revision),
            groups=copy.deepcopy(graph.groups),
        )
        logger.info("Permission graph saved at revision %s", self._graph.revision)
        return self._graph.model_copy(deep=True)


__all__ = ["LocalPermissionsApi"]
