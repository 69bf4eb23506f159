from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .models import PermissionGraph


class PermissionsApi(ABC):
    """Fetch/submit contract of the permissions backend.

    Implementations raise ``PermissionsApiError`` when the backend rejects a
    request; its ``data`` is shown to the user unchanged.
    """

    @abstractmethod
    async def list_groups(self) -> List[Dict[str, Any]]:
        """Raw group records (``id``, ``name``, ...)."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_graph(self) -> PermissionGraph:
        raise NotImplementedError

    @abstractmethod
    async def list_databases(self) -> List[Dict[str, Any]]:
        """Raw database records with their ``tables``."""
        raise NotImplementedError

    @abstractmethod
    async def update_graph(self, graph: PermissionGraph) -> PermissionGraph:
        """Submit a full tree with the revision it was based on."""
        raise NotImplementedError


__all__ = ["PermissionsApi"]
