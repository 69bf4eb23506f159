"""Pure permission tree mutation.

``set_permission()`` writes one value into a permission tree and resolves
structural conflicts on the way:

1. Setting a value that is already there is a no-op. So is setting
   ``controlled`` on a node that already holds per-child entries, which
   keeps its children intact.
2. ``controlled`` is materialized as a mapping whose children are seeded
   with the node's previous value.
3. Any scalar on a proper prefix of the path is promoted to a mapping
   before the write.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from .access import PerChild, as_node, is_scalar
from .constants import AccessLevel
from .paths import Path, get_in, set_in

logger = logging.getLogger(__name__)


def set_permission(
    tree: Any,
    path: Path,
    value: Any,
    sibling_ids: Optional[Iterable[Any]] = None,
) -> Any:
    """Return a new tree with ``value`` set at ``path``.

    Args:
        tree: Current permission tree (not modified).
        path: Keys from the group id down to the target node, e.g.
            ``[group_id, db_id, "schemas", schema_name]``.
        value: New access level. ``"controlled"`` expands to a mapping.
        sibling_ids: Child ids to seed when ``value`` is ``"controlled"``.

    Returns:
        The input tree itself when nothing changes, otherwise a new tree
        sharing every untouched subtree with the input.
    """
    current = get_in(tree, path)
    if current == value or (isinstance(as_node(current), PerChild) and value == AccessLevel.CONTROLLED):
        return tree

    if value == AccessLevel.CONTROLLED:
        value = {child_id: current for child_id in (sibling_ids or ())}

    for i in range(len(path)):
        prefix = path[:i]
        if is_scalar(get_in(tree, prefix)):
            logger.debug("Promoting scalar at %s before write to %s", list(prefix), list(path))
            tree = set_in(tree, prefix, {})

    return set_in(tree, path, value)


__all__ = ["set_permission"]
