"""Persistent get/set-by-path helpers for permission trees.

Trees are never mutated in place. ``set_in`` copies only the mappings along
the written path; every other subtree is shared with the input.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

PermissionTree = dict[Any, Any]
Path = Sequence[Any]


def get_in(tree: Any, path: Path) -> Any:
    """Read the value at ``path``.

    Returns None when any step is missing or passes through a scalar.
    """
    node = tree
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def set_in(tree: Any, path: Path, value: Any) -> Any:
    """Return a copy of ``tree`` with ``value`` stored at ``path``.

    Missing intermediate mappings are created. A scalar met along the way is
    replaced by a fresh mapping.
    """
    if not path:
        return value
    head, rest = path[0], path[1:]
    updated = dict(tree) if isinstance(tree, Mapping) else {}
    updated[head] = set_in(updated.get(head), rest, value)
    return updated


def trees_differ(current: Any, original: Any) -> bool:
    """Order-sensitive structural comparison of two trees.

    Equal content serialized in a different key order counts as different.
    """
    return json.dumps(current, default=str) != json.dumps(original, default=str)


__all__ = [
    "Path",
    "PermissionTree",
    "get_in",
    "set_in",
    "trees_differ",
]
