"""Access classification over permission tree nodes.

A raw tree value is either a scalar grant that applies uniformly to every
descendant, or a mapping of per-child overrides. Both shapes are lifted into
an explicit tagged variant before classification:

- ``Uniform(level)`` — scalar grant (``None`` when absent or falsy).
- ``PerChild(children)`` — per-child mapping, i.e. "controlled" access.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .constants import AccessLevel


@dataclass(frozen=True)
class Uniform:
    """A scalar grant applied to all descendants."""

    level: Any = None


@dataclass(frozen=True)
class PerChild:
    """Per-child overrides keyed by child id."""

    children: Mapping[Any, Any] = field(default_factory=dict)


Node = Union[Uniform, PerChild]


def as_node(raw: Any) -> Node:
    """Lift a raw tree value into a ``Uniform`` or ``PerChild`` node."""
    if isinstance(raw, (Uniform, PerChild)):
        return raw
    if isinstance(raw, Mapping):
        return PerChild(raw)
    return Uniform(raw or None)


def to_raw(node: Node) -> Any:
    """Lower a node back into its wire shape."""
    if isinstance(node, PerChild):
        return dict(node.children)
    return node.level


def is_scalar(raw: Any) -> bool:
    """True when ``raw`` is a present, non-mapping value."""
    return raw is not None and isinstance(as_node(raw), Uniform)


def classify(value: Any) -> str:
    """Map a raw permission value (or node) to its access level.

    Args:
        value: Raw tree value, ``Uniform`` or ``PerChild``.

    Returns:
        ``"none"`` for absent/falsy values, ``"controlled"`` for per-child
        mappings, otherwise the scalar value itself.
    """
    node = as_node(value)
    if isinstance(node, PerChild):
        return AccessLevel.CONTROLLED
    if not node.level:
        return AccessLevel.NONE
    return node.level


__all__ = [
    "Node",
    "PerChild",
    "Uniform",
    "as_node",
    "classify",
    "is_scalar",
    "to_raw",
]
