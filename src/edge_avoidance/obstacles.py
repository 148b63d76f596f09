"""Obstacle construction from diagram node geometry."""

from __future__ import annotations

import warnings
from typing import Hashable, Iterable

from .types import NodeBox, NodeLike, Rect, as_node_box
from .validation import MissingObstacleDataWarning, validate_padding


def expanded_node_box(node: NodeBox, padding: float) -> Rect:
    """Bounding box of ``node`` grown by ``padding`` on all four sides."""
    return node.to_rect(padding)


def build_obstacles(
    nodes: Iterable[NodeLike],
    source_id: Hashable,
    target_id: Hashable,
    padding: float = 0.0,
) -> list[Rect]:
    """
    Build the obstacle set for one edge.

    Every node except the edge's own source and target becomes a padded
    rectangle. Nodes without usable geometry are skipped for this call.

    Args:
        nodes: All diagram nodes (NodeBox, dicts, or objects with
            id/x/y/width/height)
        source_id: Id of the edge's source node
        target_id: Id of the edge's target node
        padding: Clearance around each node (>= 0)

    Returns:
        List of obstacle rectangles, in node order

    Raises:
        InvalidPaddingError: If padding is negative
    """
    padding = validate_padding(padding)
    obstacles: list[Rect] = []
    missing: list[Hashable] = []

    for node_data in nodes:
        node = as_node_box(node_data)
        if node.id == source_id or node.id == target_id:
            continue
        if not node.has_geometry:
            missing.append(node.id)
            continue
        obstacles.append(expanded_node_box(node, padding))

    if missing:
        warnings.warn(
            f"{len(missing)} node(s) without bounding-box data left out of the "
            f"obstacle set: {missing!r}. Routing may cross them.",
            MissingObstacleDataWarning,
            stacklevel=2,
        )

    return obstacles


__all__ = ["build_obstacles", "expanded_node_box"]
