"""
In-memory diagram implementing the DiagramHost contract.

Useful for tests, scripts and as a template for adapting a real diagram
engine. Nodes are stored as NodeBox objects; edges remember the path
last applied to them.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence

from .types import EdgeRef, NodeBox, Point, PointLike, as_point
from .validation import UnknownEdgeError, UnknownNodeError

_UNSET: Any = object()


class DiagramEdge:
    """
    Edge stored in a Diagram.

    Attributes:
        id: Edge identifier
        source: Source node id
        target: Target node id
        start: Explicit start anchor (None means source node center)
        end: Explicit end anchor (None means target node center)
        points: Path last applied to the edge
    """

    def __init__(
        self,
        id: Hashable,
        source: Hashable,
        target: Hashable,
        start: Optional[Point] = None,
        end: Optional[Point] = None,
    ) -> None:
        self.id = id
        self.source = source
        self.target = target
        self.start = start
        self.end = end
        self.points: list[Point] = []

    def __repr__(self) -> str:
        return f"DiagramEdge({self.id!r}: {self.source!r} -> {self.target!r})"


class Diagram:
    """A minimal diagram: nodes with boxes, edges with applied paths."""

    def __init__(self) -> None:
        self._nodes: dict[Hashable, NodeBox] = {}
        self._edges: dict[Hashable, DiagramEdge] = {}

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_node(
        self,
        node_id: Hashable,
        *,
        x: Optional[float],
        y: Optional[float],
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> NodeBox:
        """Add (or replace) a node centered at (x, y)."""
        node = NodeBox(id=node_id, x=x, y=y, width=width, height=height)
        self._nodes[node_id] = node
        return node

    def move_node(self, node_id: Hashable, x: float, y: float) -> NodeBox:
        """Move a node's center to (x, y)."""
        node = self._require_node(node_id)
        node.x = x
        node.y = y
        return node

    def remove_node(self, node_id: Hashable) -> None:
        """Remove a node and every edge attached to it."""
        self._require_node(node_id)
        del self._nodes[node_id]
        for edge_id in self.get_node_edges(node_id):
            del self._edges[edge_id]

    def add_edge(
        self,
        edge_id: Hashable,
        source: Hashable,
        target: Hashable,
        *,
        start: Optional[PointLike] = None,
        end: Optional[PointLike] = None,
    ) -> DiagramEdge:
        """
        Add an edge between two existing nodes.

        Raises:
            UnknownNodeError: If source or target is not in the diagram
        """
        self._require_node(source)
        self._require_node(target)
        edge = DiagramEdge(edge_id, source, target, as_point(start), as_point(end))
        self._edges[edge_id] = edge
        return edge

    def set_edge_endpoints(
        self,
        edge_id: Hashable,
        *,
        start: Optional[PointLike] = _UNSET,
        end: Optional[PointLike] = _UNSET,
    ) -> DiagramEdge:
        """Change an edge's explicit anchors. Pass None to fall back to node centers."""
        edge = self._require_edge(edge_id)
        if start is not _UNSET:
            edge.start = as_point(start)
        if end is not _UNSET:
            edge.end = as_point(end)
        return edge

    def edge_points(self, edge_id: Hashable) -> list[Point]:
        """Path last applied to an edge."""
        return list(self._require_edge(edge_id).points)

    # -------------------------------------------------------------------------
    # DiagramHost contract
    # -------------------------------------------------------------------------

    def get_nodes(self) -> list[NodeBox]:
        return list(self._nodes.values())

    def get_edge(self, edge_id: Hashable) -> Optional[EdgeRef]:
        edge = self._edges.get(edge_id)
        if edge is None:
            return None
        return EdgeRef(
            id=edge.id,
            source_node_id=edge.source,
            target_node_id=edge.target,
            start=edge.start or self._node_center(edge.source),
            end=edge.end or self._node_center(edge.target),
        )

    def get_edge_ids(self) -> list[Hashable]:
        return list(self._edges)

    def get_node_edges(self, node_id: Hashable) -> list[Hashable]:
        return [
            edge.id
            for edge in self._edges.values()
            if edge.source == node_id or edge.target == node_id
        ]

    def apply_path(self, edge_id: Hashable, points: Sequence[Point]) -> None:
        self._require_edge(edge_id).points = list(points)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_node(self, node_id: Hashable) -> NodeBox:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(f"Node {node_id!r} is not in the diagram")
        return node

    def _require_edge(self, edge_id: Hashable) -> DiagramEdge:
        edge = self._edges.get(edge_id)
        if edge is None:
            raise UnknownEdgeError(f"Edge {edge_id!r} is not in the diagram")
        return edge

    def _node_center(self, node_id: Hashable) -> Optional[Point]:
        node = self._nodes.get(node_id)
        if node is None or node.x is None or node.y is None:
            return None
        return node.center

    def __repr__(self) -> str:
        return f"Diagram(nodes={len(self._nodes)}, edges={len(self._edges)})"


__all__ = ["Diagram", "DiagramEdge"]
