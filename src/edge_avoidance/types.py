"""
Common types for obstacle-avoiding edge routing.

This module provides the value types shared by every routing stage:
- Point: Immutable 2-D coordinate
- Rect: Axis-aligned bounding box used as an obstacle
- NodeBox: Geometry snapshot of a diagram node
- EdgeRef: Anchors and endpoints of an edge as reported by the host
- RouteResult: Output of a routing call
- RouteEventType / RouteEvent: Adapter lifecycle events
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import (
    Any,
    Callable,
    Hashable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    TypedDict,
    Union,
)

from .validation import InvalidRectError


@dataclass(frozen=True)
class Point:
    """A point in diagram coordinate space."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle with inclusive boundaries.

    Attributes:
        min_x: Left edge x coordinate
        min_y: Top edge y coordinate
        max_x: Right edge x coordinate
        max_y: Bottom edge y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise InvalidRectError(
                f"Rect bounds are inverted: ({self.min_x}, {self.min_y})-"
                f"({self.max_x}, {self.max_y})"
            )

    @classmethod
    def from_center(
        cls,
        x: float,
        y: float,
        width: float,
        height: float,
        padding: float = 0.0,
    ) -> Rect:
        """
        Build a rectangle from a center point and size.

        Args:
            x: Center x
            y: Center y
            width: Box width
            height: Box height
            padding: Clearance added on all four sides

        Returns:
            The padded rectangle
        """
        half_w = width / 2 + padding
        half_h = height / 2 + padding
        return cls(x - half_w, y - half_h, x + half_w, y + half_h)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def expand(self, padding: float) -> Rect:
        """Return a copy grown by ``padding`` on every side."""
        return Rect(
            self.min_x - padding,
            self.min_y - padding,
            self.max_x + padding,
            self.max_y + padding,
        )

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in clockwise order starting at (min_x, min_y)."""
        return (
            Point(self.min_x, self.min_y),
            Point(self.max_x, self.min_y),
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y),
        )


@dataclass
class NodeBox:
    """
    A diagram node represented as a box.

    Coordinates are the node center, as in most diagram engines.
    ``width``/``height`` of None means the host had no bounding-box data.
    """

    id: Hashable
    x: Optional[float]  # Center x
    y: Optional[float]  # Center y
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def has_geometry(self) -> bool:
        """True if all four geometric fields are present, numeric and finite."""
        values = (self.x, self.y, self.width, self.height)
        if any(v is None for v in values):
            return False
        try:
            return all(math.isfinite(float(v)) for v in values)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    @property
    def center(self) -> Point:
        return Point(float(self.x), float(self.y))  # type: ignore[arg-type]

    def to_rect(self, padding: float = 0.0) -> Rect:
        """Bounding box of this node grown by ``padding``."""
        return Rect.from_center(
            float(self.x),  # type: ignore[arg-type]
            float(self.y),  # type: ignore[arg-type]
            abs(float(self.width)),  # type: ignore[arg-type]
            abs(float(self.height)),  # type: ignore[arg-type]
            padding,
        )


@dataclass
class EdgeRef:
    """
    Routing facts about a single edge.

    Attributes:
        id: Edge identifier in the host
        source_node_id: Node the edge leaves from
        target_node_id: Node the edge arrives at
        start: Start anchor, or None if the host cannot provide one
        end: End anchor, or None if the host cannot provide one
    """

    id: Hashable
    source_node_id: Hashable
    target_node_id: Hashable
    start: Optional[Point] = None
    end: Optional[Point] = None


@dataclass(frozen=True)
class RouteResult:
    """
    Result of routing one edge.

    Attributes:
        points: Polyline from start anchor to end anchor (at least 2 points)
        obstructions: Number of (segment, obstacle) intersections remaining
        candidates_evaluated: How many candidate paths were scored
    """

    points: tuple[Point, ...]
    obstructions: int = 0
    candidates_evaluated: int = 0

    @property
    def is_clear(self) -> bool:
        """True if the path crosses no obstacle."""
        return self.obstructions == 0

    @property
    def bends(self) -> tuple[Point, ...]:
        """Interior points of the path."""
        return self.points[1:-1]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def as_tuples(self) -> list[tuple[float, float]]:
        """Path as a list of (x, y) tuples."""
        return [p.as_tuple() for p in self.points]


class CandidateKind(IntEnum):
    """Generation stage of a candidate path, in priority order."""

    DIRECT = 0
    SINGLE_BEND = 1
    DOUBLE_BEND = 2


class RouteEventType(Enum):
    """
    Adapter events.

    - routed: A clear path was computed and applied
    - degraded: A best-effort path still overlapping obstacles was applied
    - skipped: The edge kept its previous path
    """

    routed = "routed"
    degraded = "degraded"
    skipped = "skipped"


class RouteEvent(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: RouteEventType
    edge_id: Hashable
    result: Optional[RouteResult]
    reason: Optional[str]


RouteCallback = Callable[[RouteEvent], None]


PointLike = Union[Point, Sequence[float], Mapping[str, float], Any]
"""Input type for points: Point objects, (x, y) pairs, dicts, or objects with x/y."""

NodeLike = Union[NodeBox, Mapping[str, Any], Any]
"""Input type for nodes: NodeBox objects, dicts, or objects with id/x/y/width/height."""


def as_point(value: Optional[PointLike]) -> Optional[Point]:
    """
    Coerce a point-like value to a Point.

    Args:
        value: Point, (x, y) sequence, mapping with x/y keys, or object
            with x/y attributes

    Returns:
        The Point, or None if value is None
    """
    if value is None or isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        return Point(float(value["x"]), float(value["y"]))
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point(float(value.x), float(value.y))
    x, y = value
    return Point(float(x), float(y))


def as_node_box(value: NodeLike) -> NodeBox:
    """Coerce a node-like value to a NodeBox (missing fields become None)."""
    if isinstance(value, NodeBox):
        return value
    if isinstance(value, Mapping):
        return NodeBox(
            id=value.get("id"),
            x=value.get("x"),
            y=value.get("y"),
            width=value.get("width"),
            height=value.get("height"),
        )
    # Generic object - copy attributes
    return NodeBox(
        id=getattr(value, "id", None),
        x=getattr(value, "x", None),
        y=getattr(value, "y", None),
        width=getattr(value, "width", None),
        height=getattr(value, "height", None),
    )


__all__ = [
    "Point",
    "Rect",
    "NodeBox",
    "EdgeRef",
    "RouteResult",
    "CandidateKind",
    "RouteEventType",
    "RouteEvent",
    "RouteCallback",
    "PointLike",
    "NodeLike",
    "as_point",
    "as_node_box",
]
