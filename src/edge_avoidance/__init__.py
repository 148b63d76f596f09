"""
edge-avoidance: Obstacle-avoiding edge routing for diagrams.

This package computes polylines that connect two anchor points while
steering around the rectangular boxes of other diagram nodes.

Available components:
- geometry: Exact segment/rectangle intersection tests
- obstacles: Padded obstacle boxes from node geometry
- candidates: Direct, single-bend and double-bend candidate paths
- selector: Lowest-obstruction candidate selection
- routing: The ``route`` entry point
- router: Host adapter reacting to diagram triggers
- diagram: In-memory reference host
- metrics: Routing quality measures
"""

__version__ = "0.1.0"

# Candidate generation
from .candidates import (
    DEFAULT_OFFSETS,
    Candidate,
    generate_candidates,
)

# Reference host
from .diagram import Diagram, DiagramEdge

# Geometry primitives
from .geometry import (
    Orientation,
    collapse_duplicates,
    orientation,
    path_obstruction_count,
    point_in_rect,
    segment_intersects_rect,
    segments_intersect,
)

# Routing quality metrics
from .metrics import (
    bend_count,
    detour_ratio,
    path_length,
    routing_quality_summary,
)

# Obstacles
from .obstacles import build_obstacles

# Host adapter
from .router import AvoidanceRouter, DiagramHost

# Routing entry points
from .routing import route, route_edge
from .selector import Selection, select_path
from .types import (
    CandidateKind,
    EdgeRef,
    NodeBox,
    NodeLike,
    Point,
    PointLike,
    Rect,
    RouteEvent,
    RouteEventType,
    RouteResult,
    as_node_box,
    as_point,
)

# Errors and warnings
from .validation import (
    InvalidOffsetsError,
    InvalidPaddingError,
    InvalidRectError,
    MissingAnchorError,
    MissingObstacleDataWarning,
    NoCleanPathWarning,
    RoutingWarning,
    UnknownEdgeError,
    UnknownNodeError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "Rect",
    "NodeBox",
    "EdgeRef",
    "RouteResult",
    "CandidateKind",
    "RouteEventType",
    "RouteEvent",
    "as_point",
    "as_node_box",
    # Type aliases for API
    "PointLike",
    "NodeLike",
    # Geometry
    "Orientation",
    "point_in_rect",
    "orientation",
    "segments_intersect",
    "segment_intersects_rect",
    "path_obstruction_count",
    "collapse_duplicates",
    # Obstacles
    "build_obstacles",
    # Candidates
    "DEFAULT_OFFSETS",
    "Candidate",
    "generate_candidates",
    # Selection
    "Selection",
    "select_path",
    # Routing
    "route",
    "route_edge",
    # Host adapter
    "AvoidanceRouter",
    "DiagramHost",
    "Diagram",
    "DiagramEdge",
    # Metrics
    "path_length",
    "bend_count",
    "detour_ratio",
    "routing_quality_summary",
    # Validation
    "ValidationError",
    "MissingAnchorError",
    "InvalidPaddingError",
    "InvalidOffsetsError",
    "InvalidRectError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "RoutingWarning",
    "MissingObstacleDataWarning",
    "NoCleanPathWarning",
]
