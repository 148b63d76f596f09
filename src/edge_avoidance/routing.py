"""
Obstacle-avoiding edge routing.

``route`` is the entry point: a pure function of the two anchors and the
obstacle rectangles. It returns the direct segment whenever it is clear,
otherwise the best detour found on the candidate lattice. It never fails
to return a path for valid anchors; a path that still overlaps obstacles
is reported through ``RouteResult.obstructions`` and a
``NoCleanPathWarning``.

Example:
    from edge_avoidance import Rect, route

    result = route((0, 0), (200, 0), [Rect(80, -20, 120, 20)])
    result.as_tuples()  # [(0.0, 0.0), (100.0, 40.0), (200.0, 0.0)]
    result.is_clear     # True
"""

from __future__ import annotations

import warnings
from typing import Hashable, Iterable, Optional, Sequence

from .candidates import DEFAULT_OFFSETS, generate_candidates
from .obstacles import build_obstacles
from .selector import select_path
from .types import NodeLike, PointLike, Rect, RouteResult, as_point
from .validation import MissingAnchorError, NoCleanPathWarning, validate_offsets


def route(
    start: Optional[PointLike],
    end: Optional[PointLike],
    obstacles: Iterable[Rect],
    *,
    offsets: Sequence[float] = DEFAULT_OFFSETS,
) -> RouteResult:
    """
    Route an edge between two anchors around obstacles.

    Args:
        start: Start anchor
        end: End anchor
        obstacles: Obstacle rectangles (already padded)
        offsets: Candidate offset lattice, tried in order

    Returns:
        RouteResult whose first and last points are the anchors

    Raises:
        MissingAnchorError: If start or end is None. Callers should keep
            the edge's existing path.
        InvalidOffsetsError: If offsets is empty or malformed
    """
    start_pt = as_point(start)
    end_pt = as_point(end)
    if start_pt is None or end_pt is None:
        missing = "start" if start_pt is None else "end"
        raise MissingAnchorError(f"Cannot route edge: {missing} anchor is unavailable")

    lattice = validate_offsets(offsets)
    obstacle_list = list(obstacles)
    if not obstacle_list:
        return RouteResult(points=(start_pt, end_pt), obstructions=0, candidates_evaluated=0)

    selection = select_path(
        generate_candidates(start_pt, end_pt, lattice),
        obstacle_list,
        start=start_pt,
        end=end_pt,
    )

    if selection.obstructions > 0:
        warnings.warn(
            f"No clear path from ({start_pt.x}, {start_pt.y}) to ({end_pt.x}, {end_pt.y}) "
            f"after {selection.evaluated} candidates; best path has "
            f"{selection.obstructions} obstruction(s).",
            NoCleanPathWarning,
            stacklevel=2,
        )

    return RouteResult(
        points=selection.points,
        obstructions=selection.obstructions,
        candidates_evaluated=selection.evaluated,
    )


def route_edge(
    start: Optional[PointLike],
    end: Optional[PointLike],
    nodes: Iterable[NodeLike],
    source_id: Hashable,
    target_id: Hashable,
    *,
    padding: float = 10.0,
    offsets: Sequence[float] = DEFAULT_OFFSETS,
) -> RouteResult:
    """
    Route an edge given the full node list.

    Builds the obstacle set (all nodes except source and target, padded)
    and delegates to ``route``.

    Args:
        start: Start anchor
        end: End anchor
        nodes: All diagram nodes
        source_id: Id of the edge's source node
        target_id: Id of the edge's target node
        padding: Clearance around obstacles
        offsets: Candidate offset lattice

    Returns:
        RouteResult for the edge
    """
    obstacles = build_obstacles(nodes, source_id, target_id, padding)
    return route(start, end, obstacles, offsets=offsets)


__all__ = ["route", "route_edge"]
