"""
Geometry primitives for obstruction testing.

Exact segment/rectangle intersection built on the orientation predicate:
- point_in_rect: Inclusive containment
- segments_intersect: General and collinear cases
- segment_intersects_rect: The unit obstruction test
- path_obstruction_count: Sum of obstructions along a polyline

All boundaries are inclusive, so a segment that only touches an obstacle
counts as intersecting it.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

from .types import Point, Rect


class Orientation(IntEnum):
    """Turn direction of an ordered point triple."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def point_in_rect(p: Point, r: Rect) -> bool:
    """Check if ``p`` lies inside or on the boundary of ``r``."""
    return r.min_x <= p.x <= r.max_x and r.min_y <= p.y <= r.max_y


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """Orientation of the triple (a, b, c)."""
    val = (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTER_CLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Check if ``q`` lies within the coordinate extent of segment p-r."""
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Check if segments (p1, p2) and (p3, p4) intersect.

    Touching endpoints and collinear overlap both count.
    """
    o1 = orientation(p1, p2, p3)
    o2 = orientation(p1, p2, p4)
    o3 = orientation(p3, p4, p1)
    o4 = orientation(p3, p4, p2)

    # General case
    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases
    if o1 == Orientation.COLLINEAR and on_segment(p1, p3, p2):
        return True
    if o2 == Orientation.COLLINEAR and on_segment(p1, p4, p2):
        return True
    if o3 == Orientation.COLLINEAR and on_segment(p3, p1, p4):
        return True
    if o4 == Orientation.COLLINEAR and on_segment(p3, p2, p4):
        return True

    return False


def rect_edges(r: Rect) -> list[tuple[Point, Point]]:
    """The four boundary edges of ``r`` as point pairs."""
    c0, c1, c2, c3 = r.corners()
    return [(c0, c1), (c1, c2), (c2, c3), (c3, c0)]


def segment_intersects_rect(p1: Point, p2: Point, rect: Rect) -> bool:
    """
    Check if segment (p1, p2) touches or crosses ``rect``.

    A zero-length segment degenerates to a point-in-rect test.
    """
    if p1 == p2:
        return point_in_rect(p1, rect)

    if point_in_rect(p1, rect) or point_in_rect(p2, rect):
        return True

    for a, b in rect_edges(rect):
        if segments_intersect(p1, p2, a, b):
            return True
    return False


def path_obstruction_count(points: Sequence[Point], obstacles: Iterable[Rect]) -> int:
    """
    Count intersecting (segment, obstacle) pairs along a polyline.

    Args:
        points: Polyline vertices in order
        obstacles: Obstacle rectangles

    Returns:
        Number of pairs that intersect. 0 means the path is clear.
    """
    obstacles = list(obstacles)
    count = 0
    for i in range(len(points) - 1):
        p1 = points[i]
        p2 = points[i + 1]
        for obs in obstacles:
            if segment_intersects_rect(p1, p2, obs):
                count += 1
    return count


def collapse_duplicates(points: Sequence[Point]) -> list[Point]:
    """
    Remove consecutive duplicate points.

    The result always keeps the first and last point, so a path whose
    anchors coincide stays a two-point path.
    """
    if len(points) < 2:
        return list(points)

    deduped: list[Point] = [points[0]]
    for pt in points[1:]:
        if pt != deduped[-1]:
            deduped.append(pt)

    if len(deduped) < 2:
        return [points[0], points[-1]]
    return deduped


__all__ = [
    "Orientation",
    "point_in_rect",
    "orientation",
    "on_segment",
    "segments_intersect",
    "rect_edges",
    "segment_intersects_rect",
    "path_obstruction_count",
    "collapse_duplicates",
]
