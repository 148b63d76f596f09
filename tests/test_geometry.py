"""Tests for the geometry primitives."""

from __future__ import annotations

import pytest

from edge_avoidance.geometry import (
    Orientation,
    collapse_duplicates,
    on_segment,
    orientation,
    path_obstruction_count,
    point_in_rect,
    rect_edges,
    segment_intersects_rect,
    segments_intersect,
)
from edge_avoidance.types import Point, Rect


def P(x: float, y: float) -> Point:
    return Point(x, y)


# ---------------------------------------------------------------------------
# point_in_rect
# ---------------------------------------------------------------------------


class TestPointInRect:
    def test_interior_point(self) -> None:
        assert point_in_rect(P(5, 5), Rect(0, 0, 10, 10))

    def test_corner_counts_as_inside(self) -> None:
        assert point_in_rect(P(0, 0), Rect(0, 0, 10, 10))
        assert point_in_rect(P(10, 10), Rect(0, 0, 10, 10))

    def test_edge_counts_as_inside(self) -> None:
        assert point_in_rect(P(10, 5), Rect(0, 0, 10, 10))

    def test_outside(self) -> None:
        assert not point_in_rect(P(10.001, 5), Rect(0, 0, 10, 10))
        assert not point_in_rect(P(5, -0.001), Rect(0, 0, 10, 10))

    def test_degenerate_rect(self) -> None:
        r = Rect(3, 3, 3, 3)
        assert point_in_rect(P(3, 3), r)
        assert not point_in_rect(P(3, 4), r)


# ---------------------------------------------------------------------------
# orientation / on_segment
# ---------------------------------------------------------------------------


class TestOrientation:
    def test_collinear(self) -> None:
        assert orientation(P(0, 0), P(1, 1), P(2, 2)) == Orientation.COLLINEAR

    def test_clockwise(self) -> None:
        assert orientation(P(0, 0), P(1, 0), P(1, -1)) == Orientation.CLOCKWISE

    def test_counter_clockwise(self) -> None:
        assert orientation(P(0, 0), P(1, 0), P(1, 1)) == Orientation.COUNTER_CLOCKWISE

    def test_on_segment_within_extent(self) -> None:
        assert on_segment(P(0, 0), P(5, 0), P(10, 0))
        assert on_segment(P(10, 0), P(10, 0), P(0, 0))

    def test_on_segment_outside_extent(self) -> None:
        assert not on_segment(P(0, 0), P(11, 0), P(10, 0))


# ---------------------------------------------------------------------------
# segments_intersect
# ---------------------------------------------------------------------------


class TestSegmentsIntersect:
    def test_crossing(self) -> None:
        assert segments_intersect(P(0, 0), P(10, 10), P(0, 10), P(10, 0))

    def test_parallel(self) -> None:
        assert not segments_intersect(P(0, 0), P(10, 0), P(0, 5), P(10, 5))

    def test_collinear_overlap(self) -> None:
        assert segments_intersect(P(0, 0), P(10, 0), P(5, 0), P(15, 0))

    def test_collinear_disjoint(self) -> None:
        assert not segments_intersect(P(0, 0), P(4, 0), P(5, 0), P(10, 0))

    def test_shared_endpoint(self) -> None:
        assert segments_intersect(P(0, 0), P(5, 5), P(5, 5), P(10, 0))

    def test_t_junction(self) -> None:
        assert segments_intersect(P(0, 0), P(10, 0), P(5, 0), P(5, 5))

    def test_near_miss(self) -> None:
        assert not segments_intersect(P(0, 0), P(10, 0), P(5, 1), P(5, 5))


# ---------------------------------------------------------------------------
# segment_intersects_rect
# ---------------------------------------------------------------------------


class TestSegmentIntersectsRect:
    rect = Rect(10, 10, 20, 20)

    def test_segment_through_rect(self) -> None:
        assert segment_intersects_rect(P(0, 15), P(30, 15), self.rect)

    def test_segment_missing_rect(self) -> None:
        assert not segment_intersects_rect(P(0, 0), P(30, 0), self.rect)

    def test_endpoint_inside(self) -> None:
        assert segment_intersects_rect(P(15, 15), P(100, 100), self.rect)

    def test_segment_fully_inside(self) -> None:
        assert segment_intersects_rect(P(12, 12), P(18, 18), self.rect)

    def test_diagonal_touching_corner(self) -> None:
        # x + y = 20 passes exactly through the (10, 10) corner
        assert segment_intersects_rect(P(0, 20), P(20, 0), self.rect)

    def test_diagonal_passing_corner(self) -> None:
        assert not segment_intersects_rect(P(0, 19), P(19, 0), self.rect)

    def test_segment_along_boundary(self) -> None:
        assert segment_intersects_rect(P(0, 10), P(30, 10), self.rect)

    def test_zero_length_inside(self) -> None:
        assert segment_intersects_rect(P(15, 15), P(15, 15), self.rect)

    def test_zero_length_outside(self) -> None:
        assert not segment_intersects_rect(P(5, 5), P(5, 5), self.rect)

    def test_start_on_obstacle_boundary(self) -> None:
        """An obstacle whose box touches the start point is an intersection."""
        start = P(0, 0)
        obstacle = Rect(-20, -20, 0, 0)
        assert segment_intersects_rect(start, P(100, 0), obstacle)

    def test_rect_edges_are_closed_loop(self) -> None:
        edges = rect_edges(self.rect)
        assert len(edges) == 4
        for (_, end), (nxt, _) in zip(edges, edges[1:] + edges[:1]):
            assert end == nxt


# ---------------------------------------------------------------------------
# path_obstruction_count
# ---------------------------------------------------------------------------


class TestPathObstructionCount:
    def test_clear_path(self) -> None:
        assert path_obstruction_count([P(0, 0), P(100, 0)], [Rect(40, 10, 60, 30)]) == 0

    def test_counts_each_segment_obstacle_pair(self) -> None:
        path = [P(0, 0), P(100, 0), P(100, 100)]
        obstacles = [
            Rect(40, -10, 60, 10),  # hit by first segment
            Rect(90, 40, 110, 60),  # hit by second segment
            Rect(200, 200, 210, 210),  # far away
        ]
        assert path_obstruction_count(path, obstacles) == 2

    def test_bend_inside_obstacle_counts_twice(self) -> None:
        path = [P(0, 0), P(50, 0), P(50, 100)]
        assert path_obstruction_count(path, [Rect(45, -5, 55, 5)]) == 2

    def test_no_obstacles(self) -> None:
        assert path_obstruction_count([P(0, 0), P(1, 1)], []) == 0

    def test_single_point_path(self) -> None:
        assert path_obstruction_count([P(0, 0)], [Rect(-1, -1, 1, 1)]) == 0

    def test_accepts_generator(self) -> None:
        obstacles = (r for r in [Rect(40, -10, 60, 10), Rect(140, -10, 160, 10)])
        assert path_obstruction_count([P(0, 0), P(200, 0)], obstacles) == 2


# ---------------------------------------------------------------------------
# collapse_duplicates
# ---------------------------------------------------------------------------


class TestCollapseDuplicates:
    def test_removes_consecutive_duplicates(self) -> None:
        pts = [P(0, 0), P(0, 0), P(5, 5), P(5, 5), P(10, 0)]
        assert collapse_duplicates(pts) == [P(0, 0), P(5, 5), P(10, 0)]

    def test_keeps_non_consecutive_repeats(self) -> None:
        pts = [P(0, 0), P(5, 5), P(0, 0)]
        assert collapse_duplicates(pts) == pts

    def test_bend_on_end_anchor(self) -> None:
        assert collapse_duplicates([P(0, 0), P(10, 0), P(10, 0)]) == [P(0, 0), P(10, 0)]

    @pytest.mark.parametrize("n", [2, 3, 4])
    def test_coincident_anchors_keep_two_points(self, n: int) -> None:
        assert collapse_duplicates([P(0, 0)] * n) == [P(0, 0), P(0, 0)]
