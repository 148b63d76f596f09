"""
Candidate path generation over a fixed offset lattice.

Candidates are produced lazily in strict priority order so the selector
can stop as soon as it finds a clear one:

1. The direct segment ``[start, end]``
2. Single-bend paths through a point near the horizontal midpoint,
   anchored at the start's y (horizontal-first) or the end's y
   (vertical-first)
3. Double-bend paths through two points near the vertical midpoint,
   the first offset from the start's x and the second from the end's x

The lattice is small and fixed, which bounds the work per edge to
1 + 2*k**2 + k**4 evaluations for a lattice of k offsets regardless of
how many obstacles the diagram holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .types import CandidateKind, Point

# Tried in this order; earlier offsets win ties.
DEFAULT_OFFSETS: tuple[float, ...] = (0, 20, -20, 40, -40, 60, -60)


@dataclass(frozen=True)
class Candidate:
    """A candidate path and the stage that generated it."""

    points: tuple[Point, ...]
    kind: CandidateKind


def direct_candidate(start: Point, end: Point) -> Candidate:
    """The straight segment between the anchors."""
    return Candidate((start, end), CandidateKind.DIRECT)


def single_bend_candidates(
    start: Point,
    end: Point,
    offsets: Sequence[float] = DEFAULT_OFFSETS,
) -> Iterator[Candidate]:
    """
    Yield one-bend candidates.

    For each (dx, dy) pair the horizontal-first variant is yielded before
    the vertical-first one.
    """
    mid_x = (start.x + end.x) / 2
    for dx in offsets:
        for dy in offsets:
            bend_h = Point(mid_x + dx, start.y + dy)
            yield Candidate((start, bend_h, end), CandidateKind.SINGLE_BEND)
            bend_v = Point(mid_x + dx, end.y + dy)
            yield Candidate((start, bend_v, end), CandidateKind.SINGLE_BEND)


def double_bend_candidates(
    start: Point,
    end: Point,
    offsets: Sequence[float] = DEFAULT_OFFSETS,
) -> Iterator[Candidate]:
    """Yield two-bend candidates from the nested four-offset search."""
    mid_y = (start.y + end.y) / 2
    for dx1 in offsets:
        for dy1 in offsets:
            p1 = Point(start.x + dx1, mid_y + dy1)
            for dx2 in offsets:
                for dy2 in offsets:
                    p2 = Point(end.x + dx2, mid_y + dy2)
                    yield Candidate((start, p1, p2, end), CandidateKind.DOUBLE_BEND)


def generate_candidates(
    start: Point,
    end: Point,
    offsets: Sequence[float] = DEFAULT_OFFSETS,
) -> Iterator[Candidate]:
    """Yield every candidate, direct path first, double-bend paths last."""
    yield direct_candidate(start, end)
    yield from single_bend_candidates(start, end, offsets)
    yield from double_bend_candidates(start, end, offsets)


def candidate_count(offsets: Sequence[float] = DEFAULT_OFFSETS) -> int:
    """Upper bound on the number of candidates for a lattice."""
    k = len(offsets)
    return 1 + 2 * k * k + k**4


__all__ = [
    "DEFAULT_OFFSETS",
    "Candidate",
    "direct_candidate",
    "single_bend_candidates",
    "double_bend_candidates",
    "generate_candidates",
    "candidate_count",
]
