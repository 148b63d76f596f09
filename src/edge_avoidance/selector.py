"""
Best-candidate selection by obstruction count.

Scores candidates in the order they are generated and keeps a running
best. Only a strictly lower count replaces the current best, so ties go
to the earlier (simpler) candidate. The first clear candidate ends the
search.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .candidates import Candidate, direct_candidate
from .geometry import collapse_duplicates, path_obstruction_count
from .types import CandidateKind, Point, Rect


@dataclass(frozen=True)
class Selection:
    """
    Outcome of a selection run.

    Attributes:
        points: Chosen path with consecutive duplicates collapsed
        obstructions: Obstruction count of the chosen path
        evaluated: Number of candidates scored
        kind: Stage that produced the chosen path
    """

    points: tuple[Point, ...]
    obstructions: int
    evaluated: int
    kind: CandidateKind


def select_path(
    candidates: Iterable[Candidate],
    obstacles: Sequence[Rect],
    start: Optional[Point] = None,
    end: Optional[Point] = None,
) -> Selection:
    """
    Pick the candidate with the fewest obstructions.

    Args:
        candidates: Candidates in priority order (may be a lazy generator;
            it is not consumed past the first clear candidate)
        obstacles: Obstacle rectangles
        start: Start anchor, used for the direct-path fallback when no
            candidate is supplied
        end: End anchor, used for the direct-path fallback

    Returns:
        The selected path

    Raises:
        ValueError: If no candidate is supplied and no anchors are given
    """
    best: Optional[Candidate] = None
    min_obstructions = math.inf
    evaluated = 0

    for candidate in candidates:
        evaluated += 1
        count = path_obstruction_count(candidate.points, obstacles)
        if count < min_obstructions:
            min_obstructions = count
            best = candidate
        if min_obstructions == 0:
            break

    if best is None:
        if start is None or end is None:
            raise ValueError("No candidates to select from and no anchors for a direct path")
        best = direct_candidate(start, end)

    # Collapsing only removes zero-length segments, so the count can only drop.
    points = tuple(collapse_duplicates(best.points))
    return Selection(
        points=points,
        obstructions=path_obstruction_count(points, obstacles),
        evaluated=evaluated,
        kind=best.kind,
    )


__all__ = ["Selection", "select_path"]
