"""
Routing quality metrics.

Provides quantitative measures of routed paths:
- Path length: Euclidean length of a polyline
- Bend count: Number of interior points
- Detour ratio: Path length relative to the straight anchor distance
- Quality summary: Aggregates over many routed edges

Hosts can use the summary as a quality signal for best-effort routes.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

import numpy as np

from .types import Point, RouteResult


def path_length(points: Sequence[Point]) -> float:
    """
    Euclidean length of a polyline.

    Args:
        points: Polyline vertices

    Returns:
        Sum of segment lengths (0 for fewer than 2 points)
    """
    if len(points) < 2:
        return 0.0
    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    return float(np.hypot(*np.diff(coords, axis=0).T).sum())


def bend_count(points: Sequence[Point]) -> int:
    """Number of interior points of a polyline."""
    return max(0, len(points) - 2)


def detour_ratio(points: Sequence[Point]) -> float:
    """
    Path length divided by the straight distance between its ends.

    Returns:
        1.0 for a straight path; 1.0 as well when the anchors coincide
    """
    if len(points) < 2:
        return 1.0
    straight = math.hypot(points[-1].x - points[0].x, points[-1].y - points[0].y)
    if straight == 0:
        return 1.0
    return path_length(points) / straight


def routing_quality_summary(results: Iterable[RouteResult]) -> dict[str, Any]:
    """
    Summarize a batch of routing results.

    Args:
        results: Routed edges

    Returns:
        Dictionary with:
        - edges: Number of results
        - clear: Number of obstruction-free paths
        - clear_ratio: clear / edges (1.0 for an empty batch)
        - total_obstructions: Sum of obstruction counts
        - max_obstructions: Worst single path
        - mean_bends: Average interior points per path
        - mean_detour_ratio: Average detour ratio
        - total_candidates: Candidates evaluated across the batch
    """
    results = list(results)
    if not results:
        return {
            "edges": 0,
            "clear": 0,
            "clear_ratio": 1.0,
            "total_obstructions": 0,
            "max_obstructions": 0,
            "mean_bends": 0.0,
            "mean_detour_ratio": 1.0,
            "total_candidates": 0,
        }

    obstructions = np.array([r.obstructions for r in results], dtype=np.int64)
    bends = np.array([bend_count(r.points) for r in results], dtype=np.float64)
    ratios = np.array([detour_ratio(r.points) for r in results], dtype=np.float64)
    candidates = np.array([r.candidates_evaluated for r in results], dtype=np.int64)
    clear = int(np.count_nonzero(obstructions == 0))

    return {
        "edges": len(results),
        "clear": clear,
        "clear_ratio": clear / len(results),
        "total_obstructions": int(obstructions.sum()),
        "max_obstructions": int(obstructions.max()),
        "mean_bends": float(bends.mean()),
        "mean_detour_ratio": float(ratios.mean()),
        "total_candidates": int(candidates.sum()),
    }


__all__ = [
    "path_length",
    "bend_count",
    "detour_ratio",
    "routing_quality_summary",
]
