"""
Input validation utilities for edge routing.

Provides the exception and warning hierarchy used across the package and
centralized validation for router options. Raises descriptive exceptions
on invalid configuration; routing quality problems are reported as
warnings instead, because the router always produces some path.
"""

from __future__ import annotations

import math
from typing import Any, Sequence


class ValidationError(ValueError):
    """Base exception for routing validation errors."""

    pass


class MissingAnchorError(ValidationError):
    """Raised when an edge's start or end anchor is unavailable."""

    pass


class InvalidPaddingError(ValidationError):
    """Raised when obstacle padding is negative or not a number."""

    pass


class InvalidOffsetsError(ValidationError):
    """Raised when a candidate offset lattice is empty or malformed."""

    pass


class InvalidRectError(ValidationError):
    """Raised when a rectangle has inverted bounds."""

    pass


class UnknownNodeError(ValidationError):
    """Raised when an edge references a node that does not exist."""

    pass


class UnknownEdgeError(ValidationError):
    """Raised when an edge id is not in the diagram."""

    pass


class RoutingWarning(UserWarning):
    """Base category for routing quality warnings."""

    pass


class MissingObstacleDataWarning(RoutingWarning):
    """A node lacked bounding-box data and was left out of the obstacle set."""

    pass


class NoCleanPathWarning(RoutingWarning):
    """No candidate path avoided every obstacle; a best-effort path was used."""

    pass


def validate_padding(padding: Any) -> float:
    """
    Validate obstacle padding.

    Args:
        padding: Clearance added around every obstacle

    Returns:
        Padding as a float

    Raises:
        InvalidPaddingError: If padding is negative, NaN or not numeric
    """
    try:
        value = float(padding)
    except (TypeError, ValueError):
        raise InvalidPaddingError(f"padding must be a number, got {padding!r}") from None

    if math.isnan(value) or value < 0:
        raise InvalidPaddingError(f"padding must be >= 0, got {padding}")
    return value


def validate_offsets(offsets: Sequence[Any]) -> tuple[float, ...]:
    """
    Validate a candidate offset lattice.

    Order is preserved: it is the order in which candidates are tried.

    Args:
        offsets: Sequence of offsets in diagram units

    Returns:
        Offsets as a tuple of floats

    Raises:
        InvalidOffsetsError: If the lattice is empty or holds non-finite values
    """
    if isinstance(offsets, (str, bytes)):
        raise InvalidOffsetsError("offsets must be a sequence of numbers")
    try:
        values = tuple(float(v) for v in offsets)
    except (TypeError, ValueError):
        raise InvalidOffsetsError(f"offsets must be numbers, got {offsets!r}") from None

    if not values:
        raise InvalidOffsetsError("offsets must contain at least one value")
    bad = [v for v in values if not math.isfinite(v)]
    if bad:
        raise InvalidOffsetsError(f"offsets must be finite, got {bad}")
    return values


__all__ = [
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
    "validate_padding",
    "validate_offsets",
]
