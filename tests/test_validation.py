"""Tests for input validation module."""

import pytest

from edge_avoidance.validation import (
    InvalidOffsetsError,
    InvalidPaddingError,
    MissingAnchorError,
    MissingObstacleDataWarning,
    NoCleanPathWarning,
    RoutingWarning,
    UnknownEdgeError,
    UnknownNodeError,
    ValidationError,
    validate_offsets,
    validate_padding,
)


class TestPaddingValidation:
    """Tests for obstacle padding validation."""

    def test_zero_padding(self):
        """Zero padding is allowed."""
        assert validate_padding(0) == 0.0

    def test_numeric_string(self):
        """Numeric strings are converted."""
        assert validate_padding("7.5") == 7.5

    def test_negative_raises(self):
        with pytest.raises(InvalidPaddingError, match=">= 0"):
            validate_padding(-1)

    def test_nan_raises(self):
        with pytest.raises(InvalidPaddingError):
            validate_padding(float("nan"))

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidPaddingError, match="must be a number"):
            validate_padding("wide")

    def test_none_raises(self):
        with pytest.raises(InvalidPaddingError):
            validate_padding(None)


class TestOffsetsValidation:
    """Tests for candidate lattice validation."""

    def test_valid_offsets_keep_order(self):
        assert validate_offsets([0, 20, -20]) == (0.0, 20.0, -20.0)

    def test_empty_raises(self):
        with pytest.raises(InvalidOffsetsError, match="at least one"):
            validate_offsets([])

    def test_infinite_raises(self):
        with pytest.raises(InvalidOffsetsError, match="finite"):
            validate_offsets([0, float("inf")])

    def test_string_raises(self):
        with pytest.raises(InvalidOffsetsError):
            validate_offsets("020")

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidOffsetsError, match="must be numbers"):
            validate_offsets([0, "far"])


class TestHierarchy:
    """Error and warning categories."""

    def test_errors_are_value_errors(self):
        for exc in (
            MissingAnchorError,
            InvalidPaddingError,
            InvalidOffsetsError,
            UnknownEdgeError,
            UnknownNodeError,
        ):
            assert issubclass(exc, ValidationError)
            assert issubclass(exc, ValueError)

    def test_warnings_share_category(self):
        assert issubclass(MissingObstacleDataWarning, RoutingWarning)
        assert issubclass(NoCleanPathWarning, RoutingWarning)
        assert issubclass(RoutingWarning, UserWarning)
