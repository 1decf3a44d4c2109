"""
Tests for the vectorops exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via VectorOpsError)
    - Diagnostic attributes on DimensionError
    - Default attribute values (None for optional attributes)
"""

import pytest

from vectorops.core.exceptions import (
    DimensionError,
    ValidationError,
    VectorOpsError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via VectorOpsError."""

    def test_validation_error_is_vectorops_error(self):
        with pytest.raises(VectorOpsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_dimension_error_is_vectorops_error(self):
        with pytest.raises(VectorOpsError):
            raise DimensionError("wrong shape")

    def test_not_a_value_error(self):
        """Library errors are not confused with stdlib ValueError."""
        assert not isinstance(DimensionError("x"), ValueError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries the lengths involved in a mismatch."""

    def test_message(self):
        err = DimensionError("a: expected 1D array, got 2D")
        assert "expected 1D" in str(err)

    def test_all_attributes(self):
        err = DimensionError("length mismatch", expected=3, actual=2)
        assert str(err) == "length mismatch"
        assert err.expected == 3
        assert err.actual == 2

    def test_defaults_are_none(self):
        err = DimensionError("ragged")
        assert err.expected is None
        assert err.actual is None
