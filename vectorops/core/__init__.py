"""
Core infrastructure for vectorops.

This module provides the shared abstractions used by the operation modules
(elementwise, matvec).

Key components:
    exceptions: Exception hierarchy
    types: Array/scalar aliases and the numeric capability check
    validation: Fail-fast input validators
    tolerances: Comparison tolerances per dtype
"""

from vectorops.core.exceptions import (
    VectorOpsError,
    ValidationError,
    DimensionError,
)
from vectorops.core.tolerances import ToleranceTier, select_tolerance
from vectorops.core.types import Vector, Matrix, Scalar, is_numeric_dtype

__all__ = [
    # Exceptions
    "VectorOpsError",
    "ValidationError",
    "DimensionError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Types
    "Vector",
    "Matrix",
    "Scalar",
    "is_numeric_dtype",
]
