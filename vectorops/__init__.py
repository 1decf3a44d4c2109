"""
vectorops: element-wise vector arithmetic and matrix-vector products
over numpy arrays.

Public API:
    add(a, b)                       - Element-wise sum
    subtract(a, b)                  - Element-wise difference
    scale(v, k)                     - Multiply by a scalar
    matrix_vector_multiply(m, v)    - Dense matrix-vector product

All operations are pure: they validate their inputs, fail loudly on a
dimension mismatch, and return a newly allocated array.
"""

__version__ = "0.1.0"

from vectorops.core.exceptions import (
    VectorOpsError,
    ValidationError,
    DimensionError,
)
from vectorops.elementwise import add, subtract, scale
from vectorops.matvec import matrix_vector_multiply

__all__ = [
    "__version__",
    "add",
    "subtract",
    "scale",
    "matrix_vector_multiply",
    "VectorOpsError",
    "ValidationError",
    "DimensionError",
]
