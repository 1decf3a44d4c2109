"""
Exception hierarchy for vectorops.

All exceptions inherit from VectorOpsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class VectorOpsError(Exception):
    """Base exception for all vectorops errors."""
    pass


class ValidationError(VectorOpsError):
    """
    Input validation failed.
    
    Raised when user-provided inputs cannot be used at all, e.g. non-numeric
    data or an unknown option value.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible with the operation.
    
    Raised when an array has the wrong number of dimensions, when a matrix
    is ragged, or when operand lengths disagree (the dimension-mismatch
    case of add, subtract and matrix_vector_multiply).
    
    Attributes:
        expected: Length the operation required, if a length mismatch
        actual: Length that was supplied, if a length mismatch
    """
    
    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
