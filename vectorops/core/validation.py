"""
Input validation utilities for vectorops.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or broadcasting operands.

Design principles:
    - No silent type coercion (only np.asarray on array-likes)
    - Element dtype is preserved: integer inputs stay integer
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from vectorops.core.exceptions import ValidationError, DimensionError
from vectorops.core.types import Matrix, Scalar, Vector, is_numeric_dtype


def check_rectangular(array: ArrayLike, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.
    
    Only the outermost nesting level is inspected; numpy itself rejects
    deeper raggedness when the array is built.
    
    Args:
        array: Input to check (ndarrays always pass)
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If rows have differing lengths, or sequences are
            mixed with scalars at the same level
    """
    if not isinstance(array, (list, tuple)):
        return
    
    row_lengths = [
        len(row) for row in array
        if isinstance(row, (list, tuple))
        or (isinstance(row, np.ndarray) and row.ndim > 0)
    ]
    if not row_lengths:
        return
    
    if len(row_lengths) != len(array):
        raise DimensionError(
            f"{name}: mixes sequences and scalars at the same level"
        )
    if len(set(row_lengths)) > 1:
        raise DimensionError(
            f"{name}: ragged rows with lengths {row_lengths}"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.number[Any]]:
    """
    Validate and convert input to a numeric numpy array.
    
    Accepts any array-like and converts to numpy array without changing
    the element type. Rejects ragged nesting, object dtype (mixed types)
    and non-numeric dtypes such as bool, str or datetime.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with numeric dtype
        
    Raises:
        DimensionError: If a nested sequence is ragged
        ValidationError: If input cannot be converted to a numeric array
    """
    check_rectangular(array, name)
    
    try:
        result = np.asarray(array)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    
    if not is_numeric_dtype(result.dtype):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    
    return result


def check_ndim(array: NDArray[np.number[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: Vector, name: str) -> None:
    """Verify array is 1-dimensional (a vector)."""
    check_ndim(array, 1, name)


def check_2d(array: Matrix, name: str) -> None:
    """Verify array is 2-dimensional (a matrix)."""
    check_ndim(array, 2, name)


def check_length(array: NDArray[np.number[Any]], expected: int, name: str) -> None:
    """
    Verify array's first dimension equals an expected length.
    
    Args:
        array: Array to check
        expected: Required length
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the length differs; carries expected/actual
    """
    actual = array.shape[0]
    if actual != expected:
        raise DimensionError(
            f"{name}: expected length {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_consistent_length(
    *arrays: NDArray[np.number[Any]], 
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).
    
    The first array's length is taken as the expected one.
    
    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        
    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    
    if len(arrays) < 2:
        return
    
    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        mismatch = next(length for length in lengths if length != lengths[0])
        raise DimensionError(
            f"Inconsistent lengths: {details}",
            expected=lengths[0],
            actual=mismatch,
        )


def check_scalar(value: ArrayLike, name: str) -> Scalar:
    """
    Validate a single numeric value.
    
    Python numbers are returned unchanged so that numpy treats them as
    weakly typed and they do not widen the dtype of the array they meet.
    Numpy scalars and 0-d arrays are returned as numpy scalars.
    
    Args:
        value: Input to validate
        name: Parameter name for error messages
        
    Returns:
        The scalar, ready for arithmetic with an array
        
    Raises:
        DimensionError: If value is not 0-dimensional
        ValidationError: If value is not numeric
    """
    arr = check_array(value, name)
    if arr.ndim != 0:
        raise DimensionError(
            f"{name}: expected a scalar, got {arr.ndim}D array with shape {arr.shape}"
        )
    
    if isinstance(value, (int, float, complex)):
        return value
    return arr[()]


def check_scalar_fits(value: Scalar, dtype: np.dtype[Any], name: str) -> None:
    """
    Verify a scalar is representable in the dtype it will be computed in.
    
    Numpy versions disagree on out-of-range Python integers: some widen the
    result, others raise OverflowError. Rejecting them here gives one
    behaviour everywhere.
    
    Args:
        value: Scalar already passed through check_scalar
        dtype: Dtype the arithmetic will run in
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If value is outside the range of dtype
    """
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        if not info.min <= value <= info.max:
            raise ValidationError(
                f"{name}: {value} out of range for {dtype} [{info.min}, {info.max}]"
            )
        return
    
    try:
        dtype.type(value)
    except OverflowError as e:
        raise ValidationError(f"{name}: {value} out of range for {dtype}") from e
