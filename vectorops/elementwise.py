"""
Element-wise vector operations.

Provides add(), subtract() and scale(). Each returns a new array and never
modifies its inputs. Element dtype follows numpy promotion of the operands,
so integer vectors stay integer and keep numpy's fixed-width wraparound.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from vectorops.core.types import Vector, scalar_result_dtype
from vectorops.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_scalar,
    check_scalar_fits,
)


def _check_vector_pair(a: ArrayLike, b: ArrayLike) -> tuple[Vector, Vector]:
    """Convert both operands to 1D arrays of equal length."""
    a_arr = check_array(a, "a")
    b_arr = check_array(b, "b")
    check_1d(a_arr, "a")
    check_1d(b_arr, "b")
    check_consistent_length(a_arr, b_arr, names=("a", "b"))
    return a_arr, b_arr


def subtract(a: ArrayLike, b: ArrayLike) -> Vector:
    """
    Element-wise difference of two vectors.

    Parameters
    ----------
    a : array-like
        Minuend, 1D numeric.
    b : array-like
        Subtrahend, 1D numeric, same length as ``a``.

    Returns
    -------
    numpy.ndarray
        New vector with ``result[i] == a[i] - b[i]``.

    Raises
    ------
    DimensionError
        If either operand is not 1D or the lengths differ.
    ValidationError
        If either operand is not numeric.

    Examples
    --------
    >>> subtract([1, 2], [5, 4])
    array([-4, -2])
    """
    a_arr, b_arr = _check_vector_pair(a, b)
    return np.subtract(a_arr, b_arr)


def add(a: ArrayLike, b: ArrayLike) -> Vector:
    """
    Element-wise sum of two vectors.

    Parameters
    ----------
    a, b : array-like
        1D numeric vectors of equal length.

    Returns
    -------
    numpy.ndarray
        New vector with ``result[i] == a[i] + b[i]``.

    Raises
    ------
    DimensionError
        If either operand is not 1D or the lengths differ.
    ValidationError
        If either operand is not numeric.

    Examples
    --------
    >>> add([1, 2, 3, 4, 5], [5, 4, 3, 2, 1])
    array([6, 6, 6, 6, 6])
    """
    a_arr, b_arr = _check_vector_pair(a, b)
    return np.add(a_arr, b_arr)


def scale(v: ArrayLike, k: ArrayLike) -> Vector:
    """
    Multiply every element of a vector by a scalar.

    Parameters
    ----------
    v : array-like
        1D numeric vector.
    k : scalar
        Numeric multiplier. Arrays are rejected rather than broadcast.

    Returns
    -------
    numpy.ndarray
        New vector with ``result[i] == v[i] * k``.

    Raises
    ------
    DimensionError
        If ``v`` is not 1D or ``k`` is not a scalar.
    ValidationError
        If ``v`` or ``k`` is not numeric, or ``k`` does not fit the
        result dtype (e.g. 300 with an int8 vector).

    Examples
    --------
    >>> scale([1, 2, 3, 4, 5], 5)
    array([ 5, 10, 15, 20, 25])
    """
    v_arr = check_array(v, "v")
    check_1d(v_arr, "v")
    k_val = check_scalar(k, "k")
    dtype = scalar_result_dtype(v_arr.dtype, k_val)
    check_scalar_fits(k_val, dtype, "k")
    return np.multiply(v_arr.astype(dtype, copy=False), dtype.type(k_val))
