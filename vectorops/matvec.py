"""
Dense matrix-vector product.

The matrix argument is a nested sequence or 2D array. By default each inner
sequence is a column of the matrix, so ``matrix[j]`` holds the coefficients
multiplied by ``vector[j]``:

    [[1, 2], [-3, 4]] x [5, 7]  ==  5*[1, 2] + 7*[-3, 4]  ==  [-16, 38]

Pass ``layout='rows'`` when each inner sequence is a row instead.

Accumulation runs over columns in ascending order, adding one scaled column
to the running result at a time. Every element therefore sees the same
sequence of roundings on every platform, independent of the BLAS in use.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from vectorops.core.exceptions import ValidationError
from vectorops.core.types import Matrix, Vector
from vectorops.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_length,
)


Layout = Literal['columns', 'rows']

_LAYOUTS = ('columns', 'rows')


def matrix_vector_multiply(
    matrix: ArrayLike,
    vector: ArrayLike,
    *,
    layout: Layout = 'columns',
) -> Vector:
    """
    Multiply a vector by an M x N matrix.

    Parameters
    ----------
    matrix : array-like
        2D numeric, rectangular. With ``layout='columns'`` its shape is
        (N, M); with ``layout='rows'`` it is (M, N).
    vector : array-like
        1D numeric of length N, the column count.
    layout : {'columns', 'rows'}
        Whether the inner sequences of ``matrix`` are columns or rows.

    Returns
    -------
    numpy.ndarray
        New vector of length M with ``result[i] == sum_j A[i, j] * vector[j]``.
        Starts from zero, so an empty vector (N == 0) gives M zeros.

    Raises
    ------
    DimensionError
        If ``matrix`` is not 2D or ragged, ``vector`` is not 1D, or the
        vector length differs from the column count.
    ValidationError
        If an operand is not numeric or ``layout`` is unknown.

    Examples
    --------
    >>> matrix_vector_multiply([[1, 2], [-3, 4]], [5, 7])
    array([-16,  38])
    >>> matrix_vector_multiply([[1, 2], [-3, 4]], [5, 7], layout='rows')
    array([19, 13])
    """
    if layout not in _LAYOUTS:
        raise ValidationError(
            f"layout: expected one of {_LAYOUTS}, got {layout!r}"
        )

    m_arr: Matrix = check_array(matrix, "matrix")
    check_2d(m_arr, "matrix")
    v_arr = check_array(vector, "vector")
    check_1d(v_arr, "vector")

    columns = m_arr if layout == 'columns' else m_arr.T
    n_cols, n_rows = columns.shape
    check_length(v_arr, n_cols, "vector")

    # Products must be formed in the result dtype, not the narrower input one
    dtype = np.result_type(m_arr, v_arr)
    columns = columns.astype(dtype, copy=False)
    v_arr = v_arr.astype(dtype, copy=False)

    result = np.zeros(n_rows, dtype=dtype)
    for j in range(n_cols):
        result += columns[j] * v_arr[j]
    return result
