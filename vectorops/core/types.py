"""
Type aliases and the numeric capability check.

Every operation is generic over an element type T that supports addition,
subtraction, multiplication and has a zero value. With numpy this is exactly
the set of dtypes below numpy.number: signed and unsigned integers, floats
and complex numbers. Booleans, strings, objects and datetimes are excluded.
"""

from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.number[Any]]
Matrix = NDArray[np.number[Any]]  # 2D
Scalar = Union[int, float, complex, np.number[Any]]


def is_numeric_dtype(dtype: np.dtype[Any]) -> bool:
    """True if arithmetic on ``dtype`` yields the same kind of number."""
    return bool(np.issubdtype(dtype, np.number))


def _kind_rank(dtype: np.dtype[Any]) -> int:
    if np.issubdtype(dtype, np.complexfloating):
        return 2
    if np.issubdtype(dtype, np.floating):
        return 1
    return 0


def scalar_result_dtype(array_dtype: np.dtype[Any], value: Scalar) -> np.dtype[Any]:
    """
    Dtype of ``array * value``, independent of the installed numpy version.

    Numpy scalars promote by dtype. Python numbers are weak: they keep the
    array's dtype unless they are of a higher kind (a float meeting an int
    array, a complex meeting a real one), in which case the kind's default
    dtype takes part in promotion.
    """
    if isinstance(value, np.generic):
        return np.result_type(array_dtype, value.dtype)

    value_dtype = np.asarray(value).dtype
    if _kind_rank(value_dtype) <= _kind_rank(array_dtype):
        return np.dtype(array_dtype)
    return np.result_type(array_dtype, value_dtype)


__all__ = [
    "Vector",
    "Matrix",
    "Scalar",
    "is_numeric_dtype",
    "scalar_result_dtype",
]
