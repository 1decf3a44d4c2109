"""
Tolerance tiers for numerical comparison.

Integer arithmetic is exact, so integer results must match bit for bit.
Floating results depend on rounding and are compared with a tier that
fits the precision of their dtype:
- INT_EXACT: integer and unsigned integer dtypes
- FP64: float64 / complex128 and wider (longdouble)
- FP32: float32 / complex64
- FP16: float16

Used by the test suite and available to callers comparing results.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


INT_EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='int_exact',
    description='Integer arithmetic, exact match required',
)

FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few ulps of rounding',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select appropriate tolerance tier for results of a given dtype."""
    dt: np.dtype[Any] = np.dtype(dtype)
    if np.issubdtype(dt, np.integer):
        return INT_EXACT
    # finfo of a complex dtype describes one component
    bits = np.finfo(dt).bits
    if bits <= 16:
        return FP16
    if bits <= 32:
        return FP32
    # longdouble is compared at double precision
    return FP64
