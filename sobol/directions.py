"""Direction-number tables for the Sobol recurrence."""

import logging
import operator
from typing import List, Sequence

import numpy as np

from .errors import InvalidDimension
from .soboldata import DEFAULT_DIRECTION_DATA, DirectionData, degree

logger = logging.getLogger(__name__)

# columns per dimension; one per bit of the 32-bit state
NBITS = 32


def direction_row(poly: int, minit: Sequence[int]) -> List[int]:
    """Extend the initial direction numbers of one dimension to ``NBITS`` entries.

    Bit ``k`` of ``poly`` selects whether ``m[j-d+k] << (d-k)`` is folded into
    ``m[j]``; bit 0 is always set, which gives the ``2^d * m[j-d]`` term.
    """
    d = degree(poly)
    m = list(minit[:d]) + [0] * (NBITS - d)
    for j in range(d, NBITS):
        ac = poly
        mj = m[j - d]
        for k in range(d):
            if ac & 1:
                mj ^= m[j - d + k] << (d - k)
            ac >>= 1
        m[j] = mj
    return m


def build_directions(ndims: int, data: DirectionData = DEFAULT_DIRECTION_DATA) -> np.ndarray:
    """Return the ``(ndims, 32)`` uint32 direction table for a Sobol sequence.

    Row 0 (the first dimension) is all ones; row ``i`` uses polynomial
    ``data.polynomials[i-1]``. Raises :class:`InvalidDimension` if ``ndims`` is
    negative or larger than ``data.max_dimension``.
    """
    ndims = operator.index(ndims)
    if ndims < 0 or ndims > data.max_dimension:
        raise InvalidDimension(ndims, data.max_dimension)

    m = np.ones((ndims, NBITS), dtype=np.uint32)
    for i in range(1, ndims):
        m[i] = direction_row(data.polynomials[i - 1], data.initial_numbers[i - 1])
    logger.debug("built %d-dimensional Sobol direction table", ndims)
    return m
