"""Sobol sequences rescaled to a box ``[lb, ub]``."""

import operator
from typing import Optional, Sequence, Union

import numpy as np

from .display import describe, describe_html
from .errors import DimensionMismatch
from .sequence import SobolSeq, check_buffer
from .soboldata import DirectionData


def _bounds(v: np.ndarray, dtype: np.dtype) -> np.ndarray:
    v = np.array(v, dtype=dtype)
    v.flags.writeable = False
    return v


class ScaledSobolSeq:
    """Sobol sequence mapped affinely onto ``[lb[0],ub[0]] x [lb[1],ub[1]] x ...``.

    The dimension is ``len(lb)``. Points come out in the floating type of
    the bounds (``float64`` for integer bounds).
    """

    def __init__(
        self,
        lb: Sequence[float],
        ub: Sequence[float],
        data: Optional[DirectionData] = None,
        rng: Union[None, int, np.random.Generator] = None,
    ) -> None:
        lb = np.asarray(lb)
        ub = np.asarray(ub)
        if lb.ndim != 1 or ub.ndim != 1 or len(lb) != len(ub):
            raise DimensionMismatch(f"lb and ub do not have the same length: {lb.shape} vs {ub.shape}")
        dtype = np.result_type(lb, ub)
        if not np.issubdtype(dtype, np.floating):
            dtype = np.dtype(np.float64)
        self.dtype = dtype
        self._lb = _bounds(lb, dtype)
        self._ub = _bounds(ub, dtype)
        self._s = SobolSeq(len(lb), data=data, rng=rng)
        self._raw = np.empty(len(lb), dtype=np.float64)

    @property
    def ndims(self) -> int:
        return self._s.ndims

    @property
    def lb(self) -> np.ndarray:
        return self._lb

    @property
    def ub(self) -> np.ndarray:
        return self._ub

    @property
    def base(self) -> SobolSeq:
        """The underlying unit-cube sequence."""
        return self._s

    def next(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        if out is None:
            out = np.empty(self.ndims, dtype=self.dtype)
        else:
            check_buffer(out, self.ndims)
        raw = self._s.next(self._raw)
        out[:] = self._lb + (self._ub - self._lb) * raw
        return out

    def skip(self, n: int, exact: bool = False) -> "ScaledSobolSeq":
        self._s.skip(n, exact=exact)
        return self

    def take(self, count: int) -> np.ndarray:
        pts = np.empty((operator.index(count), self.ndims), dtype=self.dtype)
        for row in pts:
            self.next(row)
        return pts

    def __iter__(self) -> "ScaledSobolSeq":
        return self

    def __next__(self) -> np.ndarray:
        return self.next()

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"ScaledSobolSeq({self._lb.tolist()}, {self._ub.tolist()})"

    def _repr_html_(self) -> str:
        return describe_html(self)


def sobol_seq(*args, **kwargs) -> Union[SobolSeq, ScaledSobolSeq]:
    """Build a Sobol sequence the way the arguments describe it.

    ``sobol_seq(n)`` is the unit cube in ``n`` dimensions;
    ``sobol_seq(lb, ub)`` and ``sobol_seq(n, lb, ub)`` give the box ``[lb, ub]``.
    Keyword arguments are passed through (``data``, ``rng``).
    """
    if len(args) == 1:
        return SobolSeq(args[0], **kwargs)
    if len(args) == 2:
        return ScaledSobolSeq(*args, **kwargs)
    if len(args) == 3:
        n, lb, ub = args
        n = operator.index(n)
        if len(lb) != n or len(ub) != n:
            raise DimensionMismatch(f"lb and ub do not have length {n}")
        return ScaledSobolSeq(lb, ub, **kwargs)
    raise TypeError(f"sobol_seq() takes 1 to 3 positional arguments but {len(args)} were given")
