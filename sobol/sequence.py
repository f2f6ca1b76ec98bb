"""Sobol low-discrepancy sequences on the unit hypercube.

    s = SobolSeq(2)
    for x in itertools.islice(s, 16):
        ...

A sequence is a stateful, infinite, non-restartable stream of points. Each
call to ``next`` advances the generator by one point using the Gray-code
recurrence (Antonov & Saleev), so only one direction number per dimension is
XOR-ed in per step.
"""

import logging
import operator
import warnings
from typing import Optional, Protocol, Union, runtime_checkable

import numpy as np

from .directions import build_directions
from .display import describe, describe_html
from .errors import CounterExhausted, DimensionMismatch
from .soboldata import DEFAULT_DIRECTION_DATA, DirectionData

logger = logging.getLogger(__name__)

# the counter is 32-bit; after this many points the sequence is spent
MAX_COUNT = 2**32 - 1


@runtime_checkable
class LowDiscrepancySequence(Protocol):
    """Anything that hands out fixed-length points one at a time."""

    @property
    def ndims(self) -> int: ...

    def next(self, out: Optional[np.ndarray] = None) -> np.ndarray: ...


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def skip_count(n: int, exact: bool = False) -> int:
    """Number of points ``skip(n, exact)`` actually discards.

    Unless ``exact`` is set this is ``2^m - 1`` for the largest ``m`` with
    ``2^m <= n + 1`` (Acworth et al. 1998, Joe & Kuo 2003); skipping one less
    than a power of two leaves a better distributed tail than skipping ``n``.
    """
    n = operator.index(n)
    if n <= 0:
        return 0
    if exact:
        return n
    return (1 << ((n + 1).bit_length() - 1)) - 1


def check_buffer(out: np.ndarray, ndims: int) -> None:
    """Reject anything but a 1-d floating array of length ``ndims``."""
    if not isinstance(out, np.ndarray) or not np.issubdtype(out.dtype, np.floating):
        raise TypeError(f"output buffer must be a floating point numpy array, got {type(out).__name__}")
    if out.ndim != 1 or len(out) != ndims:
        raise DimensionMismatch(f"output buffer has shape {out.shape}, sequence has dimension {ndims}")


def _below_one(out: np.ndarray) -> np.ndarray:
    # float32 and narrower can round 1 - 2^-k up to 1.0
    if out.dtype != np.float64:
        np.minimum(out, np.nextafter(out.dtype.type(1), out.dtype.type(0)), out=out)
    return out


class SobolSeq:
    """``ndims``-dimensional Sobol sequence on ``[0,1)^ndims``.

    ``data`` replaces the bundled direction numbers (see
    :func:`sobol.soboldata.load_joe_kuo`). ``rng`` is a seed or
    ``numpy.random.Generator`` used only once the 32-bit counter is spent and
    the sequence falls back to pseudorandom points.
    """

    def __init__(
        self,
        ndims: int,
        data: Optional[DirectionData] = None,
        rng: Union[None, int, np.random.Generator] = None,
    ) -> None:
        self._m = build_directions(ndims, DEFAULT_DIRECTION_DATA if data is None else data)
        self._ndims = self._m.shape[0]
        self._x = np.zeros(self._ndims, dtype=np.uint32)
        self._b = np.zeros(self._ndims, dtype=np.uint32)
        self._n = 0
        self._rng = rng
        self._warned = False

    @property
    def ndims(self) -> int:
        return self._ndims

    @property
    def count(self) -> int:
        """Points generated so far by the low-discrepancy recurrence."""
        return self._n

    @property
    def exhausted(self) -> bool:
        return self._n == MAX_COUNT

    @property
    def scale_markers(self) -> np.ndarray:
        return self._b.copy()

    @property
    def direction_numbers(self) -> np.ndarray:
        return self._m.copy()

    def next(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Return the next point, writing it into ``out`` when given.

        ``out`` may be any 1-d floating array. Values are exact in float64;
        narrower buffers round, and are clamped below 1 so points stay in
        ``[0,1)``.
        """
        if out is None:
            out = np.empty(self._ndims, dtype=np.float64)
        else:
            check_buffer(out, self._ndims)

        if self._n == MAX_COUNT:
            return self._fallback(out)

        self._n += 1
        c = _trailing_zeros(self._n)
        x, b = self._x, self._b
        col = self._m[:, c]

        # dimensions whose fixed point already sits at or past bit c
        low = b >= c
        high = ~low
        x[low] ^= col[low] << (b[low] - np.uint32(c))
        x[high] = (x[high] << (np.uint32(c) - b[high])) ^ col[high]
        b[high] = c

        # x[i] * 2^-(b[i]+1); ldexp by a power of two is exact in float64
        out[:] = np.ldexp(x.astype(np.float64), -(b.astype(np.int32) + 1))
        return _below_one(out)

    def _fallback(self, out: np.ndarray) -> np.ndarray:
        if not isinstance(self._rng, np.random.Generator):
            self._rng = np.random.default_rng(self._rng)
        if not self._warned:
            self._warned = True
            logger.warning("Sobol counter exhausted after %d points, falling back to pseudorandom output", MAX_COUNT)
            warnings.warn(
                f"{self._ndims}-dimensional Sobol sequence exhausted; points are now pseudorandom",
                CounterExhausted,
                stacklevel=3,
            )
        out[:] = self._rng.random(self._ndims)
        return _below_one(out)

    def skip(self, n: int, exact: bool = False) -> "SobolSeq":
        """Discard points; see :func:`skip_count` for how many. Returns ``self``."""
        nskip = skip_count(n, exact)
        buf = np.empty(self._ndims, dtype=np.float64)
        for _ in range(nskip):
            self.next(buf)
        return self

    def take(self, count: int) -> np.ndarray:
        """The next ``count`` points as a ``(count, ndims)`` array."""
        pts = np.empty((operator.index(count), self._ndims), dtype=np.float64)
        for row in pts:
            self.next(row)
        return pts

    # the stream never ends; past MAX_COUNT it continues pseudorandomly
    def __iter__(self) -> "SobolSeq":
        return self

    def __next__(self) -> np.ndarray:
        return self.next()

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"SobolSeq({self._ndims})"

    def _repr_html_(self) -> str:
        return describe_html(self)

