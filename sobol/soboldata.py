"""Primitive polynomials and initial direction numbers.

The default table is Joe & Kuo's ``new-joe-kuo-6.21201`` (dimensions up to
21201), shipped next to this module and read with :func:`load_joe_kuo`
(https://web.maths.unsw.edu.au/~fkuo/sobol/). The older Bratley & Fox set
(ACM TOMS Algorithm 659, dimensions up to 40) is kept as
``BRATLEY_FOX_DATA``. Each polynomial is stored with its leading and constant
bits, e.g. ``x^2 + x + 1`` is ``0b111 == 7``; its degree is the position of
the leading bit and it carries that many initial direction numbers.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .errors import DirectionDataError

# (polynomial, initial direction numbers) for dimension 2, 3, ...
_BRATLEY_FOX = (
    (3, (1,)),
    (7, (1, 1)),
    (11, (1, 3, 7)),
    (13, (1, 1, 5)),
    (19, (1, 3, 1, 1)),
    (25, (1, 1, 3, 7)),
    (37, (1, 3, 3, 9, 9)),
    (59, (1, 3, 7, 13, 3)),
    (47, (1, 1, 5, 11, 27)),
    (61, (1, 3, 5, 1, 15)),
    (55, (1, 1, 7, 3, 29)),
    (41, (1, 3, 7, 7, 21)),
    (67, (1, 1, 1, 9, 23, 37)),
    (97, (1, 3, 3, 5, 19, 33)),
    (91, (1, 1, 3, 13, 11, 7)),
    (109, (1, 1, 7, 13, 25, 5)),
    (103, (1, 3, 5, 11, 7, 11)),
    (115, (1, 1, 1, 3, 13, 39)),
    (131, (1, 3, 1, 15, 17, 63, 13)),
    (193, (1, 1, 5, 5, 1, 27, 33)),
    (137, (1, 3, 3, 3, 25, 17, 115)),
    (145, (1, 1, 3, 15, 29, 15, 41)),
    (143, (1, 3, 1, 7, 3, 23, 79)),
    (241, (1, 3, 7, 9, 31, 29, 17)),
    (157, (1, 1, 5, 13, 11, 3, 29)),
    (185, (1, 3, 1, 9, 5, 21, 119)),
    (167, (1, 1, 3, 1, 23, 13, 75)),
    (229, (1, 3, 3, 11, 27, 31, 73)),
    (171, (1, 1, 7, 7, 19, 25, 105)),
    (213, (1, 3, 5, 5, 21, 9, 7)),
    (191, (1, 1, 1, 15, 5, 49, 59)),
    (253, (1, 1, 1, 1, 1, 33, 65)),
    (203, (1, 3, 5, 15, 17, 19, 21)),
    (211, (1, 1, 7, 11, 13, 29, 3)),
    (239, (1, 3, 7, 5, 7, 11, 113)),
    (247, (1, 1, 5, 3, 15, 19, 61)),
    (285, (1, 3, 1, 1, 9, 27, 89, 7)),
    (369, (1, 1, 3, 7, 31, 15, 45, 23)),
    (299, (1, 3, 3, 9, 9, 25, 107, 39)),
)

JOE_KUO_PATH = Path(__file__).resolve().parent / "new-joe-kuo-6.21201"

# direction numbers are 32-bit, so a polynomial may have at most 31 seeds
MAX_DEGREE = 31


def degree(poly: int) -> int:
    return poly.bit_length() - 1


@dataclass(frozen=True)
class DirectionData:
    """Read-only polynomial/seed table, one row per dimension from 2 upward."""

    polynomials: Tuple[int, ...]
    initial_numbers: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.polynomials) != len(self.initial_numbers):
            raise DirectionDataError(
                f"{len(self.polynomials)} polynomials but "
                f"{len(self.initial_numbers)} rows of initial direction numbers"
            )
        for row, (poly, minit) in enumerate(zip(self.polynomials, self.initial_numbers)):
            _check_row(row + 2, poly, minit)

    @property
    def max_dimension(self) -> int:
        # dimension 1 needs no polynomial
        return len(self.polynomials) + 1


def _check_row(dim: int, poly: int, minit: Tuple[int, ...]) -> None:
    d = degree(poly)
    if poly < 2 or not poly & 1:
        raise DirectionDataError(f"dimension {dim}: {poly} is not a primitive polynomial encoding")
    if d > MAX_DEGREE:
        raise DirectionDataError(f"dimension {dim}: degree {d} exceeds {MAX_DEGREE}")
    if len(minit) < d:
        raise DirectionDataError(
            f"dimension {dim}: degree {d} needs {d} initial direction numbers, got {len(minit)}"
        )
    for k, m in enumerate(minit[:d], start=1):
        if not m & 1 or not 0 < m < (1 << k):
            raise DirectionDataError(
                f"dimension {dim}: initial direction number m_{k} = {m} must be odd and below 2^{k}"
            )


def load_joe_kuo(path: Union[str, Path], max_dimension: Optional[int] = None) -> DirectionData:
    """Read a Joe & Kuo direction-number file such as ``new-joe-kuo-6.21201``.

    The file has a header line followed by rows ``d s a m_1 ... m_s`` where
    ``a`` holds the interior coefficients of the degree-``s`` polynomial.
    Only rows up to ``max_dimension`` are read when it is given.
    """

    polys = []
    minits = []
    with open(Path(path)) as fid:
        fid.readline()
        for lineno, line in enumerate(fid, start=2):
            if not line.strip():
                continue
            try:
                dim, s, a, *m = [int(f) for f in line.split()]
            except ValueError:
                raise DirectionDataError(f"{path}:{lineno}: expected integers, got {line.strip()!r}") from None
            if max_dimension is not None and dim > max_dimension:
                break
            if dim != len(polys) + 2:
                raise DirectionDataError(f"{path}:{lineno}: expected dimension {len(polys) + 2}, got {dim}")
            if s < 1 or len(m) != s:
                raise DirectionDataError(f"{path}:{lineno}: degree {s} with {len(m)} direction numbers")
            if a < 0 or a >> (s - 1):
                raise DirectionDataError(f"{path}:{lineno}: coefficients {a} do not fit degree {s}")
            polys.append((1 << s) | (a << 1) | 1)
            minits.append(tuple(m))
    return DirectionData(tuple(polys), tuple(minits))


BRATLEY_FOX_DATA = DirectionData(
    tuple(a for a, _ in _BRATLEY_FOX),
    tuple(minit for _, minit in _BRATLEY_FOX),
)

DEFAULT_DIRECTION_DATA = load_joe_kuo(JOE_KUO_PATH)
