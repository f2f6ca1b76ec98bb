"""Sobol low-discrepancy quasi-random sequences."""

from .directions import build_directions
from .errors import CounterExhausted, DimensionMismatch, DirectionDataError, InvalidDimension
from .scaled import ScaledSobolSeq, sobol_seq
from .sequence import MAX_COUNT, LowDiscrepancySequence, SobolSeq, skip_count
from .soboldata import BRATLEY_FOX_DATA, DEFAULT_DIRECTION_DATA, DirectionData, load_joe_kuo

__all__ = [
    "BRATLEY_FOX_DATA",
    "CounterExhausted",
    "DEFAULT_DIRECTION_DATA",
    "DimensionMismatch",
    "DirectionData",
    "DirectionDataError",
    "InvalidDimension",
    "LowDiscrepancySequence",
    "MAX_COUNT",
    "ScaledSobolSeq",
    "SobolSeq",
    "build_directions",
    "load_joe_kuo",
    "skip_count",
    "sobol_seq",
]
