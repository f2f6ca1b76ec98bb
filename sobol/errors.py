"""Exception and warning types raised by the Sobol generators."""


class InvalidDimension(ValueError):
    """Requested dimension is negative or beyond the direction table."""

    def __init__(self, ndims: int, max_dimension: int) -> None:
        self.ndims = ndims
        self.max_dimension = max_dimension
        super().__init__(
            f"invalid Sobol dimension {ndims}: must satisfy 0 <= N <= {max_dimension}"
        )


class DimensionMismatch(ValueError):
    """A buffer or bound vector does not match the sequence dimension."""


class DirectionDataError(ValueError):
    """A direction-number dataset is malformed."""


class CounterExhausted(RuntimeWarning):
    """The 32-bit point counter saturated; output is now pseudorandom."""
