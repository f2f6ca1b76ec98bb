from __future__ import annotations

import numpy as np

from sobol import ScaledSobolSeq, SobolSeq
from sobol.display import describe, describe_html


def test_unit_cube() -> None:
    assert describe(SobolSeq(1)) == "1-dimensional Sobol sequence on [0,1]^1"
    assert describe_html(SobolSeq(5)) == "5-dimensional Sobol sequence on [0,1]<sup>5</sup>"


def test_repeated_intervals_are_collapsed() -> None:
    s = ScaledSobolSeq([0, 0, 1], [1, 1, 2])

    assert str(s) == "3-dimensional scaled float64 Sobol sequence on [0.0,1.0]^2 x [1.0,2.0]"
    assert s._repr_html_() == (
        "3-dimensional scaled float64 Sobol sequence on [0.0,1.0]<sup>2</sup> × [1.0,2.0]"
    )


def test_trailing_run_is_collapsed() -> None:
    s = ScaledSobolSeq([-1.0, 0.0, 0.0, 0.0], [1.0, 2.0, 2.0, 2.0])

    assert describe(s) == "4-dimensional scaled float64 Sobol sequence on [-1.0,1.0] x [0.0,2.0]^3"


def test_float32_bounds_name_their_type() -> None:
    s = ScaledSobolSeq(np.zeros(1, dtype=np.float32), np.ones(1, dtype=np.float32))

    assert describe(s) == "1-dimensional scaled float32 Sobol sequence on [0.0,1.0]"


def test_empty_scaled_sequence() -> None:
    assert describe(ScaledSobolSeq([], [])) == "0-dimensional scaled float64 Sobol sequence"


def test_repr() -> None:
    assert repr(ScaledSobolSeq([0.0], [2.5])) == "ScaledSobolSeq([0.0], [2.5])"
