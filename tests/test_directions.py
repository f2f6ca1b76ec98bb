"""Direction-number table construction."""

from __future__ import annotations

import numpy as np
import pytest

from sobol import BRATLEY_FOX_DATA, DEFAULT_DIRECTION_DATA, InvalidDimension, build_directions
from sobol.directions import NBITS, direction_row

MAX_DIM = DEFAULT_DIRECTION_DATA.max_dimension


@pytest.fixture(scope="module")
def full_table() -> np.ndarray:
    return build_directions(MAX_DIM)


def test_default_table_covers_21201_dimensions() -> None:
    assert MAX_DIM == 21201
    assert len(DEFAULT_DIRECTION_DATA.polynomials) == 21200


def test_zero_dimensions_gives_empty_table() -> None:
    m = build_directions(0)

    assert m.shape == (0, NBITS)
    assert m.dtype == np.uint32


def test_first_dimension_is_all_ones() -> None:
    m = build_directions(1)

    assert m.shape == (1, 32)
    assert np.all(m[0] == 1)


def test_second_and_third_dimension_rows() -> None:
    m = build_directions(3)

    # x + 1 with m_1 = 1: m_j = m_{j-1} ^ (m_{j-1} << 1)
    assert m[1, :6].tolist() == [1, 3, 5, 15, 17, 51]
    # x^2 + x + 1 with m = (1, 3)
    assert m[2, :5].tolist() == [1, 3, 3, 9, 29]


def test_bratley_fox_third_dimension_row() -> None:
    m = build_directions(3, BRATLEY_FOX_DATA)

    # x^2 + x + 1 with m = (1, 1)
    assert m[2, :5].tolist() == [1, 1, 7, 11, 13]


def test_fortieth_dimension_row() -> None:
    m = build_directions(40)

    # x^8 + x^5 + x^3 + x^2 + 1, a = 22
    assert DEFAULT_DIRECTION_DATA.polynomials[38] == 301
    assert m[39, :8].tolist() == [1, 3, 1, 11, 11, 11, 77, 249]


def test_rows_start_with_their_seeds(full_table: np.ndarray) -> None:
    for i, minit in enumerate(DEFAULT_DIRECTION_DATA.initial_numbers, start=1):
        assert full_table[i, : len(minit)].tolist() == list(minit)


def test_direction_numbers_are_odd_and_bounded_by_their_bit(full_table: np.ndarray) -> None:
    m = full_table.astype(np.uint64)
    bound = np.uint64(1) << np.arange(1, NBITS + 1, dtype=np.uint64)

    assert np.all(m % 2 == 1)
    assert np.all(m < bound)


def test_direction_row_matches_recurrence_for_degree_three() -> None:
    # x^3 + x + 1 (0b1011): m_j = 8 m_{j-3} ^ m_{j-3} ^ 4 m_{j-2}
    row = direction_row(11, (1, 3, 7))
    for j in range(3, 10):
        assert row[j] == (row[j - 3] << 3) ^ row[j - 3] ^ (row[j - 2] << 2)


def test_rows_do_not_depend_on_table_size(full_table: np.ndarray) -> None:
    small = build_directions(5)
    medium = build_directions(1111)

    assert np.array_equal(small, full_table[:5])
    assert np.array_equal(medium, full_table[:1111])


@pytest.mark.parametrize("ndims", [-1, MAX_DIM + 1, MAX_DIM + 2])
def test_out_of_range_dimension_is_rejected(ndims: int) -> None:
    with pytest.raises(InvalidDimension) as excinfo:
        build_directions(ndims)

    assert excinfo.value.ndims == ndims
    assert excinfo.value.max_dimension == MAX_DIM


def test_out_of_range_for_smaller_table() -> None:
    with pytest.raises(InvalidDimension) as excinfo:
        build_directions(41, BRATLEY_FOX_DATA)

    assert excinfo.value.max_dimension == 40


def test_largest_dimension_is_accepted(full_table: np.ndarray) -> None:
    assert full_table.shape == (MAX_DIM, NBITS)
    assert full_table.dtype == np.uint32


def test_non_integral_dimension_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        build_directions(2.5)
