from __future__ import annotations

import numpy as np
import pytest

from scalarfield import GridGeometry, InvalidGeometryError


@pytest.fixture
def geometry() -> GridGeometry:
    return GridGeometry(ncols=4, nrows=3, xllcorner=10.0, yllcorner=-5.0, cellsize=0.5)


def test_derived_corners_and_extent(geometry: GridGeometry) -> None:
    assert geometry.xurcorner == 12.0
    assert geometry.yurcorner == -3.5
    assert geometry.extent() == (10.0, -5.0, 12.0, -3.5)
    assert geometry.n_cells == 12
    assert geometry.shape == (3, 4)


def test_contains_is_closed(geometry: GridGeometry) -> None:
    assert geometry.contains(10.0, -5.0)
    assert geometry.contains(12.0, -3.5)
    assert not geometry.contains(9.99, -4.0)
    assert not geometry.contains(11.0, -3.4)


def test_decimal_indexes_count_rows_from_the_top(geometry: GridGeometry) -> None:
    assert geometry.decimal_indexes(10.0, -3.5) == (0.0, 0.0)
    assert geometry.decimal_indexes(12.0, -5.0) == (4.0, 3.0)
    assert geometry.decimal_indexes(10.75, -4.0) == pytest.approx((1.5, 1.0))


def test_surrounding_indexes_are_clamped(geometry: GridGeometry) -> None:
    assert geometry.surrounding_indexes(1.5, 0.2) == (1, 2, 0, 1)
    assert geometry.surrounding_indexes(3.5, 2.5) == (3, 3, 2, 2)
    assert geometry.surrounding_indexes(4.0, 3.0) == (3, 3, 2, 2)


def test_cell_centers_follow_grid_layout(geometry: GridGeometry) -> None:
    X, Y = geometry.cell_centers()
    assert X.shape == Y.shape == (3, 4)
    assert (X[0, 0], Y[0, 0]) == pytest.approx(geometry.cell_center(0, 0))
    assert geometry.cell_center(0, 0) == pytest.approx((10.25, -3.75))
    assert geometry.cell_center(2, 3) == pytest.approx((11.75, -4.75))
    assert np.allclose(X[:, 1], 10.75)
    assert np.allclose(Y[2, :], -4.75)


@pytest.mark.parametrize(
    "overrides",
    [
        {"ncols": 0},
        {"nrows": -2},
        {"ncols": 2.0},
        {"cellsize": 0.0},
        {"cellsize": float("nan")},
        {"xllcorner": float("inf")},
    ],
)
def test_invalid_geometry_is_rejected(overrides: dict) -> None:
    params = {"ncols": 2, "nrows": 2, "xllcorner": 0.0, "yllcorner": 0.0, "cellsize": 1.0}
    params.update(overrides)
    with pytest.raises(InvalidGeometryError):
        GridGeometry(**params)


def test_contains_indexes_takes_only_integer_cells(geometry: GridGeometry) -> None:
    assert geometry.contains_indexes(0, 0)
    assert geometry.contains_indexes(np.int64(2), np.int64(3))
    assert not geometry.contains_indexes(3, 0)
    assert not geometry.contains_indexes(0, -1)
    assert not geometry.contains_indexes(0.5, 0)
    assert not geometry.contains_indexes(1, 2.0)
