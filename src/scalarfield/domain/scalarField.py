import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Sequence

import numpy as np

from ..config import ScalarFieldConfig
from ..errors import DimensionMismatchError, InvalidInterpolationInput, OutOfBoundsError
from ..infrastructure.asciiGrid import parse_ascii_grid
from ..infrastructure.interpolation import bilinear, interpolate_points
from .gridBuilder import build_grid, freeze_grid
from .gridGeometry import GridGeometry
from .sample import MISSING, Sample
from .spatialValueProvider import SpatialValueProvider
from .valueRange import ValueRange, compute_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cell:
    row: int
    column: int
    center: tuple[float, float]  # lon, lat
    value: Sample


class ScalarField(SpatialValueProvider):
    """
    A scalar quantity (elevation, wind speed, concentration...) sampled on a
    regular geographic grid.

    The field owns a read-only grid indexed as grid[row, column], with row 0
    at the top, and answers both per-cell and interpolated lookups. It never
    changes after construction.

    Attributes
    ----------
    geometry : GridGeometry
        Placement of the grid on the map.
    grid : np.ma.MaskedArray
        Read-only array of shape (nrows, ncols), masked where there is no data.
    range : ValueRange | None
        Minimum and maximum of the valid samples, None when the field was
        built without samples or no sample is valid.
    """

    def __init__(self, geometry: GridGeometry, zs: Sequence[Any]):
        """
        Build a field from a flat sample sequence.

        Parameters
        ----------
        geometry : GridGeometry
            Grid placement and dimensions.
        zs : Sequence
            ncols * nrows samples in x-ascending & y-descending order (same as
            in ASCIIGrid). None, MISSING and non-finite samples become missing cells.

        Raises
        ------
        DimensionMismatchError
            If len(zs) != ncols * nrows.
        """
        self._geometry = geometry
        self._grid = build_grid(zs, geometry.ncols, geometry.nrows)
        self._range = compute_range(zs)

        logger.debug("Built %dx%d scalar field, range %s", geometry.ncols, geometry.nrows, self._range)

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------

    @classmethod
    def from_ascii_grid(cls, asc: str) -> "ScalarField":
        """
        Create a ScalarField from the content of an ASCIIGrid file.

        Raises
        ------
        MalformedHeaderError
            If the header cannot be read.
        DimensionMismatchError
            If the data rows do not hold ncols * nrows values.
        """
        header, zs = parse_ascii_grid(asc)
        geometry = GridGeometry(
            ncols=header.ncols,
            nrows=header.nrows,
            xllcorner=header.xllcorner,
            yllcorner=header.yllcorner,
            cellsize=header.cellsize,
        )
        return cls(geometry, zs)

    @classmethod
    def from_config(cls, config: ScalarFieldConfig) -> "ScalarField":
        geometry = GridGeometry(
            ncols=config.ncols,
            nrows=config.nrows,
            xllcorner=config.xllcorner,
            yllcorner=config.yllcorner,
            cellsize=config.cellsize,
        )
        return cls(geometry, config.zs)

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ScalarField":
        """Create a ScalarField from a mapping with ncols, nrows, xllcorner, yllcorner, cellsize and zs."""
        return cls.from_config(ScalarFieldConfig.model_validate(dict(params)))

    @classmethod
    def from_grid(cls, geometry: GridGeometry, grid: np.ndarray) -> "ScalarField":
        """
        Wrap an already built grid of shape (nrows, ncols).

        NaN, infinite and masked cells are missing. No raw samples are
        available, so the range is left undefined.
        """
        if np.shape(grid) != geometry.shape:
            raise DimensionMismatchError(
                f"Grid shape {np.shape(grid)} does not match geometry shape {geometry.shape}"
            )

        field = cls.__new__(cls)
        field._geometry = geometry
        field._grid = freeze_grid(grid)
        field._range = None
        return field

    # ------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------

    @property
    def geometry(self) -> GridGeometry:
        return self._geometry

    @property
    def grid(self) -> np.ma.MaskedArray:
        return self._grid

    @property
    def range(self) -> Optional[ValueRange]:
        return self._range

    @property
    def ncols(self) -> int:
        return self._geometry.ncols

    @property
    def nrows(self) -> int:
        return self._geometry.nrows

    @property
    def xllcorner(self) -> float:
        return self._geometry.xllcorner

    @property
    def yllcorner(self) -> float:
        return self._geometry.yllcorner

    @property
    def cellsize(self) -> float:
        return self._geometry.cellsize

    # ------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------

    def value_at_indexes(self, row: int, column: int) -> Sample:
        """
        Value of the cell at (row, column), or MISSING if it holds no data.

        Raises
        ------
        OutOfBoundsError
            If the indexes fall outside the grid or are not integers.
            Negative indexes are not wrapped.
        """
        if not self._geometry.contains_indexes(row, column):
            raise OutOfBoundsError(
                f"Cell ({row}, {column}) is outside a grid of {self.nrows} rows and {self.ncols} columns"
            )
        if self._grid.mask[row, column]:
            return MISSING
        return float(self._grid.data[row, column])

    def value_at(self, lon: float, lat: float, strict: bool = False) -> Sample:
        """
        Bilinear estimate of the field at a geographic coordinate.

        Returns MISSING when the point is outside the grid extent or when any of
        the four surrounding cells holds no data. With strict=True those cases
        raise OutOfBoundsError and InvalidInterpolationInput instead.
        """
        if not self._geometry.contains(lon, lat):
            if strict:
                raise OutOfBoundsError(f"Point ({lon}, {lat}) is outside the grid extent {self._geometry.extent()}")
            return MISSING

        i, j = self._geometry.decimal_indexes(lon, lat)
        fi, ci, fj, cj = self._geometry.surrounding_indexes(i, j)

        g00 = self.value_at_indexes(fj, fi)
        g10 = self.value_at_indexes(fj, ci)
        g01 = self.value_at_indexes(cj, fi)
        g11 = self.value_at_indexes(cj, ci)

        if MISSING in (g00, g10, g01, g11):
            if strict:
                raise InvalidInterpolationInput(
                    f"Point ({lon}, {lat}) touches a cell without data around ({fj}, {fi})"
                )
            return MISSING

        return bilinear(i - fi, j - fj, g00, g10, g01, g11)

    def has_value_at(self, lon: float, lat: float) -> bool:
        return self.value_at(lon, lat) is not MISSING

    # ------------------------------------------------------------
    # SpatialValueProvider
    # ------------------------------------------------------------

    def value_at_point(self, x: float, y: float) -> float:
        value = self.value_at(x, y)
        return np.nan if value is MISSING else value

    def values_at_points(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        """
        Vectorized value_at_point: accepts X (lon), Y (lat) arrays of any shape
        and returns values of the same shape, NaN where there is no value.
        """
        X = np.asarray(X, dtype=float)
        Y = np.asarray(Y, dtype=float)
        if X.shape != Y.shape:
            raise ValueError(f"X shape {X.shape} does not match Y shape {Y.shape}")

        xmin, ymin, xmax, ymax = self._geometry.extent()
        inside = (X >= xmin) & (X <= xmax) & (Y >= ymin) & (Y <= ymax)

        I = np.where(inside, (X - xmin) / self.cellsize, np.nan)
        J = np.where(inside, (ymax - Y) / self.cellsize, np.nan)

        return interpolate_points(self._grid.data, np.ma.getmaskarray(self._grid), I, J)

    # ------------------------------------------------------------
    # Bulk access for rendering layers
    # ------------------------------------------------------------

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, top row first, left to right."""
        for row in range(self.nrows):
            for column in range(self.ncols):
                yield Cell(
                    row=row,
                    column=column,
                    center=self._geometry.cell_center(row, column),
                    value=self.value_at_indexes(row, column),
                )

    def to_points_vector(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Flatten cell center coordinates and values into 1D vectors.

        Returns:
            X_vec: np.ndarray of longitudes
            Y_vec: np.ndarray of latitudes
            Z_vec: np.ndarray of values, NaN where there is no data
        """
        X, Y = self._geometry.cell_centers()
        return X.ravel(), Y.ravel(), self._grid.filled(np.nan).ravel()
