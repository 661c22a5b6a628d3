from dataclasses import dataclass
import math
import operator

import numpy as np

from ..errors import InvalidGeometryError

"""
Conventions:

X axis is longitude and grows to the right (E), Y axis is latitude and grows up (N)

Cells are addressed as (row, column), row 0 is the top (north) row and
column 0 is the left (west) column, as in the ASCIIGrid sample order.

Decimal indexes (i, j) locate a point in cell units:
    i counts columns from the left edge
    j counts rows from the top edge
"""


@dataclass(frozen=True, slots=True, kw_only=True)
class GridGeometry:
    """
    Placement of a regular grid on the map.

    Attributes
    ----------
    ncols, nrows : int
        Number of columns and rows of cells.
    xllcorner, yllcorner : float
        Coordinates of the lower-left corner of the grid.
    cellsize : float
        Spacing between adjacent samples, the same along both axes.
    """
    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float

    def __post_init__(self) -> None:
        for name in ("ncols", "nrows"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise InvalidGeometryError(f"{name} must be a positive integer, got {value!r}")

        for name in ("xllcorner", "yllcorner", "cellsize"):
            value = getattr(self, name)
            if not isinstance(value, (int, float, np.integer, np.floating)) or not math.isfinite(value):
                raise InvalidGeometryError(f"{name} must be a finite number, got {value!r}")

        if self.cellsize <= 0:
            raise InvalidGeometryError(f"cellsize must be positive, got {self.cellsize!r}")

    @property
    def xurcorner(self) -> float:
        return self.xllcorner + self.ncols * self.cellsize

    @property
    def yurcorner(self) -> float:
        return self.yllcorner + self.nrows * self.cellsize

    @property
    def n_cells(self) -> int:
        return self.ncols * self.nrows

    @property
    def shape(self) -> tuple[int, int]:
        return self.nrows, self.ncols

    def extent(self) -> tuple[float, float, float, float]:
        """Return (xmin, ymin, xmax, ymax)."""
        return self.xllcorner, self.yllcorner, self.xurcorner, self.yurcorner

    def contains(self, lon: float, lat: float) -> bool:
        return (
            self.xllcorner <= lon <= self.xurcorner and
            self.yllcorner <= lat <= self.yurcorner
        )

    def contains_indexes(self, row: int, column: int) -> bool:
        """True for integer indexes of a cell inside the grid. Fractional indexes are never contained."""
        try:
            row, column = operator.index(row), operator.index(column)
        except TypeError:
            return False
        return 0 <= row < self.nrows and 0 <= column < self.ncols

    def decimal_indexes(self, lon: float, lat: float) -> tuple[float, float]:
        """
        Map a geographic coordinate to fractional grid indexes.

        Returns
        -------
        (i, j) : tuple[float, float]
            i is the fractional column, j the fractional row (counted from the top).
        """
        i = (lon - self.xllcorner) / self.cellsize
        j = (self.yurcorner - lat) / self.cellsize
        return i, j

    def surrounding_indexes(self, i: float, j: float) -> tuple[int, int, int, int]:
        """
        Column and row indexes of the four cells around a decimal position.

        Indexes are clamped to the grid, so positions in the last column or row
        collapse onto that column or row.
        """
        fi = self._clamp_column(math.floor(i))
        ci = self._clamp_column(fi + 1)
        fj = self._clamp_row(math.floor(j))
        cj = self._clamp_row(fj + 1)
        return fi, ci, fj, cj

    def _clamp_column(self, i: int) -> int:
        return min(max(i, 0), self.ncols - 1)

    def _clamp_row(self, j: int) -> int:
        return min(max(j, 0), self.nrows - 1)

    def cell_center(self, row: int, column: int) -> tuple[float, float]:
        lon = self.xllcorner + (column + 0.5) * self.cellsize
        lat = self.yurcorner - (row + 0.5) * self.cellsize
        return lon, lat

    def cell_centers(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Longitudes and latitudes of every cell center.

        Returns
        -------
        X, Y : np.ndarray
            2D arrays of shape (nrows, ncols), laid out like the grid.
        """
        lons = self.xllcorner + (np.arange(self.ncols) + 0.5) * self.cellsize
        lats = self.yurcorner - (np.arange(self.nrows) + 0.5) * self.cellsize
        X, Y = np.meshgrid(lons, lats, indexing="xy")
        return X, Y
