import logging
from typing import Any, Sequence

import numpy as np

from ..errors import DimensionMismatchError
from .sample import is_valid

logger = logging.getLogger(__name__)


def build_grid(zs: Sequence[Any], ncols: int, nrows: int) -> np.ma.MaskedArray:
    """
    Arrange a flat sample sequence into a grid indexed as grid[row, column].

    Samples follow the ASCIIGrid order: x-ascending and y-descending, so the
    first sample is the top-left cell and rows are consumed top to bottom.
    Samples that are not finite numbers (None, MISSING, NaN, inf, garbage)
    are masked instead of raising.

    Parameters
    ----------
    zs : Sequence
        Flat sequence of ncols * nrows samples.
    ncols, nrows : int
        Grid dimensions.

    Returns
    -------
    np.ma.MaskedArray
        Read-only float array of shape (nrows, ncols), masked where there is no data.

    Raises
    ------
    DimensionMismatchError
        If len(zs) != ncols * nrows.
    """
    expected = ncols * nrows
    if len(zs) != expected:
        raise DimensionMismatchError(
            f"Expected {expected} samples for a {ncols}x{nrows} grid, got {len(zs)}"
        )

    data = np.empty((nrows, ncols), dtype=float)
    mask = np.zeros((nrows, ncols), dtype=bool)

    p = 0
    for row in range(nrows):
        for column in range(ncols):
            z = zs[p]
            if is_valid(z):
                data[row, column] = z
            else:
                data[row, column] = np.nan
                mask[row, column] = True
            p += 1

    if mask.any():
        logger.debug("Masked %d of %d samples without data", int(mask.sum()), expected)

    return freeze_grid(np.ma.MaskedArray(data, mask=mask))


def freeze_grid(grid: np.ndarray | np.ma.MaskedArray) -> np.ma.MaskedArray:
    """
    Copy a grid into a read-only masked array.

    Non-finite values are masked as well, and masked cells are set to NaN.
    """
    data = np.array(np.ma.getdata(grid), dtype=float, copy=True)
    if data.ndim != 2:
        raise DimensionMismatchError(f"Grid must be 2D, got shape {data.shape}")

    mask = np.ma.getmaskarray(grid) | ~np.isfinite(data)
    data[mask] = np.nan
    data.flags.writeable = False
    return np.ma.MaskedArray(data, mask=mask, hard_mask=True, shrink=False)
