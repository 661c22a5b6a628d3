import numpy as np
import numba as nb

Array2D = np.ndarray  # alias for readability


def bilinear(x: float, y: float, g00: float, g10: float, g01: float, g11: float) -> float:
    """
    Bilinear interpolation inside a unit cell.
    https://en.wikipedia.org/wiki/Bilinear_interpolation

    Parameters
    ----------
    x, y : float
        Offsets of the query point inside the cell, both in [0, 1].
    g00, g10, g01, g11 : float
        Corner values at (x=0, y=0), (1, 0), (0, 1) and (1, 1).

    No missing data check is done here, callers must only pass numbers.
    """
    rx = 1 - x
    ry = 1 - y
    return g00 * rx * ry + g10 * x * ry + g01 * rx * y + g11 * x * y


@nb.njit
def _bilinear_kernel(data: Array2D,
                     mask: Array2D,
                     I: np.ndarray,
                     J: np.ndarray,
                     out: np.ndarray) -> None:
    """
    Internal Numba kernel: writes results into `out`.

    NaN in I or J marks a point outside the grid. Points touching a masked
    corner get NaN.
    """
    nrows = data.shape[0]
    ncols = data.shape[1]

    for k in range(I.shape[0]):
        i = I[k]
        j = J[k]
        if np.isnan(i) or np.isnan(j):
            out[k] = np.nan
            continue

        fi = min(max(int(np.floor(i)), 0), ncols - 1)
        ci = min(fi + 1, ncols - 1)
        fj = min(max(int(np.floor(j)), 0), nrows - 1)
        cj = min(fj + 1, nrows - 1)

        if mask[fj, fi] or mask[fj, ci] or mask[cj, fi] or mask[cj, ci]:
            out[k] = np.nan
            continue

        x = i - fi
        y = j - fj
        rx = 1.0 - x
        ry = 1.0 - y
        out[k] = (data[fj, fi] * rx * ry + data[fj, ci] * x * ry +
                  data[cj, fi] * rx * y + data[cj, ci] * x * y)


def interpolate_points(data: Array2D,
                       mask: Array2D,
                       I: np.ndarray,
                       J: np.ndarray) -> np.ndarray:
    """
    Bilinear interpolation at many decimal grid positions.

    Parameters
    ----------
    data : ndarray (nrows, ncols)
    mask : ndarray of bool (nrows, ncols)
        True where a cell holds no data.
    I, J : ndarray
        Fractional column and row indexes of the same shape, NaN for points
        outside the grid.

    Returns
    -------
    values : ndarray shaped like I, NaN where no value can be interpolated.
    """
    I = np.asarray(I, dtype=np.float64)
    J = np.asarray(J, dtype=np.float64)
    if I.shape != J.shape:
        raise ValueError(f"I shape {I.shape} does not match J shape {J.shape}")

    out = np.empty(I.size, dtype=np.float64)
    _bilinear_kernel(
        np.ascontiguousarray(data, dtype=np.float64),
        np.ascontiguousarray(mask, dtype=np.bool_),
        I.ravel(),
        J.ravel(),
        out,
    )
    return out.reshape(I.shape)
