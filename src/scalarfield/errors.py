class ScalarFieldError(Exception):
    """Base class for every error raised by the scalar field package."""


class MalformedHeaderError(ScalarFieldError):
    """The ASCIIGrid header is missing lines or holds an unreadable value."""


class InvalidGeometryError(ScalarFieldError):
    """Grid geometry attributes are out of their valid domain."""


class DimensionMismatchError(ScalarFieldError):
    """The number of samples does not match ncols * nrows."""


class OutOfBoundsError(ScalarFieldError, IndexError):
    """A cell index or geographic coordinate lies outside the grid."""


class InvalidInterpolationInput(ScalarFieldError):
    """One of the four cells surrounding a query point holds no data."""
