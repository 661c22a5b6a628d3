import logging

from .errors import (
    DimensionMismatchError,
    InvalidGeometryError,
    InvalidInterpolationInput,
    MalformedHeaderError,
    OutOfBoundsError,
    ScalarFieldError,
)
from .domain import (
    MISSING,
    Cell,
    GridGeometry,
    Missing,
    Sample,
    ScalarField,
    SpatialValueProvider,
    ValueRange,
    is_missing,
)
from .config import Config, LoggingConfig, ScalarFieldConfig
from .infrastructure.asciiGrid import AsciiGridHeader, parse_ascii_grid
from .infrastructure.interpolation import bilinear

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
