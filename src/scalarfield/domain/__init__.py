from .sample import MISSING, Missing, Sample, is_missing, is_valid
from .gridGeometry import GridGeometry
from .gridBuilder import build_grid, freeze_grid
from .valueRange import ValueRange, compute_range
from .spatialValueProvider import SpatialValueProvider
from .scalarField import Cell, ScalarField
