from abc import ABC, abstractmethod
import numpy as np

class SpatialValueProvider(ABC):
    """
    Abstract interface for a 2D quantity that can be sampled at map coordinates
    (e.g. elevation, wind speed). x is the longitude, y the latitude.

    Providers answer with plain floats so results can go straight into numpy;
    NaN stands for "no value here".
    """

    @abstractmethod
    def value_at_point(self, x: float, y: float) -> float:
        """Value at a single map coordinate, NaN outside the data."""
        ...

    @abstractmethod
    def values_at_points(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        """Vectorized version for same-shaped coordinate arrays, returns an array of that shape."""
        ...
