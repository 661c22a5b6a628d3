from enum import Enum
from typing import Any, Union
import math

import numpy as np


class Missing(Enum):
    """
    Marker for a grid cell that holds no data.

    A single member enum so that ``Sample`` can be spelled as
    ``Union[float, Missing]`` and checked with ``is MISSING``.
    """
    MISSING = "missing"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING

Sample = Union[float, Missing]


def is_missing(value: Any) -> bool:
    return value is MISSING


def is_valid(value: Any) -> bool:
    """True for finite real numbers. bools, None, NaN, inf and MISSING are not valid."""
    if value is None or value is MISSING or isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    return math.isfinite(value)
