from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .sample import is_valid


@dataclass(frozen=True, slots=True)
class ValueRange:
    min: float
    max: float

    def __contains__(self, value: Any) -> bool:
        return is_valid(value) and self.min <= value <= self.max


def compute_range(zs: Iterable[Any]) -> Optional[ValueRange]:
    """
    Minimum and maximum of the valid samples of a flat sequence.

    Samples the grid builder would mask (None, MISSING, NaN, inf) are skipped,
    so the range always agrees with the grid. Returns None when no sample is valid.
    """
    valid = [float(z) for z in zs if is_valid(z)]
    if not valid:
        return None
    return ValueRange(min=min(valid), max=max(valid))
