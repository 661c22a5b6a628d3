from pathlib import Path
from typing import Literal, Optional, Union
import logging
import yaml
from pydantic import BaseModel, field_validator, model_validator

from .domain.sample import MISSING
from .errors import DimensionMismatchError

"""
Conventions:

Field parameters use the ASCIIGrid header names (ncols, nrows, xllcorner,
yllcorner, cellsize) so a header can be dumped into a config unchanged.

zs holds the samples in ASCIIGrid order: top row first, left to right.
null entries and MISSING are cells without data.
"""


class ScalarFieldConfig(BaseModel):
    # Geometry
    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float

    # Samples, x-ascending & y-descending
    zs: list[Optional[float]]

    @field_validator("zs", mode="before")
    @classmethod
    def missing_to_none(cls, zs):
        if isinstance(zs, (list, tuple)):
            return [None if z is MISSING else z for z in zs]
        return zs

    @model_validator(mode='after')
    def check_sample_count(self):
        # ScalarFieldError is not a ValueError, pydantic re-raises it unchanged
        if len(self.zs) != self.ncols * self.nrows:
            raise DimensionMismatchError(
                f"Expected {self.ncols * self.nrows} samples for a "
                f"{self.ncols}x{self.nrows} grid, got {len(self.zs)}"
            )
        return self


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class Config(BaseModel):
    field: ScalarFieldConfig
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to a YAML file containing the configuration.

        Returns:
            An instance of Config populated from the file.
        """
        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {p}")
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {p}: {e}") from e

        return cls.model_validate(data)

    def configure_logging(self) -> None:
        """Apply the configured level to the package logger."""
        logging.getLogger("scalarfield").setLevel(self.logging.level)
