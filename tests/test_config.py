from __future__ import annotations

import logging
from pathlib import Path

import pydantic
import pytest

from scalarfield import MISSING, Config, DimensionMismatchError, ScalarField, ScalarFieldConfig

CONFIG_YAML = """\
field:
  ncols: 3
  nrows: 2
  xllcorner: -3.5
  yllcorner: 43.0
  cellsize: 0.5
  zs: [1.0, 2.0, 3.0, null, 5.0, 6.0]
logging:
  level: DEBUG
"""


def test_config_from_file_builds_field(tmp_path: Path) -> None:
    p = tmp_path / "field.yaml"
    p.write_text(CONFIG_YAML, encoding="utf-8")

    config = Config.from_file(p)
    field = ScalarField.from_config(config.field)

    assert config.logging.level == "DEBUG"
    assert field.ncols == 3
    assert field.nrows == 2
    assert field.value_at_indexes(0, 2) == 3.0
    assert field.value_at_indexes(1, 0) is MISSING
    assert field.range.max == 6.0


def test_logging_level_defaults_to_warning_and_is_applied(tmp_path: Path) -> None:
    p = tmp_path / "field.yaml"
    p.write_text(CONFIG_YAML.split("logging:")[0], encoding="utf-8")

    config = Config.from_file(p)
    assert config.logging.level == "WARNING"

    config.configure_logging()
    assert logging.getLogger("scalarfield").level == logging.WARNING


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Config.from_file(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("field: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Config.from_file(p)


def test_missing_field_section(tmp_path: Path) -> None:
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    with pytest.raises(pydantic.ValidationError):
        Config.from_file(p)


def test_sample_count_checked_while_loading(tmp_path: Path) -> None:
    p = tmp_path / "short.yaml"
    p.write_text(CONFIG_YAML.replace("null, 5.0, 6.0", "null"), encoding="utf-8")
    with pytest.raises(DimensionMismatchError):
        Config.from_file(p)


def test_field_config_maps_missing_to_null() -> None:
    params = ScalarFieldConfig(ncols=2, nrows=1, xllcorner=0.0, yllcorner=0.0, cellsize=1.0, zs=[MISSING, 2.0])
    assert params.zs == [None, 2.0]
