from pathlib import Path

import pytest

from scalarfield import ScalarField

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def u_asc() -> str:
    return (DATA_DIR / "U.asc").read_text(encoding="utf-8")


@pytest.fixture
def u_field(u_asc: str) -> ScalarField:
    return ScalarField.from_ascii_grid(u_asc)


@pytest.fixture
def small_asc() -> str:
    return "\n".join([
        "ncols 3",
        "nrows 2",
        "xllcorner 0.0",
        "yllcorner 0.0",
        "cellsize 1.0",
        "NODATA_value -9999",
        "1 2 3",
        "4 -9999 6",
        "",
    ])
