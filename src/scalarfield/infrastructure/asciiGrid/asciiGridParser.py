import logging
import math
import re
from dataclasses import dataclass

from ...domain.sample import MISSING, Sample
from ...errors import MalformedHeaderError

logger = logging.getLogger(__name__)

"""
ASCIIGrid (ESRI) text layout:

ncols <int>
nrows <int>
xllcorner <float>
yllcorner <float>
cellsize <float>
NODATA_value <token>
<row 0 values>        top row, x ascending
...
<row nrows-1 values>  bottom row

Header lines are read by position. Labels of the first five lines are not
checked, the sixth line must be a NODATA_value line.
"""

HEADER_LINES = 6

# any number: optional sign, decimal fraction, exponent
_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_NODATA_LINE = re.compile(r"^\s*nodata_value\s+(\S+)\s*$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class AsciiGridHeader:
    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float
    nodata_value: str  # kept as text, data tokens are compared verbatim


def parse_ascii_grid(text: str) -> tuple[AsciiGridHeader, list[Sample]]:
    """
    Parse ASCIIGrid text that is already loaded in memory.

    Args:
        text: Full content of an .asc file.

    Returns:
        The header and the flat sample sequence in file order
        (x-ascending, y-descending). Tokens spelled exactly like the
        NODATA token become MISSING, unreadable tokens become NaN.

    Raises:
        MalformedHeaderError: If the header has fewer than six lines or a
            header value cannot be read.
    """
    lines = text.split("\n")
    header = _parse_header(lines)

    zs: list[Sample] = []
    malformed = 0

    # Data (left-right and top-down) until the first blank line
    for line in lines[HEADER_LINES:]:
        line = line.strip()
        if line == "":
            break

        for token in line.split():
            if token == header.nodata_value:
                zs.append(MISSING)
                continue
            try:
                zs.append(float(token))
            except ValueError:
                zs.append(math.nan)
                malformed += 1

    if malformed:
        logger.debug("%d malformed data tokens read as NaN", malformed)
    logger.debug(
        "Parsed ASCIIGrid %dx%d at (%s, %s), cellsize %s, %d samples",
        header.ncols, header.nrows, header.xllcorner, header.yllcorner, header.cellsize, len(zs),
    )
    return header, zs


def _parse_header(lines: list[str]) -> AsciiGridHeader:
    if len(lines) < HEADER_LINES:
        raise MalformedHeaderError(
            f"ASCIIGrid header needs {HEADER_LINES} lines, got {len(lines)}"
        )

    ncols = _header_count(lines[0], "ncols")
    nrows = _header_count(lines[1], "nrows")
    xllcorner = _header_number(lines[2], "xllcorner")
    yllcorner = _header_number(lines[3], "yllcorner")
    cellsize = _header_number(lines[4], "cellsize")
    if cellsize <= 0:
        raise MalformedHeaderError(f"cellsize must be positive, got {cellsize}")

    nodata = _NODATA_LINE.match(lines[5])
    if nodata is None:
        raise MalformedHeaderError(f"Expected a NODATA_value line, got {lines[5].strip()!r}")
    nodata_value = nodata.group(1)

    return AsciiGridHeader(
        ncols=ncols,
        nrows=nrows,
        xllcorner=xllcorner,
        yllcorner=yllcorner,
        cellsize=cellsize,
        nodata_value=nodata_value,
    )


def _header_number(line: str, name: str) -> float:
    match = _NUMBER.search(line)
    if match is None:
        raise MalformedHeaderError(f"No numeric value for '{name}' in header line {line.strip()!r}")

    value = float(match.group())
    if not math.isfinite(value):
        raise MalformedHeaderError(f"'{name}' must be finite, got {value}")
    return value


def _header_count(line: str, name: str) -> int:
    value = _header_number(line, name)
    if not value.is_integer() or value <= 0:
        raise MalformedHeaderError(f"'{name}' must be a positive integer, got {value}")
    return int(value)
