"""Internal reader for GeoNames-format postal code dumps.

Each line is tab-separated:

    country, postal code, place, state, state code, district,
    district code, sub-district, community code, latitude, longitude,
    accuracy
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Iterable, Optional

from inpincode.exceptions import DataFileInvalid, DataFileNotFound
from inpincode.models import LocationRecord, RawPostalRow

_FIELD_COUNT = 12
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
DEFAULT_COUNTRY = "IN"


def _parse_coordinate(value: str) -> Optional[float]:
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def parse_line(line: str) -> Optional[RawPostalRow]:
    """
    Parse one dump line into a RawPostalRow.

    Returns None for lines with too few fields or unusable coordinates.
    Accuracy keeps the leading integer of its field ("4.5" -> 4), or 0
    when there is none.
    """
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) < _FIELD_COUNT:
        return None

    latitude = _parse_coordinate(fields[9])
    longitude = _parse_coordinate(fields[10])
    if latitude is None or longitude is None:
        return None

    leading = _LEADING_INT_RE.match(fields[11])
    accuracy = int(leading.group(1)) if leading else 0

    return RawPostalRow(
        country_code=fields[0],
        postal_code=fields[1],
        place_name=fields[2],
        state_name=fields[3],
        state_code=fields[4],
        district_name=fields[5],
        district_code=fields[6],
        sub_district_name=fields[7],
        community_code=fields[8],
        latitude=latitude,
        longitude=longitude,
        accuracy=accuracy,
    )


def parse_lines(
    lines: Iterable[str], country_code: str = DEFAULT_COUNTRY
) -> list[LocationRecord]:
    """Parse *lines*, silently dropping malformed rows and other countries."""
    records = []
    for line in lines:
        if not line.strip():
            continue
        row = parse_line(line)
        if row is None or row.country_code != country_code:
            continue
        records.append(row.to_record())
    return records


def read_records(
    path: str | Path, country_code: str = DEFAULT_COUNTRY
) -> list[LocationRecord]:
    """
    Read and parse a UTF-8 dump file.

    Raises DataFileNotFound if *path* is not a file, DataFileInvalid if
    it cannot be read or decoded.
    """
    path = Path(path)
    try:
        if not path.is_file():
            raise DataFileNotFound(str(path))
        with path.open(encoding="utf-8") as fh:
            return parse_lines(fh, country_code)
    except UnicodeDecodeError as exc:
        raise DataFileInvalid(str(path), f"not valid UTF-8 ({exc.reason})")
    except OSError as exc:
        raise DataFileInvalid(str(path), str(exc))
