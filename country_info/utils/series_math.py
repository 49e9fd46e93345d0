from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging
import re

from country_info.errors import InvalidRangeFormat
from country_info.models import YearValue

logger = logging.getLogger("country-info")

# optional sign and ASCII digits only; no spaces, underscores or other numerals
_INT = re.compile(r"[+-]?[0-9]+")


def _year(limit: str, part: str, which: str) -> int:
    if not _INT.fullmatch(part):
        raise InvalidRangeFormat(limit, f"{which} year '{part}' is not an integer")
    return int(part)


def parse_year_range(limit: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    "2000-2005" -> (2000, 2005). Empty or None -> None (no filtering).
    Raises InvalidRangeFormat for anything else, including an inverted range.
    """
    if not limit:
        return None
    parts = limit.split("-")
    if len(parts) != 2:
        raise InvalidRangeFormat(limit, "expected exactly one '-' between two years")
    start = _year(limit, parts[0], "start")
    end = _year(limit, parts[1], "end")
    if start > end:
        raise InvalidRangeFormat(limit, f"start year {start} is after end year {end}")
    return start, end


def filter_year_range(values: Sequence[YearValue], limit: Optional[str]) -> List[YearValue]:
    """Keep observations with start <= year <= end, in their original order."""
    bounds = parse_year_range(limit)
    if bounds is None:
        return list(values)
    start, end = bounds
    out = [v for v in values if start <= v.year <= end]
    logger.info("year range %d-%d kept %d of %d observations", start, end, len(out), len(values))
    return out


def mean_value(values: Sequence[YearValue]) -> int:
    """Integer (floor) mean of the observation values; 0 for an empty series."""
    if not values:
        return 0
    return sum(v.value for v in values) // len(values)
