from __future__ import annotations
from typing import List, Optional, Sequence, Union
import logging
import re

logger = logging.getLogger("country-info")

DEFAULT_CITY_LIMIT = 3

_INT = re.compile(r"[+-]?[0-9]+")


def parse_city_limit(limit: Union[int, str, None]) -> int:
    """Absent, non-numeric or non-positive -> DEFAULT_CITY_LIMIT (logged)."""
    n: Optional[int] = None
    if isinstance(limit, int) and not isinstance(limit, bool):
        n = limit
    elif isinstance(limit, str) and _INT.fullmatch(limit):
        n = int(limit)
    if n is None or n <= 0:
        logger.info("Invalid city limit %r, defaulting to %d", limit, DEFAULT_CITY_LIMIT)
        return DEFAULT_CITY_LIMIT
    return n


def limit_cities(cities: Sequence[str], limit: Union[int, str, None] = None) -> List[str]:
    """First min(limit, len(cities)) cities, order preserved. Never raises."""
    return list(cities[: parse_city_limit(limit)])
