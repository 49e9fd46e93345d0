# country_info/utils/country_codes.py
from __future__ import annotations
import re

_WS = re.compile(r"[\u200b\s]+")


def normalize_code(code: str) -> str:
    """
    Trim whitespace (incl. zero-width spaces) and upper-case a caller-supplied
    country code. Codes are case-insensitive upstream; nothing is validated
    here, unknown codes are rejected by the upstream itself.
    """
    return _WS.sub("", code or "").upper()
