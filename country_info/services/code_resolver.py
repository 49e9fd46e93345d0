# country_info/services/code_resolver.py
from __future__ import annotations

import logging

from country_info.providers.restcountries import RestCountriesProvider
from country_info.utils.country_codes import normalize_code

logger = logging.getLogger("country-info")


class CodeResolver:
    """
    ISO2 -> ISO3 through the facts upstream (`?fields=cca3`). Resolved fresh
    on every call; Upstream* errors propagate unchanged.
    """

    def __init__(self, facts: RestCountriesProvider) -> None:
        self._facts = facts

    def resolve(self, code: str) -> str:
        iso2 = normalize_code(code)
        iso3 = self._facts.fetch_iso3(iso2)
        logger.info("resolved %s -> %s", iso2, iso3)
        return iso3
