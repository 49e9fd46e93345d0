# country_info/providers/restcountries.py
from __future__ import annotations

"""
REST Countries (v3.1 /alpha) provider: the facts upstream.

Addressed by ISO2 (or ISO3) in the path. The `fields` projection keeps
payloads small; with a projection the upstream answers a single object,
without one it answers a one-element list, so both shapes are accepted.

Public methods:
- fetch_country(code) -> RestCountry   (name, continents, population, ...)
- fetch_iso3(code)    -> str           (cca3 only)
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from country_info.errors import UpstreamMalformed
from country_info.providers.http import UpstreamProvider

FACTS_FIELDS = "name,continents,population,languages,borders,flag,capital"
ISO3_FIELDS = "cca3"


# ----------------------------
# Upstream schemas
# ----------------------------
class RestCountryName(BaseModel):
    common: str
    official: str = ""


class RestCountry(BaseModel):
    name: RestCountryName
    continents: List[str] = Field(default_factory=list)
    population: int = 0
    languages: Dict[str, str] = Field(default_factory=dict)
    borders: List[str] = Field(default_factory=list)
    flag: str = ""
    capital: List[str] = Field(default_factory=list)


class Cca3Record(BaseModel):
    cca3: str = ""


class RestCountriesProvider(UpstreamProvider):
    name = "RestCountries API"

    def _single(self, payload: Any) -> Any:
        if isinstance(payload, list):
            if not payload:
                raise UpstreamMalformed(self.name, "no data found for country")
            return payload[0]
        return payload

    def fetch_country(self, code: str) -> RestCountry:
        payload = self._get_json(code, params={"fields": FACTS_FIELDS})
        return self._decode(RestCountry, self._single(payload))

    def fetch_iso3(self, code: str) -> str:
        payload = self._get_json(code, params={"fields": ISO3_FIELDS})
        record = self._decode(Cca3Record, self._single(payload))
        iso3 = record.cca3.strip()
        if not iso3:
            raise UpstreamMalformed(self.name, f"empty ISO3 code received for {code}")
        return iso3
