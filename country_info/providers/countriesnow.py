# country_info/providers/countriesnow.py
from __future__ import annotations

"""
CountriesNow (v0.1) provider: the demographic upstream.

Both endpoints are POST with a JSON body and wrap their result in
`{"error": bool, "msg": str, "data": ...}`. A 200 with `error: true` is
raised as UpstreamLogicalError; `data` is only looked at afterwards, since
error replies usually carry none.

- fetch_cities(iso2)      -> [str]         (countries/cities, body {"iso2": ...})
- fetch_population(iso3)  -> [YearValue]   (countries/population, body {"iso3": ...})
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from country_info.errors import UpstreamLogicalError, UpstreamMalformed
from country_info.models import YearValue
from country_info.providers.http import UpstreamProvider

CITIES_ENDPOINT = "countries/cities"
POPULATION_ENDPOINT = "countries/population"


# ----------------------------
# Upstream schemas
# ----------------------------
class _Reply(BaseModel):
    error: bool = False
    msg: str = Field("", validation_alias=AliasChoices("msg", "message"))


class CitiesReply(_Reply):
    data: Optional[List[str]] = None


class PopulationSeries(BaseModel):
    country: str = ""
    code: str = ""
    iso3: str = ""
    population_counts: List[YearValue] = Field(
        default_factory=list,
        validation_alias=AliasChoices("populationCounts", "population_counts"),
    )


class PopulationReply(_Reply):
    data: Optional[PopulationSeries] = None


class CountriesNowProvider(UpstreamProvider):
    name = "CountriesNow API"

    def _check(self, reply: _Reply) -> None:
        if reply.error:
            raise UpstreamLogicalError(self.name, reply.msg)
        if getattr(reply, "data", None) is None:
            raise UpstreamMalformed(self.name, "reply carries no data")

    def fetch_cities(self, iso2: str) -> List[str]:
        reply = self._decode(CitiesReply, self._post_json(CITIES_ENDPOINT, {"iso2": iso2}))
        self._check(reply)
        return list(reply.data)

    def fetch_population(self, iso3: str) -> List[YearValue]:
        reply = self._decode(PopulationReply, self._post_json(POPULATION_ENDPOINT, {"iso3": iso3}))
        self._check(reply)
        return list(reply.data.population_counts)
