# country_info/services/country_service.py: facts + cities -> CountryInfo
from __future__ import annotations

from typing import List, Optional, Tuple, Union
import concurrent.futures as _futures
import logging
import time as _time

from country_info.errors import CitiesUnavailable, UpstreamError
from country_info.models import CountryInfo
from country_info.providers.countriesnow import CountriesNowProvider
from country_info.providers.restcountries import RestCountriesProvider, RestCountry
from country_info.utils.cities import limit_cities
from country_info.utils.country_codes import normalize_code

logger = logging.getLogger("country-info")


def _first_capital(country: RestCountry, code: str) -> str:
    if not country.capital:
        logger.info("no capital listed upstream for %s; returning empty capital", code)
        return ""
    return country.capital[0]


class CountryAggregator:
    """
    All-or-nothing merge of the facts and cities upstreams. A facts failure
    is raised as-is and the cities call is never made (sequential mode) or is
    cancelled (fan-out mode). A cities failure becomes CitiesUnavailable.
    """

    def __init__(
        self,
        facts: RestCountriesProvider,
        cities: CountriesNowProvider,
        fan_out: bool = False,
    ) -> None:
        self._facts = facts
        self._cities = cities
        self._fan_out = fan_out

    def _fetch_cities(self, iso2: str) -> List[str]:
        try:
            return self._cities.fetch_cities(iso2)
        except UpstreamError as e:
            logger.warning("cities unavailable for %s: %s", iso2, e.message)
            raise CitiesUnavailable(iso2, e) from e

    def _fetch_sequential(self, iso2: str) -> Tuple[RestCountry, List[str]]:
        country = self._facts.fetch_country(iso2)
        return country, self._fetch_cities(iso2)

    def _fetch_concurrent(self, iso2: str) -> Tuple[RestCountry, List[str]]:
        ex = _futures.ThreadPoolExecutor(max_workers=2, thread_name_prefix="country-fanout")
        try:
            facts_fut = ex.submit(self._facts.fetch_country, iso2)
            cities_fut = ex.submit(self._fetch_cities, iso2)
            try:
                country = facts_fut.result()
            except Exception:
                cities_fut.cancel()
                raise
            return country, cities_fut.result()
        finally:
            # in-flight calls stay bounded by the client timeout
            ex.shutdown(wait=False, cancel_futures=True)

    def get_country_info(
        self,
        code: str,
        city_limit: Union[int, str, None] = None,
    ) -> CountryInfo:
        started = _time.time()
        iso2 = normalize_code(code)
        logger.info("country info | code=%s | limit=%s | fan_out=%s", iso2, city_limit, self._fan_out)

        if self._fan_out:
            country, cities = self._fetch_concurrent(iso2)
        else:
            country, cities = self._fetch_sequential(iso2)

        info = CountryInfo(
            name=country.name.common,
            continents=country.continents,
            population=country.population,
            languages=country.languages,
            borders=country.borders,
            flag=country.flag,
            capital=_first_capital(country, iso2),
            cities=limit_cities(cities, city_limit),
        )
        logger.info("country info done | code=%s | elapsed=%.2fs", iso2, _time.time() - started)
        return info
