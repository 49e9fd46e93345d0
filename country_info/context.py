# country_info/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import time as _time

import httpx

from country_info.config import Settings
from country_info.providers.countriesnow import CountriesNowProvider
from country_info.providers.http import build_client
from country_info.providers.restcountries import RestCountriesProvider
from country_info.services.code_resolver import CodeResolver
from country_info.services.country_service import CountryAggregator
from country_info.services.population_service import PopulationAggregator
from country_info.services.status_service import StatusProbe

logger = logging.getLogger("country-info")


@dataclass
class ServiceContext:
    """
    Everything a request needs, built once at process start and read-only
    afterwards. `started_at` is the single process-wide start timestamp.
    """

    settings: Settings
    rest_countries: RestCountriesProvider
    countries_now: CountriesNowProvider
    started_at: float = field(default_factory=_time.monotonic)

    def __post_init__(self) -> None:
        self.resolver = CodeResolver(self.rest_countries)
        self.country = CountryAggregator(
            self.rest_countries, self.countries_now, fan_out=self.settings.fan_out
        )
        self.population = PopulationAggregator(self.resolver, self.countries_now)
        self.status = StatusProbe(
            self.countries_now,
            self.rest_countries,
            version=self.settings.api_version,
            started_at=self.started_at,
        )

    def close(self) -> None:
        self.rest_countries.close()
        self.countries_now.close()


def build_context(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> ServiceContext:
    rest = RestCountriesProvider(
        build_client(settings.rest_countries_url, settings.upstream_timeout, transport)
    )
    now = CountriesNowProvider(
        build_client(settings.countries_now_url, settings.upstream_timeout, transport)
    )
    ctx = ServiceContext(settings=settings, rest_countries=rest, countries_now=now)
    logger.info(
        "[init] context ready | restcountries=%s | countriesnow=%s | timeout=%.1fs | fan_out=%s",
        settings.rest_countries_url, settings.countries_now_url,
        settings.upstream_timeout, settings.fan_out,
    )
    return ctx
