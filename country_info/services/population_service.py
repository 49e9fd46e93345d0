# country_info/services/population_service.py
from __future__ import annotations

from typing import Optional
import logging
import time as _time

from country_info.errors import CodeResolutionFailed, UpstreamError
from country_info.models import PopulationInfo
from country_info.providers.countriesnow import CountriesNowProvider
from country_info.services.code_resolver import CodeResolver
from country_info.utils.series_math import filter_year_range, mean_value, parse_year_range

logger = logging.getLogger("country-info")


class PopulationAggregator:
    def __init__(self, resolver: CodeResolver, population: CountriesNowProvider) -> None:
        self._resolver = resolver
        self._population = population

    def get_population(self, code: str, year_range: Optional[str] = None) -> PopulationInfo:
        """
        Resolve ISO2 -> ISO3, fetch the full series, keep the requested
        inclusive year window and average it.

        A failed resolution raises CodeResolutionFailed before the series is
        requested; errors from the series call propagate unchanged.
        """
        started = _time.time()
        logger.info("population | code=%s | range=%s", code, year_range)

        try:
            iso3 = self._resolver.resolve(code)
        except UpstreamError as e:
            raise CodeResolutionFailed(code, e) from e

        # a bad range fails before the series is requested
        parse_year_range(year_range)

        series = self._population.fetch_population(iso3)
        values = filter_year_range(series, year_range)
        info = PopulationInfo(values=values, mean=mean_value(values))

        logger.info(
            "population done | iso3=%s | points=%d | mean=%d | elapsed=%.2fs",
            iso3, len(values), info.mean, _time.time() - started,
        )
        return info
