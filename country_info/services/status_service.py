# country_info/services/status_service.py: upstream reachability + uptime
from __future__ import annotations

from typing import Callable, Dict
import concurrent.futures as _futures
import logging
import math
import time as _time

from country_info.models import OFFLINE, ONLINE, APIStatus
from country_info.providers.http import UpstreamProvider

logger = logging.getLogger("country-info")


class StatusProbe:
    """
    Reachability, not correctness: an upstream is Online if it answered with
    any status code, Offline only on a transport failure. Uptime is measured
    from `started_at` (a time.monotonic() reading taken once at startup) and
    rounded to whole seconds.
    """

    def __init__(
        self,
        countries_now: UpstreamProvider,
        rest_countries: UpstreamProvider,
        version: str,
        started_at: float,
        clock: Callable[[], float] = _time.monotonic,
    ) -> None:
        self._upstreams: Dict[str, UpstreamProvider] = {
            "countriesnowapi": countries_now,
            "restcountriesapi": rest_countries,
        }
        self._version = version
        self._started_at = started_at
        self._clock = clock

    def uptime(self) -> int:
        # halves round up
        return max(0, math.floor(self._clock() - self._started_at + 0.5))

    def get_status(self) -> APIStatus:
        with _futures.ThreadPoolExecutor(max_workers=len(self._upstreams)) as ex:
            futures = {key: ex.submit(up.is_reachable) for key, up in self._upstreams.items()}
            states = {key: (ONLINE if fut.result() else OFFLINE) for key, fut in futures.items()}

        logger.info("status | %s", ", ".join(f"{k}={v}" for k, v in states.items()))
        return APIStatus(
            countriesnowapi=states["countriesnowapi"],
            restcountriesapi=states["restcountriesapi"],
            version=self._version,
            uptime=self.uptime(),
        )
