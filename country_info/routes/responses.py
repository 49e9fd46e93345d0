# country_info/routes/responses.py: envelope responses + error -> HTTP status
from __future__ import annotations

from typing import List
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from country_info.config import BASE_PATH
from country_info.context import ServiceContext
from country_info.errors import (
    CitiesUnavailable,
    CodeResolutionFailed,
    CountryInfoError,
    InvalidRangeFormat,
    UpstreamBadStatus,
    UpstreamError,
    UpstreamUnreachable,
)
from country_info.models import EndpointHint, Envelope

logger = logging.getLogger("country-info")

AVAILABLE_ENDPOINTS: List[EndpointHint] = [
    EndpointHint(
        endpoint=f"GET {BASE_PATH}/info/{{two_letter_country_code}}",
        description="Get information about a country.",
        example=f"{BASE_PATH}/info/NO",
    ),
    EndpointHint(
        endpoint="Optional query parameter",
        description="?limit=x (limits number of cities).",
        example=f"{BASE_PATH}/info/NO?limit=5",
    ),
    EndpointHint(
        endpoint=f"GET {BASE_PATH}/population/{{two_letter_country_code}}",
        description="Get population data.",
        example=f"{BASE_PATH}/population/US",
    ),
    EndpointHint(
        endpoint="Optional query parameter",
        description="?limit=YYYY-YYYY (limits data to a year range).",
        example=f"{BASE_PATH}/population/US?limit=2002-2008",
    ),
    EndpointHint(
        endpoint=f"GET {BASE_PATH}/status",
        description="Check the service status.",
        example=f"{BASE_PATH}/status",
    ),
]


def context_of(request: Request) -> ServiceContext:
    return request.app.state.context


def status_for(exc: CountryInfoError) -> int:
    if isinstance(exc, CodeResolutionFailed):
        return 400
    if isinstance(exc, InvalidRangeFormat):
        return 422
    if isinstance(exc, UpstreamBadStatus) and exc.status_code == 404:
        return 404
    if isinstance(exc, UpstreamUnreachable):
        return 503
    if isinstance(exc, (UpstreamError, CitiesUnavailable)):
        return 502
    return 500


def respond(env: Envelope, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=env.model_dump(mode="json"))


def fail(exc: CountryInfoError) -> JSONResponse:
    status = status_for(exc)
    logger.warning("request failed | %d | %s: %s", status, type(exc).__name__, exc.message)
    return respond(Envelope.fail(exc.message), status)


def endpoints(message: str, status_code: int = 200) -> JSONResponse:
    env = Envelope[List[EndpointHint]](error=status_code >= 400, message=message, data=AVAILABLE_ENDPOINTS)
    return respond(env, status_code)
