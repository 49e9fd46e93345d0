# country_info/routes/country.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Path, Query, Request
from fastapi.responses import JSONResponse

from country_info.config import BASE_PATH
from country_info.errors import CountryInfoError
from country_info.models import CountryInfo, Envelope
from country_info.routes.responses import context_of, fail, respond

router = APIRouter(prefix=BASE_PATH, tags=["country"])


@router.get(
    "/info/{two_letter_country_code}",
    summary="Country Info",
    operation_id="country_info_get",
    response_model=Envelope[CountryInfo],
)
def country_info(
    request: Request,
    two_letter_country_code: str = Path(..., description="ISO 3166-1 alpha-2 code, e.g. no"),
    limit: Optional[str] = Query(None, description="Maximum number of cities (default 3)"),
) -> JSONResponse:
    """
    Name, continents, population, languages, borders, flag and capital from
    the facts upstream, plus up to `limit` cities from the demographic upstream.
    Both upstreams must answer; there is no partial response.
    """
    ctx = context_of(request)
    try:
        info = ctx.country.get_country_info(two_letter_country_code, limit)
    except CountryInfoError as e:
        return fail(e)
    return respond(Envelope[CountryInfo].ok("Country information retrieved successfully", info))
