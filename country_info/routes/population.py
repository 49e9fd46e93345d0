# country_info/routes/population.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Path, Query, Request
from fastapi.responses import JSONResponse

from country_info.config import BASE_PATH
from country_info.errors import CountryInfoError
from country_info.models import Envelope, PopulationInfo
from country_info.routes.responses import context_of, fail, respond

router = APIRouter(prefix=BASE_PATH, tags=["population"])


@router.get(
    "/population/{two_letter_country_code}",
    summary="Population",
    operation_id="population_get",
    response_model=Envelope[PopulationInfo],
)
def population(
    request: Request,
    two_letter_country_code: str = Path(..., description="ISO 3166-1 alpha-2 code, e.g. jp"),
    limit: Optional[str] = Query(None, description='Inclusive year range "YYYY-YYYY"'),
) -> JSONResponse:
    ctx = context_of(request)
    try:
        info = ctx.population.get_population(two_letter_country_code, limit)
    except CountryInfoError as e:
        return fail(e)
    return respond(Envelope[PopulationInfo].ok("Population data retrieved successfully", info))
