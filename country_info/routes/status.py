# country_info/routes/status.py
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from country_info.config import BASE_PATH
from country_info.models import APIStatus, Envelope
from country_info.routes.responses import context_of, respond

router = APIRouter(prefix=BASE_PATH, tags=["status"])


@router.get(
    "/status",
    summary="Service Status",
    operation_id="status_get",
    response_model=Envelope[APIStatus],
)
def status(request: Request) -> JSONResponse:
    # never fails: an unreachable upstream is reported, not raised
    api_status = context_of(request).status.get_status()
    return respond(Envelope[APIStatus].ok("Service status retrieved successfully", api_status))
