# country_info/routes/index.py: landing page and process-only health check
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from country_info.routes.responses import endpoints

router = APIRouter(tags=["index"])


@router.get("/", summary="Available endpoints")
def root() -> JSONResponse:
    return endpoints("Welcome to the Country Info API")


@router.get("/healthz")
def healthz():
    # keep this super fast: no upstream calls
    return {"status": "ok"}
