# country_info/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional
import importlib
import logging

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute

from country_info.config import Settings, load_settings
from country_info.context import ServiceContext, build_context
from country_info.routes.responses import endpoints

logger = logging.getLogger("country-info")

ROUTERS = (
    ("index", "country_info.routes.index"),
    ("country", "country_info.routes.country"),
    ("population", "country_info.routes.population"),
    ("status", "country_info.routes.status"),
)


# --- keep operation_id stable (avoid FastAPI auto-dedupe renaming) ----------
def _fixed_unique_id(route: APIRoute) -> str:
    return route.operation_id or f"{route.name}_{route.path}".strip("/").replace("/", "_")


def _include(app: FastAPI, name: str, module_path: str) -> None:
    """Import a router module and include its `router`."""
    mod = importlib.import_module(module_path)
    app.include_router(mod.router)
    logger.info("[init] %s router mounted from: %s", name, module_path)


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[ServiceContext] = None,
) -> FastAPI:
    """
    Build the application. Without an explicit `context` one is created from
    `settings` (or the environment) when the app starts and closed on shutdown.
    """
    settings = settings or (context.settings if context else load_settings())
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = context is None
        app.state.context = context if context is not None else build_context(settings)
        logger.info("Country Info Service started (version %s)", settings.api_version)
        try:
            yield
        finally:
            if owned:
                app.state.context.close()
            logger.info("Country Info Service stopped")

    app = FastAPI(
        title="Country Info API",
        description="Country facts, cities and population history aggregated from two upstreams",
        version=settings.api_version,
        generate_unique_id_function=_fixed_unique_id,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    for name, module_path in ROUTERS:
        _include(app, name, module_path)

    @app.exception_handler(404)
    async def not_found(request: Request, exc: Exception):
        logger.info("unknown path requested: %s", request.url.path)
        return endpoints("You seem lost. The requested page was not found.", status_code=404)

    return app
