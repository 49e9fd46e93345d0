"""Shared fixtures: canned upstream payloads and MockTransport-backed providers."""
import json
from typing import Callable

import httpx
import pytest

from country_info.config import Settings
from country_info.context import build_context
from country_info.providers.countriesnow import CountriesNowProvider
from country_info.providers.http import build_client
from country_info.providers.restcountries import RestCountriesProvider

REST_URL = "http://restcountries.test/v3.1/alpha/"
NOW_URL = "http://countriesnow.test/api/v0.1/"

Handler = Callable[[httpx.Request], httpx.Response]


def body_of(request: httpx.Request) -> dict:
    return json.loads(request.content or b"{}")


# --- Upstream payloads ----------------------------------------------------------

@pytest.fixture
def norway_facts():
    """REST Countries `?fields=...` projection for Norway (single object)."""
    return {
        "name": {"common": "Norway", "official": "Kingdom of Norway", "nativeName": {}},
        "continents": ["Europe"],
        "population": 5379475,
        "languages": {"nno": "Norwegian Nynorsk", "nob": "Norwegian Bokmål", "smi": "Sami"},
        "borders": ["FIN", "SWE", "RUS"],
        "flag": "🇳🇴",
        "capital": ["Oslo"],
    }


@pytest.fixture
def norway_cities():
    return {
        "error": False,
        "msg": "cities in Norway retrieved",
        "data": ["Oslo", "Bergen", "Trondheim", "Stavanger", "Tromsø"],
    }


@pytest.fixture
def norway_population():
    return {
        "error": False,
        "msg": "Norway with population",
        "data": {
            "country": "Norway",
            "code": "NOR",
            "iso3": "NOR",
            "populationCounts": [
                {"year": 2000, "value": 100},
                {"year": 2005, "value": 150},
                {"year": 2010, "value": 200},
            ],
        },
    }


# --- Provider factories ---------------------------------------------------------

@pytest.fixture
def rest_provider():
    def _make(handler: Handler) -> RestCountriesProvider:
        return RestCountriesProvider(build_client(REST_URL, 5.0, httpx.MockTransport(handler)))
    return _make


@pytest.fixture
def now_provider():
    def _make(handler: Handler) -> CountriesNowProvider:
        return CountriesNowProvider(build_client(NOW_URL, 5.0, httpx.MockTransport(handler)))
    return _make


@pytest.fixture
def settings():
    return Settings(rest_countries_url=REST_URL, countries_now_url=NOW_URL, upstream_timeout=5.0)


@pytest.fixture
def upstreams(norway_facts, norway_cities, norway_population):
    """
    Handler simulating both upstreams for Norway. Individual tests override
    behaviour through the returned dict, e.g. upstreams["facts"] = 404.
    """
    state = {"facts": norway_facts, "cities": norway_cities, "population": norway_population}

    def _reply(outcome):
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, json={"error": True, "msg": "not found"})
        return httpx.Response(200, json=outcome)

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if request.url.host == "restcountries.test":
            if path.rstrip("/") == "/v3.1/alpha":
                return _reply(state.get("rest_probe", 404))
            if path.upper().endswith("/NO") and request.url.params.get("fields") == "cca3":
                return _reply(state.get("iso3", {"cca3": "NOR"}))
            if path.upper().endswith("/NO"):
                return _reply(state["facts"])
            return httpx.Response(404, json={"status": 404, "message": "Not Found"})
        if request.url.host == "countriesnow.test":
            if path.endswith("/countries/cities"):
                return _reply(state["cities"])
            if path.endswith("/countries/population"):
                return _reply(state["population"])
            return _reply(state.get("now_probe", 404))
        raise httpx.ConnectError("unknown host", request=request)

    state["handler"] = handler
    return state


@pytest.fixture
def context(settings, upstreams):
    ctx = build_context(settings, transport=httpx.MockTransport(upstreams["handler"]))
    yield ctx
    ctx.close()
