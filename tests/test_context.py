from country_info.config import Settings
from country_info.context import build_context

from conftest import NOW_URL, REST_URL


def test_clients_carry_configured_timeout_and_base_urls():
    settings = Settings(rest_countries_url=REST_URL, countries_now_url=NOW_URL, upstream_timeout=7.5)
    ctx = build_context(settings)
    try:
        assert ctx.rest_countries._client.timeout.read == 7.5
        assert ctx.countries_now._client.timeout.read == 7.5
        assert ctx.rest_countries.base_url == REST_URL
        assert ctx.countries_now.base_url == NOW_URL
    finally:
        ctx.close()


def test_services_share_one_start_time(context):
    assert context.status._started_at == context.started_at
    assert context.population._resolver is context.resolver
