"""CountryAggregator: merge, capital policy, all-or-nothing failure handling."""
from unittest.mock import Mock

import pytest

from country_info.errors import CitiesUnavailable, UpstreamBadStatus, UpstreamLogicalError, UpstreamUnreachable
from country_info.providers.countriesnow import CountriesNowProvider
from country_info.providers.restcountries import RestCountriesProvider, RestCountry
from country_info.services.country_service import CountryAggregator


@pytest.fixture
def facts(norway_facts):
    m = Mock(spec=RestCountriesProvider)
    m.fetch_country.return_value = RestCountry.model_validate(norway_facts)
    return m


@pytest.fixture
def cities(norway_cities):
    m = Mock(spec=CountriesNowProvider)
    m.fetch_cities.return_value = norway_cities["data"]
    return m


@pytest.fixture(params=[False, True], ids=["sequential", "fan-out"])
def aggregator(request, facts, cities):
    return CountryAggregator(facts, cities, fan_out=request.param)


def test_merges_facts_and_default_three_cities(aggregator, facts, cities):
    info = aggregator.get_country_info("no")

    facts.fetch_country.assert_called_once_with("NO")
    cities.fetch_cities.assert_called_once_with("NO")
    assert info.name == "Norway"
    assert info.continents == ["Europe"]
    assert info.population == 5379475
    assert info.languages["nob"] == "Norwegian Bokmål"
    assert info.borders == ["FIN", "SWE", "RUS"]
    assert info.flag == "🇳🇴"
    assert info.capital == "Oslo"
    assert info.cities == ["Oslo", "Bergen", "Trondheim"]


def test_city_limit_is_applied(aggregator):
    assert aggregator.get_country_info("NO", "2").cities == ["Oslo", "Bergen"]
    assert aggregator.get_country_info("NO", 5).cities == ["Oslo", "Bergen", "Trondheim", "Stavanger", "Tromsø"]
    assert len(aggregator.get_country_info("NO", "abc").cities) == 3


def test_empty_capital_list_gives_empty_capital(aggregator, facts, norway_facts):
    facts.fetch_country.return_value = RestCountry.model_validate(dict(norway_facts, capital=[]))
    info = aggregator.get_country_info("NO")
    assert info.capital == ""
    assert info.name == "Norway"


def test_first_capital_is_used(aggregator, facts, norway_facts):
    facts.fetch_country.return_value = RestCountry.model_validate(
        dict(norway_facts, capital=["Pretoria", "Bloemfontein", "Cape Town"])
    )
    assert aggregator.get_country_info("ZA").capital == "Pretoria"


def test_facts_failure_never_calls_cities(facts, cities):
    facts.fetch_country.side_effect = UpstreamBadStatus("RestCountries API", 404)
    aggregator = CountryAggregator(facts, cities)

    with pytest.raises(UpstreamBadStatus):
        aggregator.get_country_info("XX")
    cities.fetch_cities.assert_not_called()


def test_facts_failure_propagates_in_fan_out_mode(facts, cities):
    facts.fetch_country.side_effect = UpstreamUnreachable("RestCountries API", "ConnectError")
    aggregator = CountryAggregator(facts, cities, fan_out=True)

    with pytest.raises(UpstreamUnreachable):
        aggregator.get_country_info("NO")


def test_cities_failure_fails_whole_request(aggregator, cities):
    cause = UpstreamLogicalError("CountriesNow API", "country not found")
    cities.fetch_cities.side_effect = cause

    with pytest.raises(CitiesUnavailable) as exc:
        aggregator.get_country_info("NO")
    assert exc.value.cause is cause
    assert "country not found" in exc.value.message
