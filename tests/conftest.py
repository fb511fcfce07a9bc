# shared fixtures: recorded provider payloads and a client pointed at the default urls
# the requests_mock fixture (requests-mock plugin) stands in for the network in every test

import json
from pathlib import Path
import pytest
from weatheradvice import config
from weatheradvice.client import OpenMeteoClient
from weatheradvice.service import WeatherLookup

DATA = Path(__file__).parent / "data"
GEO_URL = config.GEOCODING_URL
FORECAST_URL = config.FORECAST_URL


def load(name):
    return json.loads((DATA / name).read_text(encoding="utf-8"))


@pytest.fixture
def payload():
    return load


@pytest.fixture
def geocode_payload():
    return load("varanasi_geocode.json")


@pytest.fixture
def forecast_payload():
    return load("varanasi_forecast.json")


@pytest.fixture
def client():
    return OpenMeteoClient(timeout=2.0)


@pytest.fixture
def weather(client):
    with WeatherLookup(client=client, max_workers=2) as wl:
        yield wl


@pytest.fixture
def varanasi(requests_mock, geocode_payload, forecast_payload):
    # happy path for both hops
    requests_mock.get(GEO_URL, json=geocode_payload)
    requests_mock.get(FORECAST_URL, json=forecast_payload)
    return requests_mock
