"""Fixtures for tests that exercise the assembled FastAPI application.

These go through the real middleware stack: domain context, correlation IDs
and the error handlers registered on the app.
"""

import pytest
from fastapi.testclient import TestClient
from ordering.geocoding import set_geocoder
from ordering.geocoding.fake_adapter import FakeGeocoder
from payments.gateway import set_gateway
from payments.gateway.simulated_adapter import SimulatedGateway


@pytest.fixture()
def geocoder():
    fake = FakeGeocoder()
    set_geocoder(fake)
    return fake


@pytest.fixture()
def gateway():
    simulated = SimulatedGateway(latency_seconds=0, failure_rate=0.0)
    set_gateway(simulated)
    return simulated


@pytest.fixture()
def client(geocoder, gateway):
    from app import app

    return TestClient(app, raise_server_exceptions=False)
