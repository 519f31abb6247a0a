import random

import pytest
from payments.gateway import set_gateway
from payments.gateway.simulated_adapter import SimulatedGateway


@pytest.fixture()
def gateway():
    """An instant, never-randomly-failing gateway installed for the test."""
    simulated = SimulatedGateway(latency_seconds=0, failure_rate=0.0, rng=random.Random(42))
    set_gateway(simulated)
    return simulated
