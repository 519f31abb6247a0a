"""Checkout Load Testing: Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:3000

    # Checkout journey only:
    locust -f loadtests/locustfile.py CheckoutUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py CheckoutUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import os
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.checkout import CartBrowsingUser, CheckoutUser  # noqa: F401

logger = logging.getLogger("loadtest")

# Simulated gateway settings applied before the run (non-production servers only)
GATEWAY_LATENCY_SECONDS = float(os.environ.get("LOADTEST_GATEWAY_LATENCY", "0.2"))
GATEWAY_FAILURE_RATE = float(os.environ.get("LOADTEST_GATEWAY_FAILURE_RATE", "0.1"))


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Fires globally for all scenarios, so no per-task wiring is needed.
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker and tune the simulated gateway when the load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    if not environment.host:
        return
    try:
        resp = requests.post(
            f"{environment.host}/payment/gateway/configure",
            json={"latencySeconds": GATEWAY_LATENCY_SECONDS, "failureRate": GATEWAY_FAILURE_RATE},
            timeout=5,
        )
        print(f"[LOADTEST] Gateway configuration: {resp.status_code} {resp.text}")
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not configure gateway: {e}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the server's health when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    if not environment.host:
        return
    try:
        resp = requests.get(f"{environment.host}/health", timeout=5)
        print(f"[LOADTEST] Final health: {resp.status_code} {resp.text}\n")
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch health: {e}\n")
