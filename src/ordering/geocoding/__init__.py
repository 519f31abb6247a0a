"""Geocoder factory.

Provides get_geocoder() / set_geocoder() to swap implementations:
- GoogleGeocoder (``GEOCODER_ADAPTER=google``, the default)
- FakeGeocoder (``GEOCODER_ADAPTER=fake``) for development and testing
"""

import os

from ordering.geocoding.port import GeocodeResult, Geocoder

__all__ = ["GeocodeResult", "Geocoder", "get_geocoder", "reset_geocoder", "set_geocoder"]

_current_geocoder: Geocoder | None = None


def _build_geocoder() -> Geocoder:
    adapter = os.environ.get("GEOCODER_ADAPTER", "google").lower()
    if adapter == "fake":
        from ordering.geocoding.fake_adapter import FakeGeocoder

        return FakeGeocoder()
    if adapter == "google":
        from ordering.geocoding.google_adapter import GoogleGeocoder

        return GoogleGeocoder(
            api_key=os.environ.get("GOOGLE_MAPS_API_KEY"),
            timeout=float(os.environ.get("GEOCODING_TIMEOUT_SECONDS", "5.0")),
        )
    raise ValueError(f"Unknown GEOCODER_ADAPTER: {adapter}")


def get_geocoder() -> Geocoder:
    """Return the current geocoder, building it from the environment on first use."""
    global _current_geocoder
    if _current_geocoder is None:
        _current_geocoder = _build_geocoder()
    return _current_geocoder


def set_geocoder(geocoder: Geocoder) -> None:
    """Override the active geocoder (useful for tests)."""
    global _current_geocoder
    _current_geocoder = geocoder


def reset_geocoder() -> None:
    """Reset so the next call rebuilds from the environment."""
    global _current_geocoder
    _current_geocoder = None
