"""Configurable fake geocoder for development and testing.

Makes no network calls. By default it answers every non-blank query with
the same fixed coordinates; tests can register per-query results or make
it return nothing.
"""

from ordering.geocoding.port import GeocodeResult, Geocoder, build_query

DEFAULT_RESULT = GeocodeResult(latitude=40.7128, longitude=-74.006, formatted_address="New York, NY, USA")


class FakeGeocoder(Geocoder):
    """Configurable fake geocoder."""

    def __init__(self, default: GeocodeResult | None = DEFAULT_RESULT) -> None:
        self.default = default
        self.results: dict[str, GeocodeResult | None] = {}
        self.calls: list[str] = []

    def configure(self, address: str, result: GeocodeResult | None) -> None:
        """Answer ``address`` (as ``"<city>, <country>"``) with ``result``."""
        self.results[address] = result

    def resolve(self, city: str, country: str) -> GeocodeResult | None:
        address = build_query(city, country)
        self.calls.append(address)
        if not address:
            return None
        return self.results.get(address, self.default)
